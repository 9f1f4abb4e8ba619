"""Offline sphere ray tracer with bounce-limited specular reflection.

One ray per pixel is cast from a pinhole camera, tested against every
sphere in the scene, and bounced off the closest hit up to a fixed number
of times. The image is written as plain-text PPM (P3) or PNG.

Subpackages:
    core: Vectors, colors, rays, the reference tracer, the Taichi
        integrator, the image buffer and the render loop
    geometry: The sphere primitive and its intersection test
    camera: Pinhole camera ray generation
    scene: Kernel-side sphere storage and the demo scene
    preview: PPM and PNG export

Modules that declare Taichi fields (``spheretrace.core.integrator`` and
``spheretrace.scene.intersection``) are not imported here; import them
after ``ti.init()``.
"""

__version__ = "0.1.0"
