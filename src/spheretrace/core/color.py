"""RGB color with saturating addition.

Channels are floats in [0, 1]. Adding two colors clamps each channel to
[0, 1] (light accumulation saturates). Scaling a color by a factor is only
defined for factors in [0, 1]: it models attenuation, never amplification,
and a factor outside that range raises instead of being clamped.
"""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class Color:
    """An RGB color.

    Attributes:
        r: Red channel in [0, 1].
        g: Green channel in [0, 1].
        b: Blue channel in [0, 1].
    """

    r: float
    g: float
    b: float

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    def add(self, other: Color) -> Color:
        """Add two colors, clamping every channel to [0, 1]."""
        return Color(
            _clamp(self.r + other.r),
            _clamp(self.g + other.g),
            _clamp(self.b + other.b),
        )

    def scale(self, factor: float) -> Color:
        """Attenuate the color by ``factor``.

        Args:
            factor: Attenuation in [0, 1].

        Returns:
            The scaled color.

        Raises:
            ValueError: If ``factor`` is outside [0, 1].
        """
        if not 0.0 <= factor <= 1.0:
            raise ValueError(f"Color scale factor must be in [0, 1], got {factor}")
        return Color(self.r * factor, self.g * factor, self.b * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __add__(self, other: Color) -> Color:
        return self.add(other)

    def __mul__(self, factor: float) -> Color:
        return self.scale(factor)

    def __rmul__(self, factor: float) -> Color:
        return self.scale(factor)
