"""Tests for the command-line entry point, configuration and logging setup.

The CLI tests use the python backend: the taichi backend would call
ti.init() again and invalidate the session's fields.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so later tests do not write to
    streams pytest has already closed."""
    yield
    logger = logging.getLogger("spheretrace")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestRenderConfig:
    """Tests for RenderConfig validation."""

    def test_defaults_reproduce_demo(self):
        from spheretrace.config import RenderConfig

        config = RenderConfig()
        assert (config.width, config.height, config.bounces) == (800, 600, 3)
        assert config.backend == "taichi"
        assert config.arch == "cpu"
        assert config.aspect_ratio == 800 / 600

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"width": 0}, "positive"),
            ({"height": -5}, "positive"),
            ({"bounces": -1}, "Bounce count"),
            ({"backend": "opengl"}, "Unknown backend"),
            ({"arch": "tpu"}, "Unknown arch"),
        ],
    )
    def test_rejects_invalid_values(self, kwargs, match):
        from spheretrace.config import RenderConfig

        with pytest.raises(ValueError, match=match):
            RenderConfig(**kwargs)


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        from spheretrace.cli import parse_args

        args = parse_args(["out.ppm"])
        assert args.output == "out.ppm"
        assert (args.width, args.height, args.bounces) == (800, 600, 3)
        assert args.backend == "taichi"
        assert args.format == "ppm"
        assert args.log_level == "WARNING"

    def test_options(self):
        from spheretrace.cli import parse_args

        args = parse_args(
            ["-", "--width", "40", "--height", "30", "--bounces", "1", "--backend", "python"]
        )
        assert args.output == "-"
        assert (args.width, args.height, args.bounces) == (40, 30, 1)
        assert args.backend == "python"

    @pytest.mark.parametrize("argv", [[], ["a.ppm", "b.ppm"], ["out.ppm", "--backend", "cuda"]])
    def test_usage_errors_exit_nonzero(self, argv, capsys):
        from spheretrace.cli import parse_args

        with pytest.raises(SystemExit) as excinfo:
            parse_args(argv)
        assert excinfo.value.code != 0
        assert "usage:" in capsys.readouterr().err


class TestMain:
    """Tests for main()."""

    def test_writes_ppm_file(self, tmp_path):
        from spheretrace.cli import main

        output = tmp_path / "demo.ppm"
        code = main([str(output), "--width", "8", "--height", "6", "--backend", "python"])

        assert code == 0
        data = output.read_bytes()
        assert data.startswith(b"P3\n8 6\n255\n")
        lines = data.split(b"\n")
        # Header (3 lines), 6 rows, trailing empty split
        assert len(lines) == 3 + 6 + 1
        assert all(len(row.split()) == 8 * 3 for row in lines[3:9])

    def test_writes_ppm_to_stdout(self, capsysbinary):
        from spheretrace.cli import main

        code = main(["-", "--width", "4", "--height", "3", "--bounces", "0", "--backend", "python"])

        assert code == 0
        assert capsysbinary.readouterr().out.startswith(b"P3\n4 3\n255\n")

    def test_writes_png_file(self, tmp_path):
        from PIL import Image

        from spheretrace.cli import main

        output = tmp_path / "demo.png"
        code = main(
            [str(output), "--width", "8", "--height", "6", "--backend", "python", "--format", "png"]
        )

        assert code == 0
        with Image.open(output) as loaded:
            assert loaded.size == (8, 6)

    def test_png_to_stdout_fails(self, capsys):
        from spheretrace.cli import main

        code = main(["-", "--width", "2", "--height", "2", "--backend", "python", "--format", "png"])

        assert code == 1
        assert "PNG output cannot be written to stdout" in capsys.readouterr().err

    def test_invalid_size_fails(self, tmp_path, capsys):
        from spheretrace.cli import main

        output = tmp_path / "never.ppm"
        code = main([str(output), "--width", "0", "--backend", "python"])

        assert code == 1
        assert "Error:" in capsys.readouterr().err
        assert not output.exists()

    def test_unwritable_output_fails(self, tmp_path, capsys):
        from spheretrace.cli import main

        output = tmp_path / "missing" / "out.ppm"
        code = main([str(output), "--width", "2", "--height", "2", "--backend", "python"])

        assert code == 1
        assert "Error:" in capsys.readouterr().err


class TestSetupLogging:
    """Tests for the logging configuration."""

    def test_configures_package_logger(self):
        from spheretrace.logging_config import LOGGER_NAME, setup_logging

        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)

        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG
        # Repeated calls replace the handler instead of stacking them
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        from spheretrace.logging_config import LOGGER_NAME, setup_logging

        log_file = tmp_path / "render.log"
        setup_logging(logging.INFO, str(log_file))
        logging.getLogger(f"{LOGGER_NAME}.test").info("hello from test")

        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")