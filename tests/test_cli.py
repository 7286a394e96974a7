"""
Tests for the command-line interface
"""

import io
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import matplotlib

matplotlib.use("Agg")

from circlegrowth.cli import (
    CONSOLE_HANDLER,
    FILE_HANDLER,
    build_config,
    main,
    parse_args,
    setup_logging,
)


class TestCli(unittest.TestCase):
    """Tests for circlegrowth.cli"""

    def setUp(self):
        self._handlers = list(logging.getLogger().handlers)
        self._level = logging.getLogger().level

    def tearDown(self):
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            if handler not in self._handlers:
                handler.close()
                root_logger.removeHandler(handler)
        root_logger.setLevel(self._level)

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_build_config_overrides(self):
        args = parse_args(
            ["1000", "800", "--radius", "20", "--no-bounds-check", "--seed-corners", "-d", "0.5"]
        )
        config = build_config(args)
        self.assertEqual(config.engine.radius, 20)
        self.assertFalse(config.engine.check_bounds)
        self.assertEqual(config.host.seed_mode, "corners")
        self.assertEqual(config.host.step_delay, 0.5)

    def write_config(self, tmp, text):
        path = os.path.join(tmp, "config.yaml")
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_config_step_delay_kept_without_delay_flag(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self.write_config(tmp, "host:\n  step_delay: 3.0\n")
            config = build_config(parse_args(["100", "100", "--config", path]))
        self.assertEqual(config.host.step_delay, 3.0)

    def test_delay_flag_overrides_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self.write_config(tmp, "host:\n  step_delay: 3.0\n")
            config = build_config(parse_args(["100", "100", "--config", path, "-d", "0"]))
        self.assertEqual(config.host.step_delay, 0.0)

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            build_config(parse_args(["100", "100", "-d", "-1"]))

    def test_radius_override_goes_through_engine_validation(self):
        with self.assertRaises(ValueError):
            build_config(parse_args(["100", "100", "--radius", "0"]))
        with tempfile.TemporaryDirectory() as tmp:
            path = self.write_config(tmp, "engine:\n  tolerance: 0.5\n")
            config = build_config(parse_args(["100", "100", "--config", path, "--radius", "25"]))
        self.assertEqual(config.engine.radius, 25)
        self.assertEqual(config.engine.tolerance, 0.5)

    def test_setup_logging_adds_handlers_once(self):
        with tempfile.TemporaryDirectory() as tmp:
            setup_logging("WARNING", tmp)
            setup_logging("DEBUG", tmp)
            names = [h.get_name() for h in logging.getLogger().handlers]
            self.assertEqual(names.count(CONSOLE_HANDLER), 1)
            self.assertEqual(names.count(FILE_HANDLER), 1)
            self.assertEqual(logging.getLogger().level, logging.DEBUG)
            self.tearDown()

    def test_repeated_main_does_not_duplicate_console_handler(self):
        self.run_main(["100", "100", "--steps", "1", "-d", "0", "--log-level", "WARNING"])
        self.run_main(["100", "100", "--steps", "1", "-d", "0", "--log-level", "WARNING"])
        names = [h.get_name() for h in logging.getLogger().handlers]
        self.assertEqual(names.count(CONSOLE_HANDLER), 1)

    def test_run_steps(self):
        code, out = self.run_main(["1000", "800", "--steps", "5", "-d", "0", "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        self.assertIn("Circles: 6", out)
        self.assertIn("Step: 6", out)

    def test_render_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.png")
            code, _ = self.run_main(
                ["400", "300", "--steps", "3", "-d", "0", "--output", path, "--log-level", "WARNING"]
            )
            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(path))

    def test_missing_config_file(self):
        code, out = self.run_main(["100", "100", "--config", "/nonexistent/config.yaml"])
        self.assertEqual(code, 1)
        self.assertIn("not found", out)

    def test_invalid_radius(self):
        code, _ = self.run_main(["100", "100", "--radius", "0"])
        self.assertEqual(code, 1)

    def test_negative_viewport(self):
        code, _ = self.run_main(["-100", "100", "--log-level", "CRITICAL"])
        self.assertEqual(code, 1)

    def test_config_file_and_log_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_path = os.path.join(tmp, "config.yaml")
            log_dir = os.path.join(tmp, "logs")
            with open(config_path, "w") as f:
                f.write(f"log_level: WARNING\nlog_dir: {log_dir}\nengine:\n  radius: 20\n")
            code, out = self.run_main(["200", "200", "--steps", "2", "-d", "0", "--config", config_path])
            self.tearDown()
            self.assertEqual(code, 0)
            self.assertEqual(len(os.listdir(log_dir)), 1)
            self.assertIn("Circles: 3", out)


if __name__ == "__main__":
    unittest.main()
