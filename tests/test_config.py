"""
Tests for circlegrowth.config
"""

import os
import tempfile
import unittest

from circlegrowth.config import Config, EngineConfig, HostConfig, load_config


class TestConfig(unittest.TestCase):
    """Tests for configuration loading"""

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.engine.radius, 40.0)
        self.assertEqual(config.engine.tolerance, 0.1)
        self.assertEqual(config.engine.selection_multiplier, 2654435761)
        self.assertTrue(config.engine.check_bounds)
        self.assertFalse(config.engine.place_all_candidates)
        self.assertEqual(config.host.seed_mode, "corner")
        self.assertEqual(config.render.ring_fractions, [1.0, 0.75, 0.5])

    def test_from_dict(self):
        config = Config.from_dict(
            {
                "log_level": "DEBUG",
                "engine": {"radius": 20, "check_bounds": False},
                "host": {"seed_mode": "corners", "step_delay": 0.5},
            }
        )
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.engine.radius, 20)
        self.assertEqual(config.engine.tolerance, 0.1)
        self.assertFalse(config.engine.check_bounds)
        self.assertEqual(config.host.seed_mode, "corners")
        self.assertEqual(config.host.step_delay, 0.5)

    def test_unknown_nested_key(self):
        with self.assertRaises(TypeError):
            Config.from_dict({"engine": {"diameter": 80}})

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            EngineConfig(radius=0)
        with self.assertRaises(ValueError):
            EngineConfig(tolerance=-0.1)
        with self.assertRaises(ValueError):
            HostConfig(seed_mode="middle")
        with self.assertRaises(ValueError):
            HostConfig(step_delay=-1)

    def test_yaml_round_trip(self):
        config = Config()
        config.engine.radius = 25.0
        config.host.reseed_on_resize = True
        config.render.hue = 120.0

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            config.to_yaml(path)
            loaded = Config.from_yaml(path)

        self.assertEqual(loaded, config)

    def test_load_config_defaults_when_missing(self):
        self.assertEqual(load_config(None), Config())
        self.assertEqual(load_config("/nonexistent/config.yaml"), Config())

    def test_load_shipped_config(self):
        path = os.path.join(os.path.dirname(__file__), "..", "configs", "default_config.yaml")
        self.assertEqual(load_config(path), Config())


if __name__ == "__main__":
    unittest.main()
