"""
Configuration tests.
"""

import unittest

from mcp_calculator.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_NAME,
    ENV_LOG_LEVEL,
    ENV_SERVER_NAME,
    ConfigError,
    ServerConfig,
    normalize_log_level,
)


class TestServerConfig(unittest.TestCase):

    def test_defaults(self):
        config = ServerConfig()
        self.assertEqual(config.server_name, DEFAULT_SERVER_NAME)
        self.assertEqual(config.log_level, DEFAULT_LOG_LEVEL)

    def test_from_env(self):
        config = ServerConfig.from_env({ENV_SERVER_NAME: "Math", ENV_LOG_LEVEL: "debug"})
        self.assertEqual(config.server_name, "Math")
        self.assertEqual(config.log_level, "DEBUG")

    def test_from_env_falls_back_to_defaults(self):
        config = ServerConfig.from_env({})
        self.assertEqual(config, ServerConfig())

    def test_invalid_log_level(self):
        with self.assertRaises(ConfigError):
            ServerConfig(log_level="LOUD")
        with self.assertRaises(ConfigError):
            ServerConfig.from_env({ENV_LOG_LEVEL: ""})

    def test_empty_server_name(self):
        with self.assertRaises(ConfigError):
            ServerConfig(server_name="  ")

    def test_normalize_log_level(self):
        self.assertEqual(normalize_log_level(" warning "), "WARNING")
        self.assertIsInstance(ConfigError("x"), ValueError)


if __name__ == "__main__":
    unittest.main()
