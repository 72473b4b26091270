import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager that loads from YAML and merges with defaults."""

    DEFAULTS = {
        "server": {
            "host": "0.0.0.0",
            "port": 3000,
            "debug": False,
        },
        "docs": {
            "title": "SDET Challenge API",
            "version": "1.0.0",
            "description": (
                "API for SDET automation testing challenges. "
                "Provides log data for parsing and analysis."
            ),
            "contact": "SDET Challenge",
        },
    }

    def __init__(self, config_path=None):
        self._config = copy.deepcopy(self.DEFAULTS)

        if config_path is not None:
            try:
                with open(config_path, "r") as f:
                    user_config = yaml.safe_load(f)

                if user_config and isinstance(user_config, dict):
                    self._config = self._deep_merge(self._config, user_config)
            except FileNotFoundError:
                pass
            except yaml.YAMLError:
                logger.warning("Invalid YAML in %s, using defaults", config_path)

    @classmethod
    def from_env(cls, default_path="config.yaml"):
        """Load from the file named by ``CONFIG_PATH``, else ``default_path``."""
        return cls(os.environ.get("CONFIG_PATH", default_path))

    @property
    def base_url(self):
        """Local URL the server is reachable at."""
        host = self._config["server"]["host"]
        if host in ("0.0.0.0", ""):
            host = "localhost"
        return f"http://{host}:{self._config['server']['port']}"

    @staticmethod
    def _deep_merge(base, override):
        """Recursively merge override dict into base dict."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def get(self, key, default=None):
        """Get a top-level config key."""
        return self._config.get(key, default)

    def __getitem__(self, key):
        return self._config[key]

    def __contains__(self, key):
        return key in self._config
