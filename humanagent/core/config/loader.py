"""Configuration loader with multi-level hierarchy."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "HUMANAGENT_"

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {"level": "WARNING", "format": "console", "file": None},
    "knowledge": {"path": None},
}


class ConfigLoader:
    """Load and merge configuration from multiple sources.

    Hierarchy (later overrides earlier):
    1. Built-in defaults (DEFAULT_CONFIG)
    2. Default config (config/default.yaml)
    3. Environment config (config/environments/{env}.yaml)
    4. Overrides dict (provided programmatically, e.g. CLI options)
    5. Environment variables (HUMANAGENT_*)
    """

    def __init__(self, config_dir: Path | str | None = None):
        """Initialize config loader.

        Args:
            config_dir: Configuration directory (defaults to ./config)
        """
        if config_dir is None:
            # Default to config directory in project root
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self.config_dir = Path(config_dir)

    def load(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """Load configuration with full hierarchy.

        Args:
            overrides: Configuration dict applied on top of the YAML files

        Returns:
            Merged configuration dictionary
        """
        # 1. Built-in defaults, 2. default.yaml
        config = self._deep_merge(copy.deepcopy(DEFAULT_CONFIG), self._load_yaml(self.config_dir / "default.yaml"))

        # 3. Merge environment-specific config
        env = os.getenv(f"{ENV_PREFIX}ENV", "development")
        env_config_path = self.config_dir / f"environments/{env}.yaml"
        if env_config_path.exists():
            config = self._deep_merge(config, self._load_yaml(env_config_path))

        # 4. Merge programmatic overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        # 5. Override with environment variables
        config = self._apply_env_overrides(config)

        return config

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML as dictionary
        """
        if not path.exists():
            return {}

        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
            return content if content else {}

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary (base is not modified)
        """
        result = dict(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Override config with environment variables.

        Environment variables starting with HUMANAGENT_ will override config values.
        Example: HUMANAGENT_LOGGING_LEVEL overrides config["logging"]["level"]

        Args:
            config: Configuration dictionary

        Returns:
            Config with environment variable overrides
        """
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX) and key != f"{ENV_PREFIX}ENV":
                path = key[len(ENV_PREFIX):].lower().split("_")
                self._set_nested(config, path, value)

        return config

    def _set_nested(self, config: dict[str, Any], path: list[str], value: str) -> None:
        """Set nested configuration value.

        Args:
            config: Configuration dictionary
            path: Path to nested key (e.g., ["logging", "level"])
            value: Value to set
        """
        current = config
        for key in path[:-1]:
            if key not in current or current[key] is None:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # Can't traverse non-dict
                return
            current = current[key]

        current[path[-1]] = self._convert_value(value)

    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type.

        Args:
            value: String value from environment variable

        Returns:
            Converted value (bool, int, float, or str)
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value


# Global config loader instance
_config_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get global configuration loader instance.

    Returns:
        ConfigLoader: Global config loader
    """
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Load configuration (convenience function).

    Args:
        overrides: Configuration provided programmatically

    Returns:
        Merged configuration dictionary
    """
    return get_config_loader().load(overrides=overrides)
