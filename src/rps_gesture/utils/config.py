"""
Configuration management utilities.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from omegaconf import OmegaConf

# Configuration files shipped with the package
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

MISSING_JOINT_POLICIES = ("origin", "unknown")


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory containing configuration files
                (defaults to the packaged config directory)
        """
        self.config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
        self._configs = {}

    def load_config(self, config_name: str) -> Dict[str, Any]:
        """
        Load a configuration file.

        Args:
            config_name: Name of the configuration file (without .yaml extension)

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            yaml.YAMLError: If configuration file is invalid
        """
        config_path = self.config_dir / f"{config_name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}

            config = OmegaConf.create(config)
            self._configs[config_name] = config

            return config

        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in {config_path}: {e}")

    def get_config(self, config_name: str) -> Dict[str, Any]:
        """
        Get a previously loaded configuration.

        Args:
            config_name: Name of the configuration

        Returns:
            Configuration dictionary

        Raises:
            KeyError: If configuration hasn't been loaded
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not loaded. Call load_config() first.")

        return self._configs[config_name]

    def save_config(self, config: Dict[str, Any], config_name: str) -> None:
        """
        Save a configuration to file.

        Args:
            config: Configuration dictionary
            config_name: Name for the configuration file
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.config_dir / f"{config_name}.yaml"

        if OmegaConf.is_config(config):
            config = OmegaConf.to_container(config, resolve=True)

        with open(config_path, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2)

    def merge_configs(self, base_config: str, override_config: str) -> Dict[str, Any]:
        """
        Merge two configurations with override taking precedence.

        Args:
            base_config: Base configuration name
            override_config: Override configuration name

        Returns:
            Merged configuration dictionary
        """
        base = self.get_config(base_config)
        override = self.get_config(override_config)

        return OmegaConf.merge(base, override)

    def validate_config(self, config: Dict[str, Any], schema: Dict[str, Any]) -> bool:
        """
        Validate configuration against a schema.

        Every key of the schema must be present in the configuration;
        nested dictionaries are checked recursively.

        Args:
            config: Configuration to validate
            schema: Schema definition

        Returns:
            True if valid, False otherwise
        """
        for key, value in schema.items():
            if key not in config:
                return False

            if isinstance(value, dict):
                section = config[key]
                if not (isinstance(section, dict) or OmegaConf.is_dict(section)):
                    return False
                if not self.validate_config(section, value):
                    return False

        return True

    def get_default_config(self, config_type: str) -> Dict[str, Any]:
        """
        Get default configuration for a specific type.

        Args:
            config_type: Type of configuration (classifier)

        Returns:
            Default configuration dictionary
        """
        defaults = {
            "classifier": {
                "classifier": {
                    "missing_joints": "origin",
                    "log_finger_states": True
                },
                "logging": {
                    "level": "INFO",
                    "console_output": True,
                    "file_output": False,
                    "json_output": False,
                    "log_dir": "logs"
                }
            }
        }

        return defaults.get(config_type, {})

    def load_with_defaults(self, config_name: str, config_type: str) -> Dict[str, Any]:
        """
        Load a configuration file merged over the defaults of a config type.

        Args:
            config_name: Name of the configuration file (without .yaml extension)
            config_type: Type whose get_default_config() fills missing keys

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            yaml.YAMLError: If configuration file is invalid
        """
        loaded = self.load_config(config_name)
        merged = OmegaConf.merge(OmegaConf.create(self.get_default_config(config_type)), loaded)
        self._configs[config_name] = merged
        return merged

    def load_or_default(self, config_name: str) -> Dict[str, Any]:
        """
        Load a configuration merged over its defaults.

        Keys missing from the file fall back to get_default_config(); a missing
        file yields the defaults alone.

        Args:
            config_name: Name of the configuration

        Returns:
            Configuration dictionary
        """
        defaults = OmegaConf.create(self.get_default_config(config_name))

        try:
            loaded = self.load_config(config_name)
        except FileNotFoundError:
            self._configs[config_name] = defaults
            return defaults

        merged = OmegaConf.merge(defaults, loaded)
        self._configs[config_name] = merged
        return merged
