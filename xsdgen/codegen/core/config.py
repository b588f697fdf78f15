"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, asdict, fields

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    # Output settings
    output_file: Optional[str] = None
    package_name: str = ""  # empty emits a fragment without package clause

    # Naming settings
    prefix: str = ""
    exported: bool = False

    # Elements sharing a name with different structure: "first" or "error"
    conflict_strategy: str = "first"

    # Output shape
    add_comments: bool = True
    format_output: bool = True


_BOOL_FIELDS = {"exported", "add_comments", "format_output"}
_STR_FIELDS = {"package_name", "prefix", "conflict_strategy"}
VALID_CONFLICT_STRATEGIES = {"first", "error"}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults, then file settings, then overrides merged together
        """
        base_config = self._defaults.copy()

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration option(s): {', '.join(unknown)}")

        for key, value in config_dict.items():
            if key in _BOOL_FIELDS and not isinstance(value, bool):
                raise ConfigError(f"Option '{key}' must be a boolean, got {value!r}")
            if key in _STR_FIELDS and not isinstance(value, str):
                raise ConfigError(f"Option '{key}' must be a string, got {value!r}")

        if config_dict.get("conflict_strategy") not in VALID_CONFLICT_STRATEGIES:
            raise ConfigError(
                f"Invalid conflict_strategy: {config_dict.get('conflict_strategy')!r} "
                f"(expected one of {', '.join(sorted(VALID_CONFLICT_STRATEGIES))})"
            )

        return GeneratorConfig(**config_dict)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(
                f"Failed to save configuration to {path}: {str(e)}"
            ) from e

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration values that are legal but suspicious.

        Returns:
            List of validation warnings
        """
        # Imported here to keep core free of language modules at import time
        from ..languages.go.naming import validate_go_package_name

        warnings = []

        if config.package_name:
            warnings.extend(validate_go_package_name(config.package_name))

        if config.prefix and not re.fullmatch(r"[A-Za-z][A-Za-z0-9_\- ]*", config.prefix):
            warnings.append(f"Prefix '{config.prefix}' will not form a valid Go identifier")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
