"""
Configuration management for enum generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .naming import DEFAULT_FIELD_PATTERN

logger = get_logger(__name__)

DEFAULT_ENUM_JAVADOC = 'Key "{key}" for property with value "{value}".'

PATH_FIELDS = ("base_dir", "output_dir")

# Only these placeholders are replaced, other braces such as {@link X} stay
JAVADOC_PLACEHOLDER = re.compile(r"\{(0|1|key|value)\}")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class EnumConfig:
    """Settings of one generation run. Read-only once built."""

    # Input settings
    base_dir: Path = Path("src/main/resources")
    files: Tuple[str, ...] = ()
    source_encoding: str = "UTF-8"

    # Output settings
    output_dir: Path = Path("target/generated-sources/enum")
    package_name: Optional[str] = None
    target_encoding: str = "UTF-8"
    language: str = "java"

    # Key handling
    prefix: str = ""
    prefixed_only: bool = False
    field_pattern: str = DEFAULT_FIELD_PATTERN

    # Type and comment settings
    implement: Optional[str] = None
    line_length: int = 80
    enum_javadoc: str = DEFAULT_ENUM_JAVADOC

    # Run behaviour
    fail_fast: bool = True

    def __post_init__(self):
        object.__setattr__(self, "base_dir", Path(self.base_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "files", tuple(str(f) for f in self.files))
        if self.prefix is None:
            object.__setattr__(self, "prefix", "")

    def format_javadoc(self, key: str, value: str) -> str:
        """Render the per-field comment template for one entry."""
        replacements = {"0": key, "key": key, "1": value, "value": value}
        return JAVADOC_PLACEHOLDER.sub(
            lambda match: replacements[match.group(1)], self.enum_javadoc
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        for name in PATH_FIELDS:
            result[name] = str(result[name])
        result["files"] = list(self.files)
        return result


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "language": "java",
            "line_length": 80,
            "enum_javadoc": DEFAULT_ENUM_JAVADOC,
            "field_pattern": DEFAULT_FIELD_PATTERN,
            "source_encoding": "UTF-8",
            "target_encoding": "UTF-8",
        }

    def get_config(
        self,
        language: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EnumConfig:
        """
        Get complete configuration.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If a file cannot be read or a setting is invalid
        """
        # Start with defaults
        base_config = self._configs.get(language.lower(), {"language": language}).copy()

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(
                {k: v for k, v in custom_config.items() if v is not None}
            )

        config = self._dict_to_config(base_config)

        problems = self.validate_config(config)
        if problems:
            raise ConfigError("; ".join(problems))

        logger.debug("Loaded configuration: %s", config)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file, anchoring relative paths to it."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        for name in PATH_FIELDS:
            if name in config and not Path(config[name]).is_absolute():
                config[name] = str(path.parent / config[name])

        logger.info("Read configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EnumConfig:
        """Convert dictionary to EnumConfig instance."""
        known_fields = {f.name for f in fields(EnumConfig)}

        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        if isinstance(config_dict.get("files"), str):
            raise ConfigError("'files' must be a list of paths")

        try:
            return EnumConfig(**config_dict)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of languages with default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: EnumConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of problems (empty if valid)
        """
        problems = []

        if not isinstance(config.line_length, int) or config.line_length < 1:
            problems.append(f"Invalid line_length: {config.line_length}")

        try:
            re.compile(config.field_pattern)
        except re.error as e:
            problems.append(f"Invalid field_pattern {config.field_pattern!r}: {e}")

        if not isinstance(config.enum_javadoc, str):
            problems.append(f"Invalid enum_javadoc: {config.enum_javadoc!r}")

        if config.prefixed_only and not config.prefix:
            logger.warning("prefixed_only is set without a prefix; all keys pass")

        return problems


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
    language: str = "java",
) -> EnumConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file
        language: Target language name

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

