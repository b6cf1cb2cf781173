"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings, and the
per-call generation context.
"""

import json
from pathlib import Path
from typing import Dict, Any, FrozenSet, Optional, Union
from dataclasses import dataclass, field, fields, asdict, replace

from .model import NAMESPACE_SEPARATOR


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


JAVADOC_STYLES = {"line", "block"}


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_dir: Optional[str] = None
    root_package: str = ""

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Documentation
    add_comments: bool = True
    javadoc_style: str = "line"  # line: one tag per line, block: one per comment

    # Type handling
    collection_type: str = "java.util.Collection"

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size


@dataclass(frozen=True)
class GenerationContext:
    """
    Request-scoped generation settings.

    Created for every generation call and passed explicitly to every
    collaborator that needs it. ``package`` is the output package of the
    classifier being generated, ``type_parameters`` the generic names in
    scope at the current element.
    """

    root_package: str = ""
    package: str = ""
    type_parameters: FrozenSet[str] = frozenset()

    def with_package(self, package: str) -> "GenerationContext":
        return replace(self, package=package)

    def with_type_parameters(self, names) -> "GenerationContext":
        return replace(self, type_parameters=self.type_parameters | frozenset(names))

    @property
    def root_segments(self) -> list:
        """Root package split into segments; accepts ``a::b`` and ``a.b``."""
        normalized = self.root_package.replace(NAMESPACE_SEPARATOR, ".")
        return [s for s in normalized.split(".") if s]


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "root_package": "",
            "indent_size": 4,
            "use_tabs": False,
            "add_comments": True,
            "javadoc_style": "line",
            "collection_type": "java.util.Collection",
            "custom": {},
        }

    def get_config(
        self,
        language: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = dict(self._configs.get(language, {}))
        base_config["custom"] = dict(base_config.get("custom", {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)

        errors = self.validate_config(config)
        if errors:
            raise ConfigError("; ".join(errors))

        return config

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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of supported languages."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of validation errors
        """
        errors = []

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            errors.append(f"Invalid indent_size: {config.indent_size}")

        if config.javadoc_style not in JAVADOC_STYLES:
            errors.append(f"Invalid javadoc_style: {config.javadoc_style}")

        if config.line_ending not in {"\n", "\r\n"}:
            errors.append(f"Invalid line_ending: {config.line_ending!r}")

        if not config.collection_type:
            errors.append("collection_type must not be empty")

        return errors


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "java",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
