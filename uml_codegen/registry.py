"""
Generator registry for the supported declaration kinds.

The set of kinds is closed (``DeclarationKind``); callers pick a
generator explicitly by kind, or by the kind of a classifier.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config
from .core.model import Classifier, ClassifierKind
from .core.tree import DeclarationKind


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


# Which declaration a classifier of each kind turns into
CLASSIFIER_DECLARATIONS = {
    ClassifierKind.INTERFACE: DeclarationKind.INTERFACE,
    ClassifierKind.CLASS: DeclarationKind.CLASS,
    ClassifierKind.ENUMERATION: DeclarationKind.ENUM,
}

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class GeneratorRegistry:
    """Registry mapping declaration kinds to generator classes."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[DeclarationKind, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, DeclarationKind] = {}

    def register(
        self,
        kind: Union[DeclarationKind, str],
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a declaration kind.

        Args:
            kind: Declaration kind (or its name)
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this kind
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the kind is unknown, the class is invalid or
                an alias conflicts
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        kind = self._coerce_kind(kind)

        if kind in self._generators and not replace:
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != kind.value]
        for alias_key in alias_keys:
            existing = self._aliases.get(alias_key)
            if existing is not None and existing != kind and not replace:
                raise RegistryError(
                    f"Alias '{alias_key}' already points to '{existing.value}'"
                )

        self._generators[kind] = generator_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = kind

    def unregister(self, kind: Union[DeclarationKind, str]):
        """Unregister a generator and its aliases."""
        kind = self._coerce_kind(kind)
        self._generators.pop(kind, None)

        for alias in [a for a, target in self._aliases.items() if target == kind]:
            del self._aliases[alias]

    def _coerce_kind(self, kind: Union[DeclarationKind, str]) -> DeclarationKind:
        if isinstance(kind, DeclarationKind):
            return kind

        key = str(kind).lower()
        if key in self._aliases:
            return self._aliases[key]
        try:
            return DeclarationKind(key)
        except ValueError:
            valid = ", ".join(k.value for k in DeclarationKind)
            raise RegistryError(f"Unknown declaration kind '{kind}'. Valid: {valid}")

    def get_generator_class(self, kind: Union[DeclarationKind, str]) -> Type[CodeGenerator]:
        """
        Get generator class for a declaration kind.

        Raises:
            RegistryError: If no generator is registered for the kind
        """
        kind = self._coerce_kind(kind)

        if kind in self._generators:
            return self._generators[kind]

        available = ", ".join(self.list_kinds()) or "none"
        raise RegistryError(
            f"No generator registered for '{kind.value}' declarations. "
            f"Available: {available}"
        )

    def create_generator(
        self, kind: Union[DeclarationKind, str], config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Create generator instance for a declaration kind.

        Args:
            kind: Declaration kind or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Raises:
            RegistryError: If generator creation fails
        """
        generator_class = self.get_generator_class(kind)

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(custom_config=config)
            elif config is None:
                final_config = load_config()
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {kind} generator: {e}") from e

    def generator_for(self, classifier: Classifier, config: ConfigSource = None) -> CodeGenerator:
        """Generator matching the kind of a classifier."""
        kind = CLASSIFIER_DECLARATIONS.get(classifier.kind)
        if kind is None:
            raise RegistryError(
                f"Classifiers of kind '{classifier.kind.value}' are not generated "
                f"({classifier.qualified_name})"
            )
        return self.create_generator(kind, config)

    def list_kinds(self) -> List[str]:
        """Registered declaration kinds."""
        return sorted(kind.value for kind in self._generators)

    def get_aliases_for_kind(self, kind: Union[DeclarationKind, str]) -> List[str]:
        kind = self._coerce_kind(kind)
        return sorted(alias for alias, target in self._aliases.items() if target == kind)

    def is_supported(self, kind: Union[DeclarationKind, str]) -> bool:
        try:
            return self._coerce_kind(kind) in self._generators
        except RegistryError:
            return False

    def get_kind_info(self, kind: Union[DeclarationKind, str]) -> Dict[str, Any]:
        """
        Get information about a registered kind.

        Raises:
            RegistryError: If kind not found
        """
        generator_class = self.get_generator_class(kind)
        generator = generator_class(load_config())
        kind = self._coerce_kind(kind)

        return {
            "kind": kind.value,
            "language": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_kind(kind),
            "module": generator_class.__module__,
        }


# Global registry instance - created once, read-only afterwards
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.java import JavaEnumGenerator, JavaInterfaceGenerator

    registry.register(DeclarationKind.INTERFACE, JavaInterfaceGenerator)
    registry.register(DeclarationKind.ENUM, JavaEnumGenerator, aliases=["enumeration"])


# Public API functions using the global registry


def get_generator(kind: Union[DeclarationKind, str], config: ConfigSource = None) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(kind, config)


def get_generator_for(classifier: Classifier, config: ConfigSource = None) -> CodeGenerator:
    """Get the generator matching a classifier's kind."""
    return get_registry().generator_for(classifier, config)


def list_supported_kinds() -> List[str]:
    """List all declaration kinds with a registered generator."""
    return get_registry().list_kinds()


def is_kind_supported(kind: Union[DeclarationKind, str]) -> bool:
    return get_registry().is_supported(kind)


def get_kind_info(kind: Union[DeclarationKind, str]) -> Dict[str, Any]:
    """Get information about a supported declaration kind."""
    return get_registry().get_kind_info(kind)


def list_all_kind_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported declaration kinds."""
    return {kind: get_kind_info(kind) for kind in list_supported_kinds()}
