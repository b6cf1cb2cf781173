"""
UML Code Generation Module

Generates Java interfaces and enums from class-diagram models.
"""

from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_generator_for,
    list_supported_kinds,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    ModelResolutionError,
    UnresolvedTypeError,
    UnresolvedGeneralizationError,
    MalformedTemplateSignatureError,
    generate_code,
)
from .core.model import (
    Classifier,
    ClassifierKind,
    Attribute,
    Operation,
    Parameter,
    ParameterDirection,
    Generalization,
    TemplateSignature,
    TemplateParameter,
    Comment,
    EnumerationLiteral,
    ModelError,
    convert_model_dict,
    iter_classifiers,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.tree import CompilationUnit, DeclarationKind
from .languages.java import JavaInterfaceGenerator, JavaEnumGenerator
from .languages.java import generate_package as _package_declaration

# Version info
__version__ = "0.1.0"

ConfigArg = Optional[Union[GeneratorConfig, Dict[str, Any]]]

GENERATED_KINDS = (ClassifierKind.INTERFACE, ClassifierKind.ENUMERATION)


# Convenience functions
def generate_interface(
    classifier: Classifier, root_package: str = "", config: ConfigArg = None
) -> str:
    """
    Java interface source for a classifier.

    Raises:
        ModelResolutionError: If a type, supertype or template parameter
            of the classifier cannot be resolved
    """
    return JavaInterfaceGenerator(config).generate(classifier, root_package)


def generate_enum(
    classifier: Classifier, root_package: str = "", config: ConfigArg = None
) -> str:
    """Java enum source for an enumeration classifier."""
    return JavaEnumGenerator(config).generate(classifier, root_package)


def generate_package(classifier: Classifier, root_package: str = "") -> str:
    """
    Package clause alone, e.g. ``package a.b.c;`` plus a newline.

    Empty string when the classifier has no enclosing namespace.
    """
    generator = JavaInterfaceGenerator()
    context = generator.create_context(root_package)
    declaration = _package_declaration(classifier, context)
    if not declaration.name:
        return ""
    return generator.format_code(generator.render(CompilationUnit(declaration)))


def generate_from_model(
    model_dict: Dict[str, Any], root_package: str = "", config: ConfigArg = None
) -> Dict[str, GenerationResult]:
    """
    Generate every interface and enumeration of a model document.

    Args:
        model_dict: Parsed JSON model document
        root_package: Root package stripped from output packages
        config: Generator configuration dict or GeneratorConfig

    Returns:
        GenerationResult per qualified classifier name, in document order
    """
    classifiers = convert_model_dict(model_dict)

    generators = {}
    results = {}
    for classifier in iter_classifiers(classifiers, GENERATED_KINDS):
        if classifier.kind not in generators:
            generators[classifier.kind] = get_generator_for(classifier, config)
        results[classifier.qualified_name] = generate_code(
            generators[classifier.kind], classifier, root_package
        )

    return results


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "ModelResolutionError",
    "UnresolvedTypeError",
    "UnresolvedGeneralizationError",
    "MalformedTemplateSignatureError",
    "Classifier",
    "ClassifierKind",
    "Attribute",
    "Operation",
    "Parameter",
    "ParameterDirection",
    "Generalization",
    "TemplateSignature",
    "TemplateParameter",
    "Comment",
    "EnumerationLiteral",
    "ModelError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "DeclarationKind",
    "JavaInterfaceGenerator",
    "JavaEnumGenerator",
    "convert_model_dict",
    "generate_interface",
    "generate_enum",
    "generate_package",
    "generate_from_model",
    "get_generator",
    "list_supported_kinds",
    "load_config",
]
