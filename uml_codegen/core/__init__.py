"""
Core code generation components.

Provides the source model, base generator classes and utilities used
by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    ModelResolutionError,
    UnresolvedTypeError,
    UnresolvedGeneralizationError,
    MalformedTemplateSignatureError,
    GenerationResult,
    generate_code,
)
from .model import (
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
    UniqueList,
    ModelError,
    convert_model_dict,
    iter_classifiers,
)
from .naming import NameSanitizer, NamingCase, NamingResolver, singularize
from .config import (
    GeneratorConfig,
    GenerationContext,
    ConfigManager,
    ConfigError,
    load_config,
)
from .documentation import DocumentationTransfer
from .templates import TemplateEngine, TemplateError, create_template_engine
from .tree import DeclarationKind

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "ModelResolutionError",
    "UnresolvedTypeError",
    "UnresolvedGeneralizationError",
    "MalformedTemplateSignatureError",
    "GenerationResult",
    "generate_code",
    # Source model
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
    "UniqueList",
    "ModelError",
    "convert_model_dict",
    "iter_classifiers",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "NamingResolver",
    "singularize",
    # Configuration system
    "GeneratorConfig",
    "GenerationContext",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Documentation and templates
    "DocumentationTransfer",
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "DeclarationKind",
]
