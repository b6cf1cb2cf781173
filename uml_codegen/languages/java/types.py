"""
Java-specific type system for code generation.

Maps model type references (simple name plus qualified name) onto Java
type names, deciding between simple and fully qualified references.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...core.config import GenerationContext
from ...core.generator import UnresolvedTypeError
from ...core.model import ClassifierKind, split_qualified_name


class TypeResolutionError(Exception):
    """A type reference cannot be mapped to a Java type."""

    def __init__(self, type_name: str, reason: str = ""):
        message = f"Cannot resolve type '{type_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.type_name = type_name


# Model primitive types and their Java counterparts
UML_PRIMITIVE_MAP = {
    "String": "String",
    "Integer": "Integer",
    "Boolean": "Boolean",
    "Real": "Double",
    "UnlimitedNatural": "Long",
}

JAVA_PRIMITIVES = {
    "boolean",
    "byte",
    "char",
    "short",
    "int",
    "long",
    "float",
    "double",
    "void",
}

BOXED_TYPES = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "short": "Short",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
}

# java.lang types are always referenced by simple name
JAVA_LANG_TYPES = {
    "Object",
    "String",
    "Boolean",
    "Byte",
    "Character",
    "Short",
    "Integer",
    "Long",
    "Float",
    "Double",
    "Number",
    "Void",
    "Throwable",
    "Exception",
    "Error",
    "RuntimeException",
    "IllegalArgumentException",
    "IllegalStateException",
    "UnsupportedOperationException",
}

# Namespaces that hold primitive type libraries in modelling tools
PRIMITIVE_LIBRARIES = {
    "PrimitiveTypes",
    "UMLPrimitiveTypes",
    "JavaPrimitiveTypes",
    "EcorePrimitiveTypes",
}


@dataclass(frozen=True)
class JavaType:
    """
    Immutable representation of a resolved Java type.

    ``name`` is what gets written into the source, ``base_name`` the
    simple name without package or type arguments.
    """

    name: str
    base_name: str = field(default="")
    is_primitive: bool = field(default=False)
    is_collection: bool = field(default=False)
    element_type: Optional["JavaType"] = field(default=None)

    def __post_init__(self):
        if not self.base_name:
            base = self.name.split("<", 1)[0].rsplit(".", 1)[-1]
            object.__setattr__(self, "base_name", base)

    def boxed(self) -> "JavaType":
        """Wrapper type for primitives; other types are returned as is."""
        if not self.is_primitive or self.name not in BOXED_TYPES:
            return self
        return JavaType(BOXED_TYPES[self.name])


@dataclass
class JavaTypeConfig:
    """Configuration of the type mapping."""

    collection_type: str = "java.util.Collection"
    # Qualified model name (or simple name) -> Java type name
    type_overrides: Dict[str, str] = field(default_factory=dict)


def strip_root_package(segments: List[str], root_segments: List[str]) -> List[str]:
    """Drop the leading root-package segments when they match."""
    if root_segments and segments[: len(root_segments)] == root_segments:
        return segments[len(root_segments) :]
    return segments


def build_package_name(qualified_name: str, context: GenerationContext) -> str:
    """
    Java package of a classifier.

    ``a::b::c::Company`` becomes ``a.b.c``; a leading run of segments
    equal to the root package is removed first.
    """
    namespace = split_qualified_name(qualified_name)[:-1]
    return ".".join(strip_root_package(namespace, context.root_segments))


class JavaTypeResolver:
    """Resolves model type references into ``JavaType`` objects."""

    def __init__(self, config: Optional[JavaTypeConfig] = None):
        self.config = config or JavaTypeConfig()

    def resolve_type(
        self,
        simple_name: Optional[str],
        qualified_name: Optional[str],
        context: GenerationContext,
    ) -> JavaType:
        """
        Map a type reference onto a Java type.

        Types in the package being generated, java.lang types and
        generic parameters in scope use their simple name; everything
        else is fully qualified.

        Raises:
            TypeResolutionError: If the reference is empty or not a
                valid Java name
        """
        if not simple_name and not qualified_name:
            raise TypeResolutionError("<none>", "no type given")

        qualified_name = qualified_name or simple_name
        segments = split_qualified_name(qualified_name)
        if not segments:
            raise TypeResolutionError(qualified_name, "empty qualified name")
        simple_name = simple_name or segments[-1]

        override = self.config.type_overrides.get(
            qualified_name
        ) or self.config.type_overrides.get(simple_name)
        if override:
            return JavaType(override, is_primitive=override in JAVA_PRIMITIVES)

        if simple_name in context.type_parameters:
            return JavaType(simple_name)

        builtin = self._builtin_type(simple_name, segments)
        if builtin is not None:
            return builtin

        java_segments = strip_root_package(segments[:-1], context.root_segments)
        for segment in java_segments + [simple_name]:
            if not segment.isidentifier():
                raise TypeResolutionError(
                    qualified_name, f"'{segment}' is not a valid Java identifier"
                )

        package = ".".join(java_segments)
        if not package or package == context.package:
            return JavaType(simple_name)
        if package == "java.lang" and simple_name in JAVA_LANG_TYPES:
            return JavaType(simple_name)

        return JavaType(f"{package}.{simple_name}", base_name=simple_name)

    def resolve_collection_type(
        self,
        simple_name: Optional[str],
        qualified_name: Optional[str],
        context: GenerationContext,
    ) -> JavaType:
        """Collection of the resolved element type, primitives boxed."""
        element = self.resolve_type(simple_name, qualified_name, context).boxed()
        collection = self.config.collection_type
        return JavaType(
            f"{collection}<{element.name}>",
            base_name=collection.rsplit(".", 1)[-1],
            is_collection=True,
            element_type=element,
        )

    def _builtin_type(self, simple_name: str, segments: List[str]) -> Optional[JavaType]:
        """Primitive and java.lang types that need no package."""
        unqualified = len(segments) == 1
        from_library = len(segments) > 1 and segments[0] in PRIMITIVE_LIBRARIES

        if not (unqualified or from_library):
            return None

        if simple_name in JAVA_PRIMITIVES:
            return JavaType(simple_name, is_primitive=True)
        if simple_name in UML_PRIMITIVE_MAP:
            return JavaType(UML_PRIMITIVE_MAP[simple_name])
        if unqualified and simple_name in JAVA_LANG_TYPES:
            return JavaType(simple_name)
        return None


def resolve_element_type(
    resolver: JavaTypeResolver,
    model_type,
    context: GenerationContext,
    classifier_name: str,
    element_name: str,
    collection: bool = False,
) -> JavaType:
    """
    Resolve the type of a model element, failing with full context.

    Args:
        resolver: Type resolver to use
        model_type: Classifier referenced by the element, or None
        context: Request-scoped generation context
        classifier_name: Qualified name of the classifier being generated
        element_name: Attribute, parameter or exception name for errors
        collection: Wrap the type in the configured collection type

    Raises:
        UnresolvedTypeError: If the type is missing or cannot be mapped
    """
    if model_type is None:
        raise UnresolvedTypeError(
            f"{classifier_name}: element '{element_name}' has no type",
            classifier_name,
            element_name,
        )
    if model_type.kind == ClassifierKind.UNRESOLVED:
        raise UnresolvedTypeError(
            f"{classifier_name}: element '{element_name}' refers to undeclared "
            f"type '{model_type.qualified_name}'",
            classifier_name,
            element_name,
            model_type.qualified_name,
        )

    resolve =resolver.resolve_collection_type if collection else resolver.resolve_type
    try:
        return resolve(model_type.name, model_type.qualified_name, context)
    except TypeResolutionError as e:
        raise UnresolvedTypeError(
            f"{classifier_name}: element '{element_name}' has unresolvable "
            f"type '{model_type.qualified_name}': {e}",
            classifier_name,
            element_name,
            model_type.qualified_name,
        ) from e
