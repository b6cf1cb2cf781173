"""
Java code generator implementation.

Generates Java interfaces and enumerations from model classifiers.
"""

from abc import abstractmethod
from typing import Callable, Dict, List, Optional, Any, Tuple, Union
from pathlib import Path
from enum import Enum

from ...logging_config import get_logger
from ...core.config import GeneratorConfig, GenerationContext
from ...core.documentation import DocumentationTransfer
from ...core.generator import (
    CodeGenerator,
    MalformedTemplateSignatureError,
    UnresolvedGeneralizationError,
)
from ...core.model import Classifier, ClassifierKind, TemplateSignature
from ...core.tree import (
    CompilationUnit,
    DeclarationKind,
    EnumConstant,
    MethodDeclaration,
    PackageDeclaration,
    ParameterDeclaration,
    TypeDeclaration,
)
from .accessors import AccessorSynthesizer
from .naming import create_java_naming_resolver, validate_java_package_name
from .renderer import JavaRenderer
from .types import (
    JavaTypeConfig,
    JavaTypeResolver,
    TypeResolutionError,
    build_package_name,
    resolve_element_type,
)

logger = get_logger(__name__)


class EmitterState(Enum):
    """Construction steps of a declaration, in execution order."""

    EMPTY = "empty"
    PACKAGE_SET = "package_set"
    HEADER_BUILT = "header_built"
    INHERITANCE_APPLIED = "inheritance_applied"
    GENERICS_APPLIED = "generics_applied"
    DOC_APPLIED = "doc_applied"
    METHODS_EMITTED = "methods_emitted"
    ACCESSORS_EMITTED = "accessors_emitted"
    RENDERED = "rendered"


def generate_package(classifier: Classifier, context: GenerationContext) -> PackageDeclaration:
    """Package declaration for the classifier's enclosing namespace."""
    return PackageDeclaration(build_package_name(classifier.qualified_name, context))


class JavaGenerator(CodeGenerator):
    """Shared plumbing of the Java declaration generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

        # Collaborators are fixed at construction and hold no per-call state
        self.type_resolver = JavaTypeResolver(
            JavaTypeConfig(
                collection_type=self.config.collection_type,
                type_overrides=self.config.custom.get("type_overrides", {}),
            )
        )
        self.naming = create_java_naming_resolver()
        self.documentation = DocumentationTransfer(
            style=self.config.javadoc_style, enabled=self.config.add_comments
        )
        self.renderer = JavaRenderer(self.template_engine, self.config.indent)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def render(self, unit: CompilationUnit) -> str:
        return self.renderer.render(unit)

    def generate(self, classifier: Classifier, root_package: Optional[str] = None) -> str:
        code = super().generate(classifier, root_package)
        logger.debug("%s: %s", classifier.qualified_name, EmitterState.RENDERED.value)
        return code

    def output_path(self, classifier: Classifier, root_package: Optional[str] = None) -> Path:
        """Relative path of the generated file: package dirs plus ``Name.java``."""
        package = build_package_name(
            classifier.qualified_name, self.create_context(root_package)
        )
        parts = package.split(".") if package else []
        return Path(*parts, f"{classifier.name}{self.file_extension}")

    def validate_classifier(self, classifier: Classifier) -> List[str]:
        """Add Java package name checks to the base validation."""
        warnings = super().validate_classifier(classifier)

        package = build_package_name(classifier.qualified_name, self.create_context())
        for error in validate_java_package_name(package):
            warnings.append(f"{classifier.qualified_name}: {error}")

        return warnings

    # Steps shared by interface and enum generation

    def _set_package(self, classifier, context, unit):
        unit.package = generate_package(classifier, context)
        return context.with_package(unit.package.name)

    def _apply_documentation(self, classifier, context, unit):
        unit.main_type.javadoc = self.documentation.to_javadoc(classifier.comments)
        return context

    @abstractmethod
    def _steps(self) -> List[Tuple[EmitterState, Callable]]:
        """Ordered construction steps of the declaration."""
        pass

    def build(self, classifier: Classifier, context: GenerationContext) -> CompilationUnit:
        """Run the construction steps in order; each may narrow the context."""
        unit = CompilationUnit()
        logger.debug("%s: %s", classifier.qualified_name, EmitterState.EMPTY.value)
        for state, step in self._steps():
            context = step(classifier, context, unit)
            logger.debug("%s: %s", classifier.qualified_name, state.value)
        return unit

    def _template_parameter_names(
        self,
        signature: Optional[TemplateSignature],
        classifier: Classifier,
        element_name: str,
    ) -> List[str]:
        """Generic parameter names of a template signature, in order."""
        names = []
        if signature is None:
            return names

        for index, parameter in enumerate(signature.parameters):
            element = parameter.parametered_element if parameter else None
            label = element.label if element is not None else None
            if not label or not label.isidentifier():
                raise MalformedTemplateSignatureError(
                    f"{classifier.qualified_name}: template parameter #{index} of "
                    f"'{element_name}' is not bound to a usable type",
                    classifier.qualified_name,
                    element_name,
                )
            names.append(label)

        return names


class JavaInterfaceGenerator(JavaGenerator):
    """Generates a Java interface from a classifier."""

    @property
    def declaration_kind(self) -> DeclarationKind:
        return DeclarationKind.INTERFACE

    def _steps(self):
        """Package, header, inheritance, generics, Javadoc, methods, accessors."""
        return [
            (EmitterState.PACKAGE_SET, self._set_package),
            (EmitterState.HEADER_BUILT, self._build_header),
            (EmitterState.INHERITANCE_APPLIED, self._apply_inheritance),
            (EmitterState.GENERICS_APPLIED, self._apply_generics),
            (EmitterState.DOC_APPLIED, self._apply_documentation),
            (EmitterState.METHODS_EMITTED, self._emit_methods),
            (EmitterState.ACCESSORS_EMITTED, self._emit_accessors),
        ]

    def _build_header(self, classifier, context, unit):
        unit.types.append(
            TypeDeclaration(name=classifier.name, kind=DeclarationKind.INTERFACE)
        )
        return context

    def _apply_inheritance(self, classifier, context, unit):
        declaration = unit.main_type
        for generalization in classifier.generalizations:
            general = generalization.general
            if general is None:
                raise UnresolvedGeneralizationError(
                    f"{classifier.qualified_name}: generalization has no general classifier",
                    classifier.qualified_name,
                    "<none>",
                )
            if general.kind == ClassifierKind.UNRESOLVED:
                raise UnresolvedGeneralizationError(
                    f"{classifier.qualified_name}: generalization refers to undeclared "
                    f"classifier '{general.qualified_name}'",
                    classifier.qualified_name,
                    general.qualified_name,
                    general.qualified_name,
                )
            try:
                super_type = self.type_resolver.resolve_type(
                    general.name, general.qualified_name, context
                )
            except TypeResolutionError as e:
                raise UnresolvedGeneralizationError(
                    f"{classifier.qualified_name}: cannot resolve supertype "
                    f"'{general.qualified_name}': {e}",
                    classifier.qualified_name,
                    general.name,
                    general.qualified_name,
                ) from e
            declaration.super_interfaces.append(super_type.name)
        return context

    def _apply_generics(self, classifier, context, unit):
        names = self._template_parameter_names(
            classifier.template_signature, classifier, classifier.name
        )
        unit.main_type.type_parameters.extend(names)
        return context.with_type_parameters(names)

    def _emit_methods(self, classifier, context, unit):
        for operation in classifier.operations:
            unit.main_type.methods.append(
                self._build_method(classifier, operation, context)
            )
        return context

    def _emit_accessors(self, classifier, context, unit):
        synthesizer = AccessorSynthesizer(
            self.type_resolver, self.naming, self.documentation
        )
        unit.main_type.methods.extend(synthesizer.synthesize(classifier, context))
        return context

    def _build_method(self, classifier, operation, context) -> MethodDeclaration:
        """Abstract method for an owned operation."""
        type_parameters = self._template_parameter_names(
            operation.template_signature, classifier, operation.name
        )
        context = context.with_type_parameters(type_parameters)
        classifier_name = classifier.qualified_name

        parameters = []
        for parameter in operation.owned_parameters:
            logger.debug("Parameter: %s - Operation: %s", parameter.name, operation.name)
            java_type = resolve_element_type(
                self.type_resolver,
                parameter.type,
                context,
                classifier_name,
                f"{operation.name}.{parameter.name}",
            )
            parameters.append(
                ParameterDeclaration(
                    name=self.naming.parameter_name(parameter.name),
                    type=java_type.name,
                )
            )

        return_type = "void"
        return_parameter = operation.return_parameter
        if return_parameter is not None:
            return_type = resolve_element_type(
                self.type_resolver,
                return_parameter.type,
                context,
                classifier_name,
                f"{operation.name}.{return_parameter.name or 'return'}",
            ).name

        thrown = [
            resolve_element_type(
                self.type_resolver,
                raised,
                context,
                classifier_name,
                f"{operation.name}.throws",
            ).name
            for raised in operation.raised_exceptions
        ]

        return MethodDeclaration(
            name=operation.name,
            return_type=return_type,
            parameters=parameters,
            type_parameters=type_parameters,
            thrown_exceptions=thrown,
            javadoc=self.documentation.to_javadoc(operation.comments),
        )


class JavaEnumGenerator(JavaGenerator):
    """Generates a Java enum from an enumeration classifier."""

    @property
    def declaration_kind(self) -> DeclarationKind:
        return DeclarationKind.ENUM

    def _steps(self):
        """Package, header with literals, Javadoc. Generalizations and generics are ignored."""
        return [
            (EmitterState.PACKAGE_SET, self._set_package),
            (EmitterState.HEADER_BUILT, self._build_header),
            (EmitterState.DOC_APPLIED, self._apply_documentation),
        ]

    def _build_header(self, classifier, context, unit):
        declaration = TypeDeclaration(name=classifier.name, kind=DeclarationKind.ENUM)
        for literal in classifier.literals:
            declaration.constants.append(
                EnumConstant(
                    name=literal.name,
                    javadoc=self.documentation.to_javadoc(literal.comments),
                )
            )
        unit.types.append(declaration)
        return context


# Factory functions
def create_interface_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> JavaInterfaceGenerator:
    """Create a Java interface generator with default configuration."""
    return JavaInterfaceGenerator(config)


def create_enum_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> JavaEnumGenerator:
    """Create a Java enum generator with default configuration."""
    return JavaEnumGenerator(config)
