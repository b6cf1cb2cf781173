"""
Base generator interface for all declaration kinds.

Defines the contract that every generator implements and the errors
raised when a classifier cannot be turned into code.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Union
from pathlib import Path

from ..logging_config import get_logger
from .config import GeneratorConfig, GenerationContext, load_config
from .model import Classifier
from .templates import TemplateEngine, TemplateError, create_template_engine
from .tree import CompilationUnit, DeclarationKind

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ModelResolutionError(GeneratorError):
    """A model element could not be mapped to the target language."""

    def __init__(
        self,
        message: str,
        classifier_name: str,
        element_name: str,
        type_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.classifier_name = classifier_name
        self.element_name = element_name
        self.type_name = type_name


class UnresolvedTypeError(ModelResolutionError):
    """Attribute, parameter or exception type cannot be resolved."""

    pass


class UnresolvedGeneralizationError(ModelResolutionError):
    """Supertype of a generalization cannot be resolved."""

    pass


class MalformedTemplateSignatureError(ModelResolutionError):
    """Template parameter is not bound to a usable type."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all declaration generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(self.language_name, custom_config=config)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    @abstractmethod
    def declaration_kind(self) -> DeclarationKind:
        """Declaration variant this generator emits."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def create_context(self, root_package: Optional[str] = None) -> GenerationContext:
        """Fresh request-scoped context; falls back to the configured root."""
        return GenerationContext(root_package=root_package or self.config.root_package or "")

    @abstractmethod
    def build(self, classifier: Classifier, context: GenerationContext) -> CompilationUnit:
        """
        Build the declaration tree for one classifier.

        Args:
            classifier: Classifier to transform
            context: Request-scoped generation context

        Returns:
            Compilation unit holding the generated declaration
        """
        pass

    @abstractmethod
    def render(self, unit: CompilationUnit) -> str:
        """Serialize a declaration tree into source text."""
        pass

    def generate(self, classifier: Classifier, root_package: Optional[str] = None) -> str:
        """
        Generate source text for a single classifier.

        Args:
            classifier: Classifier to generate code for
            root_package: Root package stripped from output packages

        Returns:
            Generated source code
        """
        context = self.create_context(root_package)
        unit = self.build(classifier, context)
        code = self.format_code(self.render(unit))
        logger.info(
            "Generated %s %s (%d chars)",
            self.declaration_kind.value,
            classifier.qualified_name,
            len(code),
        )
        return code

    def validate_classifier(self, classifier: Classifier) -> List[str]:
        """
        Check a classifier for suspicious but non-fatal structure.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for attribute in classifier.attributes:
            if attribute.lower < 0:
                warnings.append(
                    f"Attribute {classifier.qualified_name}.{attribute.name} has "
                    f"negative lower bound {attribute.lower}"
                )
            if attribute.upper >= 0 and attribute.lower > attribute.upper:
                warnings.append(
                    f"Attribute {classifier.qualified_name}.{attribute.name} has "
                    f"lower bound {attribute.lower} above upper bound {attribute.upper}"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and
        ends the text with exactly one line ending.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        line_ending = self.config.line_ending
        return line_ending.join(formatted_lines) + line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    classifier: Classifier,
    root_package: Optional[str] = None,
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Generator instance
        classifier: Classifier to generate code for
        root_package: Root package context for this call

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_classifier(classifier)
        code = generator.generate(classifier, root_package)

        metadata = {
            "language": generator.language_name,
            "declaration_kind": generator.declaration_kind.value,
            "file_extension": generator.file_extension,
            "classifier": classifier.qualified_name,
            "attribute_count": len(classifier.attributes),
            "operation_count": len(classifier.operations),
        }

        return GenerationResult(code, warnings, metadata)

    except (GeneratorError, TemplateError) as e:
        logger.error("Generation failed for %s: %s", classifier.qualified_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
