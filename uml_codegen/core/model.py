"""
Core source-model representation for code generation.

Class-diagram elements (classifiers, attributes, operations, ...) as
plain dataclasses, plus conversion of a JSON model document into that
graph. Generators only read these objects, they never modify them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional
from enum import Enum

from ..logging_config import get_logger

logger = get_logger(__name__)

NAMESPACE_SEPARATOR = "::"

# Type names that resolve without being declared in the model document
PRIMITIVE_TYPE_NAMES = {
    "String",
    "Integer",
    "Boolean",
    "Real",
    "UnlimitedNatural",
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


class ModelError(Exception):
    """Exception raised for malformed model documents."""

    pass


class ClassifierKind(Enum):
    """Kinds of classifiers found in a class diagram."""

    INTERFACE = "interface"
    CLASS = "class"
    ENUMERATION = "enumeration"
    DATATYPE = "datatype"
    PRIMITIVE = "primitive"
    # Placeholder for a reference the document does not declare
    UNRESOLVED = "unresolved"


class ParameterDirection(Enum):
    """Direction of an operation parameter."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"
    RETURN = "return"


class UniqueList:
    """Insertion-ordered sequence that rejects duplicate elements."""

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: List[Any] = []
        self._seen = set()
        if items:
            self.extend(items)

    def append(self, item: Any) -> None:
        if item in self._seen:
            raise ValueError(f"Duplicate element in unique list: {item!r}")
        self._seen.add(item)
        self._items.append(item)

    def extend(self, items: Iterable[Any]) -> None:
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, item: Any) -> bool:
        return item in self._seen

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UniqueList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"


def _unique(items: Any) -> UniqueList:
    return items if isinstance(items, UniqueList) else UniqueList(items)


@dataclass(eq=False)
class Comment:
    """Free-text documentation attached to a model element."""

    body: str = ""


@dataclass(eq=False)
class Attribute:
    """An owned attribute (property) of a classifier."""

    name: str
    type: Optional["Classifier"] = None
    lower: int = 1
    upper: int = 1  # -1 means unbounded
    comments: List[Comment] = field(default_factory=list)

    @property
    def is_many(self) -> bool:
        """Collection valued when the upper bound is negative."""
        return self.upper < 0


@dataclass(eq=False)
class Parameter:
    """A parameter of an operation, including its return parameter."""

    name: str
    type: Optional["Classifier"] = None
    direction: ParameterDirection = ParameterDirection.IN


@dataclass(eq=False)
class TemplateParameter:
    """Generic parameter; the element's label is the parameter name."""

    parametered_element: Optional["Classifier"] = None


@dataclass(eq=False)
class TemplateSignature:
    """Ordered generic parameters of a classifier or operation."""

    parameters: List[TemplateParameter] = field(default_factory=list)


@dataclass(eq=False)
class Operation:
    """An owned operation of a classifier."""

    name: str
    parameters: UniqueList = field(default_factory=UniqueList)
    raised_exceptions: UniqueList = field(default_factory=UniqueList)
    template_signature: Optional[TemplateSignature] = None
    comments: List[Comment] = field(default_factory=list)

    def __post_init__(self):
        self.parameters = _unique(self.parameters)
        self.raised_exceptions = _unique(self.raised_exceptions)

    @property
    def return_parameter(self) -> Optional[Parameter]:
        """The parameter with direction RETURN, if any."""
        for parameter in self.parameters:
            if parameter.direction == ParameterDirection.RETURN:
                return parameter
        return None

    @property
    def owned_parameters(self) -> List[Parameter]:
        """Parameters in declaration order, without the return parameter."""
        return [
            p for p in self.parameters if p.direction != ParameterDirection.RETURN
        ]


@dataclass(eq=False)
class Generalization:
    """Inheritance edge to a more general classifier."""

    general: Optional["Classifier"] = None


@dataclass(eq=False)
class EnumerationLiteral:
    """A literal of an enumeration."""

    name: str
    comments: List[Comment] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class Classifier:
    """A type of the source model (interface, class, enumeration, ...)."""

    name: str
    qualified_name: str = ""
    kind: ClassifierKind = ClassifierKind.INTERFACE
    attributes: UniqueList = field(default_factory=UniqueList)
    operations: UniqueList = field(default_factory=UniqueList)
    generalizations: UniqueList = field(default_factory=UniqueList)
    template_signature: Optional[TemplateSignature] = None
    comments: List[Comment] = field(default_factory=list)
    interface_realizations: UniqueList = field(default_factory=UniqueList)
    literals: UniqueList = field(default_factory=UniqueList)

    def __post_init__(self):
        if not self.qualified_name:
            self.qualified_name = self.name
        self.attributes = _unique(self.attributes)
        self.operations = _unique(self.operations)
        self.generalizations = _unique(self.generalizations)
        self.interface_realizations = _unique(self.interface_realizations)
        self.literals = _unique(self.literals)

    def __repr__(self) -> str:
        return f"Classifier({self.qualified_name!r}, kind={self.kind.value})"

    @property
    def label(self) -> str:
        """Display label of the element."""
        return self.name

    @property
    def namespace(self) -> List[str]:
        """Enclosing namespace segments, outermost first."""
        return split_qualified_name(self.qualified_name)[:-1]

    def add_attribute(self, attribute: Attribute) -> None:
        self.attributes.append(attribute)

    def add_operation(self, operation: Operation) -> None:
        self.operations.append(operation)

    def add_generalization(self, general: Optional["Classifier"]) -> Generalization:
        generalization = Generalization(general)
        self.generalizations.append(generalization)
        return generalization

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """Get attribute by name."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def get_operation(self, name: str) -> Optional[Operation]:
        """Get operation by name."""
        for operation in self.operations:
            if operation.name == name:
                return operation
        return None


def split_qualified_name(qualified_name: str) -> List[str]:
    """Split ``a::b::C`` into ``["a", "b", "C"]``."""
    return [s for s in qualified_name.split(NAMESPACE_SEPARATOR) if s]


def convert_model_dict(document: Dict[str, Any]) -> Dict[str, Classifier]:
    """
    Convert a JSON model document into classifiers.

    Args:
        document: Parsed model document with a ``classifiers`` list

    Returns:
        Dict mapping qualified name to Classifier, in document order

    Raises:
        ModelError: If the document structure is invalid
    """
    if not isinstance(document, dict) or "classifiers" not in document:
        raise ModelError("Model document must be an object with 'classifiers'")

    entries = document["classifiers"]
    if not isinstance(entries, list):
        raise ModelError("'classifiers' must be a list")

    classifiers: Dict[str, Classifier] = {}
    externals: Dict[str, Classifier] = {}

    # First pass: declare every classifier so references can be resolved
    for entry in entries:
        if not isinstance(entry, dict):
            raise ModelError(f"Classifier entry must be an object: {entry!r}")
        qualified_name = entry.get("qualifiedName") or entry.get("name")
        if not qualified_name:
            raise ModelError(f"Classifier without a name: {entry!r}")
        if qualified_name in classifiers:
            raise ModelError(f"Duplicate classifier: {qualified_name}")

        kind_str = entry.get("kind", "interface")
        try:
            kind = ClassifierKind(kind_str)
        except ValueError:
            kind = None
        if kind is None or kind == ClassifierKind.UNRESOLVED:
            raise ModelError(
                f"Unknown classifier kind '{kind_str}' for {qualified_name}"
            )

        classifiers[qualified_name] = Classifier(
            name=split_qualified_name(qualified_name)[-1],
            qualified_name=qualified_name,
            kind=kind,
        )

    def lookup(reference: Optional[str], scope: Dict[str, Classifier]):
        """
        Resolve a type reference; None when no type is given.

        A bare name that is neither in scope, declared nor primitive
        gets its own UNRESOLVED placeholder carrying the written name.
        """
        if not reference:
            return None
        if reference in scope:
            return scope[reference]
        if reference in classifiers:
            return classifiers[reference]
        if reference in PRIMITIVE_TYPE_NAMES:
            return externals.setdefault(
                reference,
                Classifier(reference, reference, ClassifierKind.PRIMITIVE),
            )
        if NAMESPACE_SEPARATOR in reference:
            # Declared outside this document
            return externals.setdefault(
                reference,
                Classifier(
                    split_qualified_name(reference)[-1],
                    reference,
                    ClassifierKind.DATATYPE,
                ),
            )
        logger.warning("Unresolved type reference: %s", reference)
        return _unresolved(reference)

    def build_signature(names: Optional[list], owner: str):
        if not names:
            return None, {}
        signature = TemplateSignature()
        scope = {}
        for name in names:
            element = None
            if name:
                element = Classifier(
                    name, f"{owner}{NAMESPACE_SEPARATOR}{name}", ClassifierKind.DATATYPE
                )
                scope[name] = element
            signature.parameters.append(TemplateParameter(element))
        return signature, scope

    # Second pass: populate features
    for entry in entries:
        qualified_name = entry.get("qualifiedName") or entry.get("name")
        classifier = classifiers[qualified_name]

        classifier.comments = _convert_comments(entry.get("comments"))
        classifier.template_signature, scope = build_signature(
            entry.get("templateParameters"), qualified_name
        )

        generals = _references(entry, "generalizations", qualified_name)
        for general in generals:
            target = classifiers.get(general)
            if target is None:
                logger.warning(
                    "Generalization of %s points to undeclared %s",
                    qualified_name,
                    general,
                )
                target = _unresolved(general)
            classifier.add_generalization(target)

        for realized in _references(entry, "interfaceRealizations", qualified_name):
            target = classifiers.get(realized)
            if target is not None:
                classifier.interface_realizations.append(target)

        for attr in entry.get("attributes", []):
            owner = f"{qualified_name}.{attr['name']}"
            classifier.add_attribute(
                Attribute(
                    name=attr["name"],
                    type=lookup(attr.get("type"), scope),
                    lower=_bound(attr, "lower", owner),
                    upper=_bound(attr, "upper", owner),
                    comments=_convert_comments(attr.get("comments")),
                )
            )

        for op in entry.get("operations", []):
            op_signature, op_scope = build_signature(
                op.get("templateParameters"),
                f"{qualified_name}{NAMESPACE_SEPARATOR}{op['name']}",
            )
            full_scope = {**scope, **op_scope}

            operation = Operation(
                name=op["name"],
                template_signature=op_signature,
                comments=_convert_comments(op.get("comments")),
            )
            for param in op.get("parameters", []):
                try:
                    direction = ParameterDirection(param.get("direction", "in"))
                except ValueError:
                    raise ModelError(
                        f"Unknown parameter direction '{param.get('direction')}' "
                        f"in {qualified_name}.{op['name']}"
                    )
                operation.parameters.append(
                    Parameter(
                        name=param.get("name", ""),
                        type=lookup(param.get("type"), full_scope),
                        direction=direction,
                    )
                )
            raised_names = _references(
                op, "raisedExceptions", f"{qualified_name}.{op['name']}"
            )
            for raised in raised_names:
                operation.raised_exceptions.append(lookup(raised, full_scope))

            classifier.add_operation(operation)

        for literal in entry.get("literals", []):
            if isinstance(literal, str):
                literal = {"name": literal}
            classifier.literals.append(
                EnumerationLiteral(
                    name=literal["name"],
                    comments=_convert_comments(literal.get("comments")),
                )
            )

    logger.debug("Converted model document with %d classifiers", len(classifiers))
    return classifiers


def _unresolved(reference: str) -> Classifier:
    """New placeholder per occurrence, so two dangling references never collide."""
    return Classifier(
        (split_qualified_name(reference) or [reference])[-1],
        reference,
        ClassifierKind.UNRESOLVED,
    )


def _references(entry: Dict[str, Any], key: str, owner: str) -> List[str]:
    """Reference list of an entry; a name listed twice is an error."""
    names = entry.get(key) or []
    seen = set()
    for name in names:
        if not isinstance(name, str) or not name:
            raise ModelError(f"Invalid reference in '{key}' of {owner}: {name!r}")
        if name in seen:
            raise ModelError(f"'{name}' listed twice in '{key}' of {owner}")
        seen.add(name)
    return names


def _bound(entry: Dict[str, Any], key: str, owner: str) -> int:
    value = entry.get(key, 1)
    # bool is an int subclass but never a multiplicity
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelError(f"Multiplicity '{key}' of {owner} must be an integer: {value!r}")
    return value


def _convert_comments(raw: Any) -> List[Comment]:
    """Comments may be a single string or a list of strings."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return [Comment(raw)]
    return [Comment(body or "") for body in raw]


def iter_classifiers(
    classifiers: Dict[str, Classifier], kinds: Iterable[ClassifierKind]
) -> Iterator[Classifier]:
    """Yield classifiers of the given kinds in document order."""
    wanted = set(kinds)
    for classifier in classifiers.values():
        if classifier.kind in wanted:
            yield classifier
