"""
Declaration tree built by the generators and consumed by the renderer.

The nodes mirror the parts of a Java compilation unit that the
generators produce. Type references are stored as their rendered names.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class DeclarationKind(Enum):
    """Closed set of declaration variants a generator can emit."""

    INTERFACE = "interface"
    CLASS = "class"
    ENUM = "enum"


@dataclass
class Javadoc:
    """Documentation comment; every tag renders on its own line."""

    tags: List[str] = field(default_factory=list)


@dataclass
class PackageDeclaration:
    name: str = ""


@dataclass
class ParameterDeclaration:
    name: str
    type: str


@dataclass
class MethodDeclaration:
    """Abstract method signature (no body)."""

    name: str
    return_type: str = "void"
    parameters: List[ParameterDeclaration] = field(default_factory=list)
    type_parameters: List[str] = field(default_factory=list)
    thrown_exceptions: List[str] = field(default_factory=list)
    javadoc: Optional[Javadoc] = None


@dataclass
class EnumConstant:
    name: str
    javadoc: Optional[Javadoc] = None


@dataclass
class TypeDeclaration:
    """Interface, class or enum declaration with its members."""

    name: str
    kind: DeclarationKind = DeclarationKind.INTERFACE
    modifiers: List[str] = field(default_factory=lambda: ["public"])
    type_parameters: List[str] = field(default_factory=list)
    super_interfaces: List[str] = field(default_factory=list)
    methods: List[MethodDeclaration] = field(default_factory=list)
    constants: List[EnumConstant] = field(default_factory=list)
    javadoc: Optional[Javadoc] = None


@dataclass
class CompilationUnit:
    """One generated source file."""

    package: Optional[PackageDeclaration] = None
    types: List[TypeDeclaration] = field(default_factory=list)

    @property
    def main_type(self) -> Optional[TypeDeclaration]:
        return self.types[0] if self.types else None
