"""
Serialization of declaration trees into Java source text.

Each node kind has its own template; nested parts are rendered first
and handed to the enclosing template as text.
"""

from typing import Optional

from ...core.templates import TemplateEngine
from ...core.tree import (
    CompilationUnit,
    DeclarationKind,
    EnumConstant,
    Javadoc,
    MethodDeclaration,
    TypeDeclaration,
)

TYPE_TEMPLATES = {
    DeclarationKind.INTERFACE: "interface.java.j2",
    DeclarationKind.ENUM: "enum.java.j2",
}


class JavaRenderer:
    """Renders declaration trees with the Java templates."""

    def __init__(self, engine: TemplateEngine, indent: str = "    "):
        self.engine = engine
        self.indent = indent

    def render(self, unit: CompilationUnit) -> str:
        """Render a whole compilation unit."""
        context = {
            "package": unit.package.name if unit.package else "",
            "declarations": [self.render_type(td) for td in unit.types],
        }
        return self.engine.render_template("compilation_unit.java.j2", context)

    def render_type(self, declaration: TypeDeclaration) -> str:
        template_name = TYPE_TEMPLATES.get(declaration.kind)
        if template_name is None:
            raise ValueError(f"No template for {declaration.kind.value} declarations")

        context = {
            "name": declaration.name,
            "modifiers": declaration.modifiers,
            "type_parameters": declaration.type_parameters,
            "super_interfaces": declaration.super_interfaces,
            "javadoc": self.render_javadoc(declaration.javadoc),
            "members": [self.render_method(md) for md in declaration.methods],
            "constants": [self.render_constant(c) for c in declaration.constants],
            "indent": self.indent,
        }
        return self.engine.render_template(template_name, context)

    def render_method(self, method: MethodDeclaration) -> str:
        context = {
            "name": method.name,
            "return_type": method.return_type,
            "parameters": [f"{p.type} {p.name}" for p in method.parameters],
            "type_parameters": method.type_parameters,
            "thrown": method.thrown_exceptions,
            "javadoc": self.render_javadoc(method.javadoc),
        }
        return self.engine.render_template("method.java.j2", context)

    def render_constant(self, constant: EnumConstant) -> str:
        context = {
            "name": constant.name,
            "javadoc": self.render_javadoc(constant.javadoc),
        }
        return self.engine.render_template("constant.java.j2", context)

    def render_javadoc(self, javadoc: Optional[Javadoc]) -> str:
        """Empty string when there is no documentation node."""
        if javadoc is None:
            return ""
        return self.engine.render_template("javadoc.java.j2", {"tags": javadoc.tags})
