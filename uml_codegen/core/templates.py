"""
Jinja2 rendering of declaration templates.

Java sources are whitespace sensitive only in layout, so the environment
drops block-tag lines entirely and fails on any undefined variable
rather than emitting an empty string into the generated code.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
)


class TemplateError(Exception):
    """A declaration template is missing or failed to render."""

    pass


class TemplateEngine:
    """Jinja2 environment for ``*.j2`` declaration templates."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory of template files; when absent or
                missing, templates are registered with ``add_template``
        """
        self.template_dir = template_dir
        self._env = Environment(
            loader=self._make_loader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self._env.filters["indent"] = indent_lines

    @staticmethod
    def _make_loader(template_dir: Optional[Path]) -> BaseLoader:
        if template_dir is not None and template_dir.is_dir():
            return FileSystemLoader(str(template_dir))
        return DictLoader({})

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is unknown or rendering fails
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"No declaration template named '{template_name}'") from e
        return self._render(template, template_name, context)

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render template source given inline."""
        try:
            template = self._env.from_string(template_string)
        except Exception as e:
            raise TemplateError(f"Inline template does not compile: {e}") from e
        return self._render(template, "<inline>", context)

    def _render(self, template: Template, label: str, context: Dict[str, Any]) -> str:
        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Rendering '{label}' failed: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Register template source under ``name``.

        A directory-backed engine switches to in-memory templates, so its
        file templates are no longer visible afterwards.
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def indent_lines(value: Any, indent: Any = 4) -> str:
    """Prefix every non-blank line; ``indent`` is a width or a literal prefix."""
    prefix = " " * indent if isinstance(indent, int) else str(indent)
    return "\n".join(
        prefix + line if line.strip() else line for line in str(value).split("\n")
    )


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Template engine reading from ``template_dir`` when it exists."""
    return TemplateEngine(template_dir)
