import pytest

from uml_codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
    indent_lines,
)
from uml_codegen.languages.java import create_interface_generator


def test_indent_filter_skips_blank_lines():
    engine = create_template_engine()

    rendered = engine.render_string("{{ text|indent(2) }}", {"text": "a\n\nb"})

    assert rendered == "  a\n\n  b"
    assert engine.render_string("{{ text|indent('\t') }}", {"text": "a"}) == "\ta"


def test_in_memory_templates():
    engine = TemplateEngine()
    engine.add_template("hello.j2", "Hello {{ name }}")

    assert engine.template_exists("hello.j2")
    assert engine.render_template("hello.j2", {"name": "Java"}) == "Hello Java"


def test_missing_template():
    engine = TemplateEngine()

    assert not engine.template_exists("nope.j2")
    with pytest.raises(TemplateError):
        engine.render_template("nope.j2", {})


def test_undefined_variables_are_errors():
    with pytest.raises(TemplateError):
        TemplateEngine().render_string("{{ missing }}", {})


def test_java_templates_are_installed():
    generator = create_interface_generator()

    for name in [
        "compilation_unit.java.j2",
        "interface.java.j2",
        "enum.java.j2",
        "method.java.j2",
        "constant.java.j2",
        "javadoc.java.j2",
    ]:
        assert generator.template_exists(name)

    assert generator.render_template("javadoc.java.j2", {"tags": ["x"]}) == "/**\n * x\n */"


def test_template_errors_name_the_template():
    engine = TemplateEngine()
    engine.add_template("broken.j2", "{{ name.first }}")

    with pytest.raises(TemplateError, match="'method.java.j2'"):
        engine.render_template("method.java.j2", {})
    with pytest.raises(TemplateError, match="'broken.j2'"):
        engine.render_template("broken.j2", {"name": "x"})


def test_indent_lines_skips_blank_lines():
    assert indent_lines("a\n\nb", "  ") == "  a\n\n  b"
    assert indent_lines("a", 1) == " a"
