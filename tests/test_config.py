import json

import pytest

from uml_codegen.core.config import (
    ConfigError,
    ConfigManager,
    GenerationContext,
    GeneratorConfig,
    load_config,
)


def test_defaults():
    config = load_config()

    assert config.indent_size == 4
    assert config.indent == "    "
    assert config.javadoc_style == "line"
    assert config.collection_type == "java.util.Collection"
    assert config.add_comments


def test_overrides_and_custom_keys():
    config = load_config(custom_config={"indent_size": 2, "type_overrides": {"Date": "java.util.Date"}})

    assert config.indent == "  "
    assert config.custom["type_overrides"] == {"Date": "java.util.Date"}


def test_tabs():
    assert GeneratorConfig(use_tabs=True).indent == "\t"


@pytest.mark.parametrize(
    "overrides",
    [
        {"indent_size": -1},
        {"javadoc_style": "html"},
        {"line_ending": "\r"},
        {"collection_type": ""},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigError):
        load_config(custom_config=overrides)


def test_config_file(tmp_path):
    path = tmp_path / "codegen.json"
    path.write_text(json.dumps({"root_package": "Data", "javadoc_style": "block"}))

    config = load_config(config_file=path, custom_config={"indent_size": 8})

    assert config.root_package == "Data"
    assert config.javadoc_style == "block"
    assert config.indent_size == 8


def test_config_file_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(config_file=tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(config_file=bad)

    not_json = tmp_path / "config.yaml"
    not_json.write_text("{}")
    with pytest.raises(ConfigError):
        load_config(config_file=not_json)


def test_save_config_round_trip(tmp_path):
    manager = ConfigManager()
    config = manager.get_config(custom_config={"root_package": "a.b", "flavour": "x"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)
    saved = json.loads(path.read_text())

    assert saved["root_package"] == "a.b"
    assert saved["flavour"] == "x"
    assert manager.get_config(config_file=path).custom == {"flavour": "x"}


def test_generation_context():
    context = GenerationContext(root_package="a::b")

    assert context.root_segments == ["a", "b"]
    assert GenerationContext(root_package="a.b").root_segments == ["a", "b"]
    assert GenerationContext().root_segments == []

    narrowed = context.with_package("c").with_type_parameters(["T"])
    assert narrowed.package == "c"
    assert narrowed.type_parameters == frozenset({"T"})
    assert context.package == ""
