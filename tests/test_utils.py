import json

import pytest
import requests

from uml_codegen.utils import (
    ModelLoaderError,
    load_model_document,
    read_model_file,
    fetch_model_document,
    load_model,
)


class FakeResponse:
    def __init__(self, payload, status_code=200, content_type="application/json"):
        self._payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_read_model_file(tmp_path, model_document):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(model_document), encoding="utf-8")

    source, data = read_model_file(path)

    assert source == str(path)
    assert data == model_document


def test_read_model_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_model_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    with pytest.raises(ModelLoaderError):
        read_model_file(bad)


def test_fetch_model_document(monkeypatch, model_document):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(model_document)

    monkeypatch.setattr(requests, "get", fake_get)

    source, data = fetch_model_document("https://example.org/model.json", timeout=5)

    assert source == "https://example.org/model.json"
    assert data == model_document
    assert calls == [("https://example.org/model.json", 5)]


def test_fetch_model_document_errors(monkeypatch):
    with pytest.raises(ModelLoaderError):
        fetch_model_document("not a url")

    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({}, 404))
    with pytest.raises(ModelLoaderError):
        fetch_model_document("https://example.org/model.json")

    def timeout(url, timeout):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(requests, "get", timeout)
    with pytest.raises(ModelLoaderError):
        fetch_model_document("https://example.org/model.json")

    monkeypatch.setattr(
        requests, "get", lambda url, timeout: FakeResponse(ValueError("no json"))
    )
    with pytest.raises(ModelLoaderError):
        fetch_model_document("https://example.org/model.json")


def test_load_model_document_requires_one_source(tmp_path):
    with pytest.raises(ModelLoaderError):
        load_model_document()
    with pytest.raises(ModelLoaderError):
        load_model_document(tmp_path / "model.json", "https://example.org/model.json")


def test_load_model(tmp_path, model_document):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(model_document), encoding="utf-8")

    source, classifiers = load_model(path)

    assert "a::b::c::Company" in classifiers


def test_load_model_rejects_malformed_document(tmp_path):
    path = tmp_path / "model.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")

    with pytest.raises(ModelLoaderError):
        load_model(path)


def test_load_model_rejects_non_integer_bounds(tmp_path):
    path = tmp_path / "model.json"
    document = {
        "classifiers": [
            {"qualifiedName": "a::B", "attributes": [{"name": "xs", "upper": "*"}]}
        ]
    }
    path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(ModelLoaderError, match="upper"):
        load_model(path)


def test_load_model_rejects_repeated_references(tmp_path):
    path = tmp_path / "model.json"
    document = {
        "classifiers": [
            {
                "qualifiedName": "a::B",
                "operations": [{"name": "run", "raisedExceptions": ["a::E", "a::E"]}],
            }
        ]
    }
    path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(ModelLoaderError, match="a::E"):
        load_model(path)
