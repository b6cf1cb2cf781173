import pytest

from uml_codegen.core.model import Classifier, ClassifierKind, Comment


def make_classifier(qualified_name, kind=ClassifierKind.INTERFACE, comments=None):
    return Classifier(
        name=qualified_name.split("::")[-1],
        qualified_name=qualified_name,
        kind=kind,
        comments=[Comment(body) for body in comments or []],
    )


def make_type(qualified_name, kind=ClassifierKind.DATATYPE):
    return make_classifier(qualified_name, kind)


@pytest.fixture
def company():
    return make_classifier("a::b::c::Company")


@pytest.fixture
def string_type():
    return make_type("String", ClassifierKind.PRIMITIVE)


@pytest.fixture
def person():
    return make_classifier("a::b::c::Person")


@pytest.fixture
def model_document():
    return {
        "classifiers": [
            {
                "qualifiedName": "a::b::c::Company",
                "kind": "interface",
                "comments": ["A company."],
                "generalizations": ["a::b::c::Organisation"],
                "attributes": [
                    {"name": "name", "type": "String"},
                    {"name": "employees", "type": "a::b::c::Person", "upper": -1},
                ],
                "operations": [
                    {
                        "name": "hire",
                        "parameters": [
                            {"name": "person", "type": "a::b::c::Person"},
                            {"name": "result", "type": "Boolean", "direction": "return"},
                        ],
                        "raisedExceptions": ["a::b::c::HireException"],
                    }
                ],
            },
            {"qualifiedName": "a::b::c::Organisation", "kind": "interface"},
            {"qualifiedName": "a::b::c::Person", "kind": "interface"},
            {"qualifiedName": "a::b::c::HireException", "kind": "class"},
            {
                "qualifiedName": "a::b::c::Color",
                "kind": "enumeration",
                "literals": ["RED", {"name": "GREEN", "comments": "Go."}],
            },
        ]
    }
