import pytest

from uml_codegen.core.model import (
    Attribute,
    Classifier,
    ClassifierKind,
    ModelError,
    Operation,
    Parameter,
    ParameterDirection,
    UniqueList,
    convert_model_dict,
    iter_classifiers,
    split_qualified_name,
)


def test_unique_list_keeps_order_and_rejects_duplicates():
    first, second = Attribute("a"), Attribute("b")
    items = UniqueList([first, second])

    assert list(items) == [first, second]
    assert second in items
    with pytest.raises(ValueError):
        items.append(first)


def test_classifier_defaults():
    classifier = Classifier("Company")

    assert classifier.qualified_name == "Company"
    assert classifier.label == "Company"
    assert classifier.namespace == []
    assert isinstance(classifier.attributes, UniqueList)


def test_classifier_namespace():
    classifier = Classifier("Company", "a::b::Company")

    assert classifier.namespace == ["a", "b"]
    assert split_qualified_name("a::b::Company") == ["a", "b", "Company"]


def test_attribute_multiplicity():
    assert not Attribute("name", upper=1).is_many
    assert not Attribute("name", upper=0).is_many
    assert Attribute("names", upper=-1).is_many
    assert Attribute("names", upper=-5).is_many


def test_return_parameter():
    result = Parameter("result", direction=ParameterDirection.RETURN)
    person = Parameter("person")
    operation = Operation("hire", parameters=[person, result])

    assert operation.return_parameter is result
    assert operation.owned_parameters == [person]


def test_convert_model_dict(model_document):
    classifiers = convert_model_dict(model_document)

    assert list(classifiers) == [
        "a::b::c::Company",
        "a::b::c::Organisation",
        "a::b::c::Person",
        "a::b::c::HireException",
        "a::b::c::Color",
    ]

    company = classifiers["a::b::c::Company"]
    assert company.comments[0].body == "A company."
    assert company.generalizations[0].general is classifiers["a::b::c::Organisation"]
    assert company.get_attribute("name").type.kind == ClassifierKind.PRIMITIVE
    assert company.get_attribute("employees").upper == -1
    assert company.get_attribute("employees").type is classifiers["a::b::c::Person"]

    hire = company.get_operation("hire")
    assert hire.return_parameter.type.name == "Boolean"
    assert hire.raised_exceptions[0] is classifiers["a::b::c::HireException"]

    color = classifiers["a::b::c::Color"]
    assert [literal.name for literal in color.literals] == ["RED", "GREEN"]
    assert color.literals[1].comments[0].body == "Go."


def test_external_and_dangling_references():
    classifiers = convert_model_dict(
        {
            "classifiers": [
                {
                    "qualifiedName": "a::Company",
                    "generalizations": ["a::Missing"],
                    "attributes": [
                        {"name": "address", "type": "x::y::Address"},
                        {"name": "size", "type": "Size"},
                    ],
                }
            ]
        }
    )
    company = classifiers["a::Company"]

    address_type = company.get_attribute("address").type
    assert address_type.kind == ClassifierKind.DATATYPE
    assert address_type.qualified_name == "x::y::Address"

    size_type = company.get_attribute("size").type
    assert size_type.kind == ClassifierKind.UNRESOLVED
    assert size_type.qualified_name == "Size"

    missing = company.generalizations[0].general
    assert missing.kind == ClassifierKind.UNRESOLVED
    assert missing.qualified_name == "a::Missing"
    assert missing.name == "Missing"


def test_template_parameters_are_scoped():
    classifiers = convert_model_dict(
        {
            "classifiers": [
                {
                    "qualifiedName": "a::Box",
                    "templateParameters": ["T", None],
                    "attributes": [{"name": "content", "type": "T"}],
                }
            ]
        }
    )
    box = classifiers["a::Box"]
    first, second = box.template_signature.parameters

    assert first.parametered_element.label == "T"
    assert second.parametered_element is None
    assert box.get_attribute("content").type is first.parametered_element


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"classifiers": {}},
        {"classifiers": ["a::B"]},
        {"classifiers": [{}]},
        {"classifiers": [{"qualifiedName": "a::B", "kind": "struct"}]},
        {"classifiers": [{"qualifiedName": "a::B"}, {"qualifiedName": "a::B"}]},
        {"classifiers": [{"qualifiedName": "a::B", "kind": "unresolved"}]},
        {"classifiers": [{"qualifiedName": "a::B", "generalizations": ["a::C", "a::C"]}]},
        {"classifiers": [{"qualifiedName": "a::B", "interfaceRealizations": ["a::C", "a::C"]}]},
        {
            "classifiers": [
                {
                    "qualifiedName": "a::B",
                    "operations": [{"name": "run", "raisedExceptions": ["a::E", "a::E"]}],
                }
            ]
        },
        {"classifiers": [{"qualifiedName": "a::B", "attributes": [{"name": "x", "upper": "*"}]}]},
        {"classifiers": [{"qualifiedName": "a::B", "attributes": [{"name": "x", "lower": None}]}]},
    ],
)
def test_malformed_documents(document):
    with pytest.raises(ModelError):
        convert_model_dict(document)


def test_iter_classifiers(model_document):
    classifiers = convert_model_dict(model_document)

    enums = list(iter_classifiers(classifiers, [ClassifierKind.ENUMERATION]))

    assert [c.name for c in enums] == ["Color"]


def test_undeclared_exceptions_are_kept_as_placeholders():
    classifiers = convert_model_dict(
        {
            "classifiers": [
                {
                    "qualifiedName": "a::Job",
                    "operations": [{"name": "run", "raisedExceptions": ["Oops", "Other"]}],
                }
            ]
        }
    )
    raised = classifiers["a::Job"].get_operation("run").raised_exceptions

    assert [r.qualified_name for r in raised] == ["Oops", "Other"]
    assert all(r.kind == ClassifierKind.UNRESOLVED for r in raised)
    assert raised[0] is not raised[1]


def test_integer_bounds_are_read():
    classifiers = convert_model_dict(
        {
            "classifiers": [
                {
                    "qualifiedName": "a::B",
                    "attributes": [{"name": "xs", "type": "String", "lower": 0, "upper": -1}],
                }
            ]
        }
    )
    attribute = classifiers["a::B"].get_attribute("xs")

    assert (attribute.lower, attribute.upper) == (0, -1)
