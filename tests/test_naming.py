import pytest

from uml_codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    NamingResolver,
    singularize,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from uml_codegen.languages.java.naming import (
    create_java_naming_resolver,
    validate_java_package_name,
)


@pytest.mark.parametrize(
    "plural, singular",
    [
        ("employees", "employee"),
        ("companies", "company"),
        ("addresses", "address"),
        ("boxes", "box"),
        ("branches", "branch"),
        ("children", "child"),
        ("orderItems", "orderItem"),
        ("status", "status"),
        ("data", "data"),
        ("person", "person"),
    ],
)
def test_singularize(plural, singular):
    assert singularize(plural) == singular


def test_accessor_names():
    naming = NamingResolver()

    assert naming.getter_name("name") == "getName"
    assert naming.setter_name("name") == "setName"
    assert naming.adder_name("employees") == "addEmployee"
    assert naming.adder_name("orderItems") == "addOrderItem"
    assert naming.getter_name("employees") == "getEmployees"


def test_java_parameter_names():
    naming = create_java_naming_resolver()

    assert naming.parameter_name("Person") == "person"
    assert naming.parameter_name("class") == "class_"
    assert naming.parameter_name("null") == "null_"
    assert naming.parameter_name("firstName") == "firstName"


def test_sanitizer_is_stateless():
    sanitizer = NameSanitizer({"class"})

    assert sanitizer.sanitize_name("class") == "class_"
    assert sanitizer.sanitize_name("class") == "class_"
    assert sanitizer.sanitize_name("user name", NamingCase.PASCAL_CASE) == "UserName"


def test_case_conversions():
    assert to_snake_case("orderItem") == "order_item"
    assert to_camel_case("order_item") == "orderItem"
    assert to_pascal_case("order-item") == "OrderItem"


def test_validate_package_name():
    assert validate_java_package_name("a.b.c") == []
    assert validate_java_package_name("") == []
    assert len(validate_java_package_name("a.class.b-c")) == 2


@pytest.mark.parametrize(
    "plural, singular",
    [
        ("statuses", "status"),
        ("orderStatuses", "orderStatus"),
        ("aliases", "alias"),
        ("buses", "bus"),
        ("courses", "course"),
        ("databases", "database"),
        ("houses", "house"),
    ],
)
def test_singularize_words_ending_in_us_and_as(plural, singular):
    assert singularize(plural) == singular


def test_adder_for_status_list():
    assert NamingResolver().adder_name("orderStatuses") == "addOrderStatus"


def test_property_parameter_names_keep_spelling():
    naming = create_java_naming_resolver()

    assert naming.property_parameter_name("first_name") == "first_name"
    assert naming.property_parameter_name("URL") == "URL"
    assert naming.property_parameter_name("class") == "class_"
    assert naming.property_parameter_name("true") == "true_"
