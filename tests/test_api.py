from uml_codegen import (
    __version__,
    generate_from_model,
    list_supported_kinds,
)


def test_version():
    assert __version__


def test_generate_from_model(model_document):
    results = generate_from_model(model_document)

    assert list(results) == [
        "a::b::c::Company",
        "a::b::c::Organisation",
        "a::b::c::Person",
        "a::b::c::Color",
    ]
    assert all(result.success for result in results.values())
    assert results["a::b::c::Organisation"].code == (
        "package a.b.c;\n\npublic interface Organisation {\n}\n"
    )
    assert results["a::b::c::Color"].code == (
        "package a.b.c;\n"
        "\n"
        "public enum Color {\n"
        "    RED,\n"
        "    /**\n"
        "     * Go.\n"
        "     */\n"
        "    GREEN\n"
        "}\n"
    )
    assert results["a::b::c::Company"].metadata["declaration_kind"] == "interface"


def test_generate_from_model_with_root_package(model_document):
    results = generate_from_model(model_document, root_package="a.b.c")

    assert results["a::b::c::Person"].code == "public interface Person {\n}\n"


def test_generate_from_model_reports_failures():
    results = generate_from_model(
        {
            "classifiers": [
                {"qualifiedName": "a::Broken", "generalizations": ["a::Missing"]},
                {"qualifiedName": "a::Fine"},
            ]
        }
    )

    broken = results["a::Broken"]
    assert not broken.success
    assert broken.exception.classifier_name == "a::Broken"
    assert results["a::Fine"].success


def test_company_example(model_document):
    company = generate_from_model(model_document)["a::b::c::Company"].code

    assert company == (
        "package a.b.c;\n"
        "\n"
        "/**\n"
        " * A company.\n"
        " */\n"
        "public interface Company extends Organisation {\n"
        "\n"
        "    Boolean hire(Person person) throws HireException;\n"
        "\n"
        "    String getName();\n"
        "\n"
        "    void setName(String name);\n"
        "\n"
        "    java.util.Collection<Person> getEmployees();\n"
        "\n"
        "    void addEmployee(Person employee);\n"
        "}\n"
    )


def test_supported_kinds():
    assert "interface" in list_supported_kinds()


def test_generate_from_model_names_undeclared_supertype():
    results = generate_from_model(
        {"classifiers": [{"qualifiedName": "a::Broken", "generalizations": ["a::Missing"]}]}
    )

    broken = results["a::Broken"]
    assert not broken.success
    assert "a::Missing" in broken.error_message
    assert broken.exception.element_name == "a::Missing"


def test_generate_from_model_names_undeclared_attribute_type():
    results = generate_from_model(
        {
            "classifiers": [
                {"qualifiedName": "a::Company", "attributes": [{"name": "size", "type": "Size"}]}
            ]
        }
    )

    company = results["a::Company"]
    assert not company.success
    assert "'Size'" in company.error_message
    assert company.exception.type_name == "Size"
    assert company.exception.element_name == "size"


def test_generate_from_model_rejects_undeclared_exceptions():
    results = generate_from_model(
        {
            "classifiers": [
                {
                    "qualifiedName": "a::Job",
                    "operations": [{"name": "run", "raisedExceptions": ["Oops", "Other"]}],
                }
            ]
        }
    )

    job = results["a::Job"]
    assert not job.success
    assert job.exception.type_name == "Oops"
    assert job.exception.element_name == "run.throws"
