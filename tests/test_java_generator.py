from collections.abc import Callable

import pytest

from propenum.codegen.core.config import EnumConfig
from propenum.codegen.core.schema import EnumSpec, GeneratedField
from propenum.codegen.languages.java import (
    JavaEnumGenerator,
    check_qualified_name,
    is_java_identifier,
    java_string,
)


def _spec(**overrides: object) -> EnumSpec:
    settings: dict[str, object] = {
        "type_name": "Labels",
        "package_name": "com.example",
        "base_name": "com.example.labels",
        "source_path": "com/example/labels.properties",
        "fields": [GeneratedField("TITLE", "title", "The title.")],
    }
    settings.update(overrides)
    return EnumSpec(**settings)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ('say "hi"', 'say \\"hi\\"'),
        ("back\\slash", "back\\\\slash"),
        ("line\nbreak", "line\\nbreak"),
        ("tab\there", "tab\\there"),
    ],
)
def test_java_string_escapes_literal_characters(value: str, expected: str) -> None:
    assert java_string(value) == expected


def test_generator_identity(make_generator: Callable[..., JavaEnumGenerator]) -> None:
    generator = make_generator()

    assert generator.language_name == "java"
    assert generator.file_extension == ".java"
    assert generator.template_exists("enum.java.j2")


def test_generate_declares_interface(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    code = make_generator().generate(_spec(interface_name="com.example.Key"))

    assert "public enum Labels implements com.example.Key {\n" in code


def test_generate_omits_package_clause_for_default_package(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    code = make_generator().generate(_spec(package_name=""))

    assert not code.startswith("package")
    assert code.startswith('/**\n * Auto generated enum type for property file "')


def test_generate_without_fields_is_still_valid_java(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    code = make_generator().generate(_spec(fields=[]))

    assert "public enum Labels {\n\n;\n\n  /**\n" in code
    assert code.endswith("}\n")


def test_generate_escapes_keys_and_comment_terminators(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    spec = _spec(fields=[GeneratedField("QUOTE", 'quo"te', "ends */ early")])

    code = make_generator().generate(spec)

    assert 'QUOTE("quo\\"te");' in code
    assert "ends *&#47; early" in code
    assert "ends */ early" not in code


def test_generate_wraps_comments_at_configured_line_length(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    comment = " ".join(["word"] * 40)
    generator = make_generator(EnumConfig(line_length=40))

    code = generator.generate(_spec(fields=[GeneratedField("LONG", "long", comment)]))

    comment_lines = [line for line in code.splitlines() if line.startswith("   * word")]
    assert len(comment_lines) > 1
    assert all(len(line) <= 40 for line in comment_lines)


def test_validate_spec_warns_about_java_problems(
    make_generator: Callable[..., JavaEnumGenerator],
) -> None:
    spec = _spec(package_name="com.class", fields=[])

    warnings = make_generator().validate_spec(spec)

    assert any("has no constants" in warning for warning in warnings)
    assert any("'class'" in warning for warning in warnings)


def test_naming_helpers() -> None:
    assert is_java_identifier("Labels")
    assert not is_java_identifier("enum")
    assert not is_java_identifier("1st")
    assert check_qualified_name("com.example.Key", "Interface name") == []
    assert len(check_qualified_name("com.1bad.int", "Package name")) == 2
