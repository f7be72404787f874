import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from propenum.codegen.core.config import (
    DEFAULT_ENUM_JAVADOC,
    ConfigError,
    ConfigManager,
    EnumConfig,
    load_config,
)
from propenum.codegen.core.naming import DEFAULT_FIELD_PATTERN


def _write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_enum_config_defaults() -> None:
    config = EnumConfig()

    assert config.base_dir == Path("src/main/resources")
    assert config.output_dir == Path("target/generated-sources/enum")
    assert config.files == ()
    assert config.package_name is None
    assert config.prefix == ""
    assert config.prefixed_only is False
    assert config.implement is None
    assert config.line_length == 80
    assert config.enum_javadoc == DEFAULT_ENUM_JAVADOC
    assert config.field_pattern == DEFAULT_FIELD_PATTERN
    assert config.source_encoding == "UTF-8"
    assert config.target_encoding == "UTF-8"
    assert config.language == "java"
    assert config.fail_fast is True


def test_enum_config_is_read_only() -> None:
    config = EnumConfig()

    with pytest.raises(FrozenInstanceError):
        config.prefix = "changed"  # type: ignore[misc]


def test_enum_config_normalizes_paths_and_files() -> None:
    config = EnumConfig(base_dir="res", files=["a.properties"], prefix=None)

    assert config.base_dir == Path("res")
    assert config.files == ("a.properties",)
    assert config.prefix == ""


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        (DEFAULT_ENUM_JAVADOC, 'Key "my.key" for property with value "My value".'),
        ("{0} = {1}", "my.key = My value"),
        ("{value}", "My value"),
        ("See {@link Messages}: {key}", "See {@link Messages}: my.key"),
        ("{2} {unknown} {1}", "{2} {unknown} My value"),
    ],
)
def test_format_javadoc_accepts_positional_and_named_placeholders(
    template: str, expected: str
) -> None:
    config = EnumConfig(enum_javadoc=template)

    assert config.format_javadoc("my.key", "My value") == expected


def test_get_config_applies_overrides_and_ignores_none() -> None:
    config = ConfigManager().get_config(
        custom_config={"prefix": "app", "line_length": None, "fail_fast": False}
    )

    assert config.prefix == "app"
    assert config.line_length == 80
    assert config.fail_fast is False


def test_config_file_paths_are_relative_to_the_file(tmp_path: Path) -> None:
    config_file = _write_json(
        tmp_path / "conf" / "propenum.json",
        {"base_dir": "res", "output_dir": "/abs/out", "files": ["a.properties"]},
    )

    config = load_config(config_file=config_file)

    assert config.base_dir == tmp_path / "conf" / "res"
    assert config.output_dir == Path("/abs/out")
    assert config.files == ("a.properties",)


def test_overrides_win_over_config_file(tmp_path: Path) -> None:
    config_file = _write_json(tmp_path / "propenum.json", {"prefix": "file"})

    config = load_config(custom_config={"prefix": "cli"}, config_file=config_file)

    assert config.prefix == "cli"


@pytest.mark.parametrize(
    "content",
    [
        {"unknown_setting": 1},
        {"files": "single.properties"},
        {"line_length": 0},
        {"field_pattern": "("},
        {"enum_javadoc": 2},
        ["not", "an", "object"],
    ],
)
def test_invalid_config_files_raise_config_error(tmp_path: Path, content: object) -> None:
    config_file = _write_json(tmp_path / "propenum.json", content)

    with pytest.raises(ConfigError):
        ConfigManager().get_config(config_file=config_file)


def test_broken_json_raises_config_error(tmp_path: Path) -> None:
    config_file = tmp_path / "propenum.json"
    config_file.write_text("{broken", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        ConfigManager().get_config(config_file=config_file)

    assert "Invalid JSON" in str(exc_info.value)


def test_missing_config_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigManager().get_config(config_file=tmp_path / "missing.json")


def test_validate_config_reports_no_problems_for_defaults() -> None:
    assert ConfigManager().validate_config(EnumConfig()) == []


def test_to_dict_uses_plain_values() -> None:
    data = EnumConfig(files=["a.properties"]).to_dict()

    assert data["base_dir"] == "src/main/resources"
    assert data["files"] == ["a.properties"]
