from collections.abc import Callable
from pathlib import Path

import pytest

from propenum.codegen.core.config import EnumConfig
from propenum.codegen.languages.java import JavaEnumGenerator


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    resources = tmp_path / "resources"
    resources.mkdir()
    return resources


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "generated"


@pytest.fixture
def write_properties(base_dir: Path) -> Callable[..., Path]:
    def _write_properties(relative: str, content: str, encoding: str = "utf-8") -> Path:
        path = base_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode(encoding))
        return path

    return _write_properties


@pytest.fixture
def make_config(base_dir: Path, output_dir: Path) -> Callable[..., EnumConfig]:
    def _make_config(**overrides: object) -> EnumConfig:
        settings: dict[str, object] = {
            "base_dir": base_dir,
            "output_dir": output_dir,
        }
        settings.update(overrides)
        return EnumConfig(**settings)

    return _make_config


@pytest.fixture
def make_generator() -> Callable[..., JavaEnumGenerator]:
    def _make_generator(config: EnumConfig | None = None) -> JavaEnumGenerator:
        return JavaEnumGenerator(config or EnumConfig())

    return _make_generator
