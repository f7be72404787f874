import codecs
from pathlib import Path

import pytest

from propenum.codegen.core.errors import (
    GenerationIOError,
    MissingSourceError,
    UnsupportedEncodingError,
)
from propenum.utils import check_encoding, load_properties_file, write_atomic


def test_check_encoding_returns_canonical_name() -> None:
    assert check_encoding("UTF-8") == "utf-8"
    assert check_encoding("ISO-8859-1") == codecs.lookup("latin-1").name


def test_check_encoding_rejects_unknown_names() -> None:
    with pytest.raises(UnsupportedEncodingError) as exc_info:
        check_encoding("NO-SUCH-CHARSET", "source")

    assert exc_info.value.encoding == "NO-SUCH-CHARSET"
    assert "source charset" in str(exc_info.value)


@pytest.mark.parametrize("encoding", ["base64", "hex", "rot13", "zip"])
def test_check_encoding_rejects_binary_codecs(encoding: str) -> None:
    with pytest.raises(UnsupportedEncodingError) as exc_info:
        check_encoding(encoding, "source")

    assert exc_info.value.encoding == encoding


def test_load_properties_file_decodes_with_given_encoding(tmp_path: Path) -> None:
    source = tmp_path / "latin.properties"
    source.write_bytes("key=caf\xe9\n".encode("latin-1"))

    entries = load_properties_file(source, "ISO-8859-1")

    assert [(e.key, e.value) for e in entries] == [("key", "café")]


def test_load_properties_file_reports_decoding_errors(tmp_path: Path) -> None:
    source = tmp_path / "latin.properties"
    source.write_bytes(b"key=caf\xe9\n")

    with pytest.raises(GenerationIOError) as exc_info:
        load_properties_file(source, "UTF-8")

    assert exc_info.value.path == source
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_load_properties_file_strips_byte_order_mark(tmp_path: Path) -> None:
    source = tmp_path / "bom.properties"
    source.write_bytes("key=value\n".encode("utf-8-sig"))

    assert load_properties_file(source)[0].key == "key"


def test_load_properties_file_missing_source(tmp_path: Path) -> None:
    with pytest.raises(MissingSourceError):
        load_properties_file(tmp_path / "missing.properties")


def test_write_atomic_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "Labels.java"

    write_atomic(target, "enum Labels {}\n", "UTF-8")

    assert target.read_text(encoding="utf-8") == "enum Labels {}\n"
    assert [p.name for p in target.parent.iterdir()] == ["Labels.java"]


def test_write_atomic_encodes_with_target_encoding(tmp_path: Path) -> None:
    target = tmp_path / "Latin.java"

    write_atomic(target, "café", "ISO-8859-1")

    assert target.read_bytes() == b"caf\xe9"


def test_write_atomic_leaves_existing_file_on_encoding_error(tmp_path: Path) -> None:
    target = tmp_path / "Labels.java"
    target.write_text("old content", encoding="utf-8")

    with pytest.raises(GenerationIOError):
        write_atomic(target, "café", "ascii")

    assert target.read_text(encoding="utf-8") == "old content"
    assert [p.name for p in tmp_path.iterdir()] == ["Labels.java"]


def test_write_atomic_does_not_create_directories_for_unencodable_text(
    tmp_path: Path,
) -> None:
    target = tmp_path / "pkg" / "Labels.java"

    with pytest.raises(GenerationIOError):
        write_atomic(target, "café", "ascii")

    assert not target.parent.exists()
