"""Utility functions for reading property files and writing generated sources.

This module provides encoding checks, property file loading and atomic file
writes with proper error handling.
"""

import codecs
import os
import tempfile
from pathlib import Path

from .codegen.core.errors import (
    GenerationIOError,
    MissingSourceError,
    UnsupportedEncodingError,
)
from .codegen.core.schema import PropertyEntry
from .logging_config import get_logger
from .properties import parse_properties

logger = get_logger(__name__)


def check_encoding(encoding: str, role: str = "target") -> str:
    """Make sure an encoding is known before anything is read or written.

    Args:
        encoding: Encoding name, e.g. "UTF-8" or "ISO-8859-1".
        role: "source" or "target", used in the error message.

    Returns:
        The canonical codec name.

    Raises:
        UnsupportedEncodingError: If Python has no codec for the name, or
            the codec does not convert between text and bytes (e.g. base64).
    """
    try:
        name = codecs.lookup(encoding).name
        "".encode(name)
        b"".decode(name)
        return name
    except LookupError as e:
        raise UnsupportedEncodingError(encoding, role) from e


def load_properties_file(file_path: str | Path, encoding: str = "UTF-8") -> list[PropertyEntry]:
    """Load the entries of a property file.

    Args:
        file_path: Path to the property file.
        encoding: Encoding the file is written in.

    Returns:
        Entries in file order.

    Raises:
        MissingSourceError: If the file doesn't exist.
        GenerationIOError: If the file cannot be read or decoded.
        MalformedPropertiesError: If the file content is malformed.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading properties from {file_path}")

    if not file_path.is_file():
        raise MissingSourceError(file_path)

    try:
        with file_path.open("r", encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise GenerationIOError(
            f"Cannot decode {file_path} as {encoding}: {e}", file_path
        ) from e
    except OSError as e:
        raise GenerationIOError(f"Error reading file {file_path}: {e}", file_path) from e

    # Editors on Windows like to put a BOM in front of UTF-8 files
    if text.startswith("\ufeff"):
        text = text[1:]

    entries = parse_properties(text)
    logger.info(f"Read {len(entries)} entries from {file_path}")
    return entries


def write_atomic(file_path: str | Path, text: str, encoding: str = "UTF-8") -> Path:
    """Write text to a file so that readers never see a partial file.

    The text is encoded first, then written to a temporary file next to the
    target and moved into place.

    Args:
        file_path: Target file, parent directories are created.
        text: Content to write.
        encoding: Target encoding.

    Returns:
        The written path.

    Raises:
        GenerationIOError: If encoding, creating directories or writing fails.
    """
    file_path = Path(file_path)

    try:
        data = text.encode(encoding)
    except UnicodeEncodeError as e:
        raise GenerationIOError(
            f"Cannot encode {file_path.name} as {encoding}: {e}", file_path
        ) from e

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GenerationIOError(
            f"Cannot create directory {file_path.parent}: {e}", file_path
        ) from e

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, file_path)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise GenerationIOError(f"Error writing file {file_path}: {e}", file_path) from e

    logger.debug(f"Wrote {len(data)} bytes to {file_path}")
    return file_path
