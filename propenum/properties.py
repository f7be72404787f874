"""
Reader for the Java property file syntax.

Supports comment lines starting with ``#`` or ``!``, the separators ``=``,
``:`` and whitespace, backslash line continuation and the escapes ``\\t``,
``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX``. Any other escaped character stands
for itself.
"""

import re
from typing import Dict, Iterator, List, Tuple

from .codegen.core.errors import MalformedPropertiesError
from .codegen.core.schema import PropertyEntry
from .logging_config import get_logger

logger = get_logger(__name__)

WHITESPACE = " \t\f"
SEPARATORS = "=:"
COMMENT_CHARS = "#!"

_NEWLINE = re.compile(r"\r\n|\r|\n")
_HEX = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _ends_with_continuation(line: str) -> bool:
    """True if the line ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Join continued natural lines into logical lines.

    Blank lines and comment lines are skipped.

    Yields:
        (line number of the first natural line, logical line)
    """
    pending = None
    start = 0

    for number, natural in enumerate(_NEWLINE.split(text), start=1):
        stripped = natural.lstrip(WHITESPACE)

        if pending is None:
            if not stripped or stripped[0] in COMMENT_CHARS:
                continue
            start = number
            pending = ""

        if _ends_with_continuation(stripped):
            pending += stripped[:-1]
            continue

        yield start, pending + stripped
        pending = None

    if pending:
        yield start, pending


def _split_key_value(line: str) -> Tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(WHITESPACE)
    if rest[:1] and rest[0] in SEPARATORS:
        rest = rest[1:].lstrip(WHITESPACE)
    return key, rest


def unescape(raw: str, line: int = None) -> str:
    """
    Resolve the escape sequences of a raw key or value.

    Raises:
        MalformedPropertiesError: On a malformed ``\\uXXXX`` sequence
    """
    if "\\" not in raw:
        return raw

    chars: List[str] = []
    index = 0
    length = len(raw)

    while index < length:
        char = raw[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= length:
            # A lone backslash at the very end of the input
            break
        char = raw[index]
        index += 1
        if char == "u":
            digits = raw[index:index + 4]
            if len(digits) != 4 or not set(digits) <= _HEX:
                raise MalformedPropertiesError(
                    f"Malformed \\uxxxx encoding: \\u{digits}", line
                )
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_SIMPLE_ESCAPES.get(char, char))

    result = "".join(chars)
    try:
        # Pair up surrogates written as two \u escapes
        return result.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise MalformedPropertiesError(f"Unpaired surrogate in {raw!r}", line) from e


def parse_properties(text: str) -> List[PropertyEntry]:
    """
    Parse property file content.

    A key that occurs more than once keeps the position of its first
    occurrence and the value of its last one.

    Args:
        text: Decoded file content

    Returns:
        Entries in file order

    Raises:
        MalformedPropertiesError: If an escape sequence is malformed
    """
    values: Dict[str, str] = {}

    for number, line in logical_lines(text):
        raw_key, raw_value = _split_key_value(line)
        key = unescape(raw_key, number)
        if key in values:
            logger.debug("Key %r repeated on line %d, keeping last value", key, number)
        values[key] = unescape(raw_value, number)

    return [PropertyEntry(key, value) for key, value in values.items()]
