"""
Naming utilities for enum constant generation.

Turns raw property keys into SCREAMING_SNAKE identifiers and checks the
result against a configurable pattern.
"""

import re
from typing import Dict, Optional, Pattern, Union

from ...logging_config import get_logger
from .errors import InvalidKeyError

logger = get_logger(__name__)

KEY_SEPARATOR = "."

# A constant starts with an uppercase letter, segments are joined by single
# underscores and one trailing underscore is tolerated (e.g. "UNDERSCORE_").
DEFAULT_FIELD_PATTERN = r"^[A-Z][A-Z0-9]*(_[A-Z0-9]+)*_?$"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATOR = re.compile(r"(?<=[A-Z0-9])[.\s-](?=[A-Z0-9])")


def strip_prefix(key: str, prefix: str = "") -> str:
    """Remove ``prefix + "."`` from the start of a key, if present."""
    prefix_with_separator = f"{prefix}{KEY_SEPARATOR}"
    if key.startswith(prefix_with_separator):
        return key[len(prefix_with_separator):]
    return key


def normalize_key(key: str, prefix: str = "") -> str:
    """
    Convert a property key into a candidate enum field name.

    The three rules run in order, each on the output of the previous one:

    1. strip ``prefix + "."``
    2. split camelCase and uppercase (``myKey`` -> ``MY_KEY``)
    3. turn ``.``, whitespace and ``-`` between letters/digits into ``_``

    Args:
        key: Raw property key
        prefix: Configured key prefix

    Returns:
        Candidate identifier (not yet validated)
    """
    name = strip_prefix(key, prefix)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name).upper()
    return _SEPARATOR.sub("_", name)


class KeyNormalizer:
    """Normalizes keys for one configured prefix."""

    def __init__(self, prefix: Optional[str] = ""):
        self.prefix = prefix or ""
        self._cache: Dict[str, str] = {}

    def normalize(self, key: str) -> str:
        if key not in self._cache:
            self._cache[key] = normalize_key(key, self.prefix)
        return self._cache[key]


class FieldValidator:
    """Checks candidate identifiers against a regular expression."""

    def __init__(self, pattern: Union[str, Pattern[str]] = DEFAULT_FIELD_PATTERN):
        self._regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def is_valid(self, identifier: str) -> bool:
        return self._regex.fullmatch(identifier) is not None

    def validate(self, key: str, identifier: str) -> str:
        """
        Validate a candidate identifier.

        Args:
            key: Original property key, reported on failure
            identifier: Normalized candidate

        Returns:
            The identifier, unchanged

        Raises:
            InvalidKeyError: If the identifier does not match the pattern
        """
        if not self.is_valid(identifier):
            logger.debug("Rejected key %r as %r", key, identifier)
            raise InvalidKeyError(key, identifier, self.pattern)
        return identifier


def build_enum_field_name(
    key: str, prefix: str = "", pattern: str = DEFAULT_FIELD_PATTERN
) -> str:
    """Normalize and validate a key in one call."""
    return FieldValidator(pattern).validate(key, normalize_key(key, prefix))
