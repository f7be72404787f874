"""
Error taxonomy for enum generation.

Every failure the engine can signal derives from GeneratorError, so callers
can catch the whole family at one boundary.
"""

from pathlib import Path
from typing import Optional, Union


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidKeyError(GeneratorError):
    """A normalized key does not match the configured field pattern."""

    def __init__(self, key: str, identifier: str, pattern: str):
        self.key = key
        self.identifier = identifier
        self.pattern = pattern
        super().__init__(
            f'The key "{key}" is invalid. The resulting enum field must match '
            f"the pattern {pattern} but was: {identifier}"
        )


class DuplicateFieldError(GeneratorError):
    """Two distinct keys normalize to the same identifier within one type."""

    def __init__(self, type_name: str, identifier: str, key: str, previous_key: str):
        self.type_name = type_name
        self.identifier = identifier
        self.key = key
        self.previous_key = previous_key
        if key == previous_key:
            message = (
                f"Duplicate enum field name in {type_name}. Key '{key}' "
                f"occurs more than once, resulting in '{identifier}'"
            )
        else:
            message = (
                f"Duplicate enum field name in {type_name}. Both '{key}' and "
                f"'{previous_key}' result in '{identifier}'"
            )
        super().__init__(message)


class UnsupportedEncodingError(GeneratorError):
    """A configured character encoding is not known to the codec registry."""

    def __init__(self, encoding: str, role: str = "target"):
        self.encoding = encoding
        self.role = role
        super().__init__(f"The {role} charset {encoding} is not supported")


class MissingSourceError(GeneratorError):
    """A configured source file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"The file {self.path} could not be found")


class PathResolutionError(GeneratorError):
    """A source file lies outside the configured base directory."""

    def __init__(self, path: Union[str, Path], base_dir: Union[str, Path]):
        self.path = Path(path)
        self.base_dir = Path(base_dir)
        super().__init__(f"The file {self.path} is not located below {self.base_dir}")


class MalformedPropertiesError(GeneratorError):
    """The property file violates the property file syntax."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class GenerationIOError(GeneratorError):
    """Reading, decoding, encoding or writing a file failed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)
