"""
Java-specific naming checks.

Generated names are only checked against the configured pattern; problems
Java itself would report are surfaced as warnings.
"""

import re
from typing import List, Optional

# Java reserved words and literals
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
    "_",
}

_JAVA_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def is_java_identifier(name: str) -> bool:
    """Check a simple name against the ASCII Java identifier rules."""
    return bool(_JAVA_IDENTIFIER.fullmatch(name)) and name not in JAVA_RESERVED_WORDS


def check_qualified_name(name: Optional[str], what: str) -> List[str]:
    """
    Check every segment of a dotted name.

    Args:
        name: Dotted name, e.g. "com.example.Messages"
        what: Description used in the warnings

    Returns:
        List of warning messages (empty if no issues)
    """
    if not name:
        return []
    return [
        f"{what} '{name}' contains '{segment}', which is not a valid Java identifier"
        for segment in name.split(".")
        if not is_java_identifier(segment)
    ]
