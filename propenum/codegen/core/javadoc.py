"""
Javadoc comment formatting.

Greedy word wrapping for generated block comments. Pure string functions,
no locale dependency.
"""

import re
from typing import List

JAVADOC_OPEN = "/**"
JAVADOC_LINE = " * "
JAVADOC_CLOSE = " */"

_WORD = re.compile(r"(\s*)(\S+)")


def wrap_text(text: str, width: int) -> List[str]:
    """
    Wrap text into lines of at most ``width`` characters.

    Explicit newlines always break. Blank lines are dropped. The leading
    indentation of a line is kept, as is the spacing between words that end
    up on the same output line. A word longer than ``width`` is placed alone
    on its own line, unbroken.

    Args:
        text: Text to wrap
        width: Maximum line length

    Returns:
        Wrapped lines without trailing whitespace
    """
    lines: List[str] = []

    for paragraph in text.splitlines():
        current = ""
        for match in _WORD.finditer(paragraph):
            gap, word = match.groups()
            if not current:
                # First word of the paragraph, keeps the indentation
                current = gap + word
                continue
            if len(current) + len(gap) + len(word) <= width:
                current += gap + word
            else:
                lines.append(current)
                current = word
        if current:
            lines.append(current)

    return lines


def build_javadoc(description: str, indent: str = "", line_length: int = 80) -> str:
    """
    Build a javadoc block with the given description and indentation.

    Args:
        description: Comment text, may contain newlines
        indent: Indentation placed before every comment line
        line_length: Maximum total line length, indentation included

    Returns:
        The comment block, terminated by a newline
    """
    prefix = f"{indent}{JAVADOC_LINE}"
    parts = [f"{indent}{JAVADOC_OPEN}"]
    for line in wrap_text(description, line_length - len(prefix)):
        parts.append(f"{prefix}{line}")
    parts.append(f"{indent}{JAVADOC_CLOSE}")
    return "\n".join(parts) + "\n"
