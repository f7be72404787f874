"""
Java code generator module.

Generates Java enums from property files.
"""

from .generator import JavaEnumGenerator, create_java_generator, java_string
from .naming import JAVA_RESERVED_WORDS, check_qualified_name, is_java_identifier

__all__ = [
    "JavaEnumGenerator",
    "create_java_generator",
    "java_string",
    "JAVA_RESERVED_WORDS",
    "check_qualified_name",
    "is_java_identifier",
]
