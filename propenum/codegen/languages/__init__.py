"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaEnumGenerator, create_java_generator

__all__ = ["JavaEnumGenerator", "create_java_generator"]
