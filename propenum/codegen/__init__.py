"""
Enum code generation module.

Generates enum types from property files.
"""

from .core.config import ConfigManager, EnumConfig, load_config
from .core.generator import CodeGenerator, GenerationResult
from .core.schema import EnumSpec, GeneratedField, PropertyEntry
from .pipeline import RunResult, generate_enum, generate_file, run_generation
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    list_supported_languages,
)

__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "EnumSpec",
    "GeneratedField",
    "PropertyEntry",
    "EnumConfig",
    "ConfigManager",
    "load_config",
    "RunResult",
    "run_generation",
    "generate_file",
    "generate_enum",
    "GeneratorRegistry",
    "RegistryError",
    "get_generator",
    "list_supported_languages",
]
