"""
Core code generation components.

Provides the data model, key naming, comment formatting, path derivation
and base classes used by all language generators.
"""

from .config import ConfigError, ConfigManager, EnumConfig, load_config
from .emitter import EmittedEnum, EnumEmitter
from .errors import (
    DuplicateFieldError,
    GenerationIOError,
    GeneratorError,
    InvalidKeyError,
    MalformedPropertiesError,
    MissingSourceError,
    PathResolutionError,
    UnsupportedEncodingError,
)
from .generator import CodeGenerator, GenerationResult
from .javadoc import build_javadoc, wrap_text
from .naming import (
    DEFAULT_FIELD_PATTERN,
    FieldValidator,
    KeyNormalizer,
    build_enum_field_name,
    normalize_key,
)
from .paths import (
    PathResolver,
    build_base_name,
    build_package_name,
    build_target_file,
    build_type_name,
)
from .schema import EnumSpec, GeneratedField, PropertyEntry, ResolvedPaths
from .templates import TemplateEngine, TemplateError, create_template_engine
from .tracker import DuplicateTracker, GenerationContext

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    # Errors
    "GeneratorError",
    "InvalidKeyError",
    "DuplicateFieldError",
    "UnsupportedEncodingError",
    "MissingSourceError",
    "GenerationIOError",
    "MalformedPropertiesError",
    "PathResolutionError",
    # Data model
    "PropertyEntry",
    "GeneratedField",
    "EnumSpec",
    "ResolvedPaths",
    # Naming, comments and paths
    "DEFAULT_FIELD_PATTERN",
    "KeyNormalizer",
    "FieldValidator",
    "normalize_key",
    "build_enum_field_name",
    "wrap_text",
    "build_javadoc",
    "PathResolver",
    "build_package_name",
    "build_type_name",
    "build_base_name",
    "build_target_file",
    # Emission
    "DuplicateTracker",
    "GenerationContext",
    "EnumEmitter",
    "EmittedEnum",
    # Configuration system
    "EnumConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
