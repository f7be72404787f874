"""
Generator registry.

Maps target language names to CodeGenerator classes and builds configured
generator instances for a run.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import ConfigError, EnumConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[EnumConfig, Dict[str, Any], str, Path]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Language name to generator class lookup. Names are case-insensitive."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}

    def register(self, language: str, generator_class: Type[CodeGenerator]):
        """
        Register a generator for a language.

        Registering the same class twice is a no-op.

        Raises:
            RegistryError: If the class is not a CodeGenerator, or another
                class is already registered for the language
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        key = language.lower()
        current = self._generators.get(key)
        if current is not None and current is not generator_class:
            raise RegistryError(
                f"Language '{key}' is already handled by {current.__name__}"
            )

        self._generators[key] = generator_class
        logger.debug("Registered %s generator %s", key, generator_class.__name__)

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Look up the generator class of a language.

        Raises:
            RegistryError: If no generator is registered for the language
        """
        try:
            return self._generators[language.lower()]
        except KeyError:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            ) from None

    def create_generator(
        self, language: str, config: Optional[ConfigSource] = None
    ) -> CodeGenerator:
        """
        Create a configured generator instance.

        Args:
            language: Language name
            config: EnumConfig, dict of overrides, or path to a JSON config file

        Returns:
            Generator instance

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        generator_class = self.get_generator_class(language)

        if config is not None and not isinstance(config, (EnumConfig, dict, str, Path)):
            raise RegistryError(f"Invalid config type: {type(config)}")

        if not isinstance(config, EnumConfig):
            try:
                if isinstance(config, dict):
                    config = load_config(custom_config=config, language=language)
                else:
                    config = load_config(config_file=config, language=language)
            except ConfigError as e:
                raise RegistryError(
                    f"Failed to create {language} generator: {e}"
                ) from e

        return generator_class(config)

    def list_languages(self) -> List[str]:
        """Registered language names, sorted."""
        return sorted(self._generators)

    def is_supported(self, language: str) -> bool:
        return language.lower() in self._generators

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Raises:
            RegistryError: If language not found
        """
        generator_class = self.get_generator_class(language)
        generator = generator_class(EnumConfig(language=language.lower()))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "templates": str(generator.get_template_directory()),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.java import JavaEnumGenerator

    registry.register("java", JavaEnumGenerator)


def get_generator(
    language: str, config: Optional[ConfigSource] = None
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)
