"""
Enum assembly.

Builds an EnumSpec from the ordered entries of one property file and hands
it to a language generator for rendering.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .config import EnumConfig
from .generator import CodeGenerator
from .naming import FieldValidator, KeyNormalizer
from .paths import PathResolver
from .schema import EnumSpec, GeneratedField, PropertyEntry, ResolvedPaths
from .tracker import GenerationContext

logger = get_logger(__name__)


@dataclass
class EmittedEnum:
    """Rendered enum together with everything derived on the way."""

    code: str
    paths: ResolvedPaths
    spec: EnumSpec
    warnings: List[str] = field(default_factory=list)

    @property
    def output_path(self) -> Path:
        return self.paths.output_path


class EnumEmitter:
    """Turns property entries into enum source through a language generator."""

    def __init__(self, config: EnumConfig, generator: CodeGenerator):
        """
        Initialize emitter.

        Args:
            config: Run configuration
            generator: Language generator used for rendering
        """
        self.config = config
        self.generator = generator
        self.resolver = PathResolver(
            config.base_dir,
            config.output_dir,
            package_name=config.package_name,
            file_extension=generator.file_extension,
        )
        self.normalizer = KeyNormalizer(config.prefix)
        self.validator = FieldValidator(config.field_pattern)

    def filter_entries(self, entries: Iterable[PropertyEntry]) -> List[PropertyEntry]:
        """Drop entries without the configured prefix when prefixed_only is set."""
        entries = list(entries)
        if not self.config.prefixed_only:
            return entries
        kept = [e for e in entries if e.key.startswith(self.config.prefix)]
        if len(kept) != len(entries):
            logger.debug(
                "Skipped %d entries without prefix %r",
                len(entries) - len(kept),
                self.config.prefix,
            )
        return kept

    def build_field(self, entry: PropertyEntry) -> GeneratedField:
        """
        Build the constant for one entry.

        Raises:
            InvalidKeyError: If the normalized key does not match the pattern
        """
        identifier = self.validator.validate(
            entry.key, self.normalizer.normalize(entry.key)
        )
        return GeneratedField(
            identifier_name=identifier,
            original_key=entry.key,
            comment=self.config.format_javadoc(entry.key, entry.value),
        )

    def build_spec(
        self,
        source: Union[str, Path],
        entries: Iterable[PropertyEntry],
        context: GenerationContext,
    ) -> Tuple[EnumSpec, ResolvedPaths]:
        """
        Assemble the complete enum description of one source file.

        Args:
            source: Source path relative to the base directory
            entries: Entries in file order
            context: Run state holding the duplicate tracker

        Returns:
            The spec and the resolved paths

        Raises:
            PathResolutionError: If the source is outside the base directory
            InvalidKeyError: If a key cannot become a valid identifier
            DuplicateFieldError: If two keys result in the same identifier
        """
        paths = self.resolver.resolve(source)
        spec = EnumSpec(
            type_name=paths.type_name,
            package_name=paths.package_name,
            interface_name=self.config.implement,
            base_name=paths.base_name,
            source_path=paths.relative_source,
        )
        context.begin_type(spec.qualified_name)

        for entry in self.filter_entries(entries):
            generated = self.build_field(entry)
            context.duplicates.register(
                spec.qualified_name, generated.identifier_name, entry.key
            )
            spec.add_field(generated)

        return spec, paths

    def emit(
        self,
        source: Union[str, Path],
        entries: Iterable[PropertyEntry],
        context: Optional[GenerationContext] = None,
    ) -> EmittedEnum:
        """
        Generate the enum source of one property file.

        Nothing is rendered until every entry has been accepted.

        Returns:
            EmittedEnum with code, paths, spec and warnings
        """
        context = context if context is not None else GenerationContext()
        spec, paths = self.build_spec(source, entries, context)

        warnings = self.generator.validate_spec(spec)
        for warning in warnings:
            logger.warning(warning)

        code = self.generator.format_code(self.generator.generate(spec))
        logger.info(
            "Generated %s with %d constants", spec.qualified_name, len(spec.fields)
        )
        return EmittedEnum(code=code, paths=paths, spec=spec, warnings=warnings)
