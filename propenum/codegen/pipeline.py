"""
Generation run over all configured property files.

Each source is loaded, emitted and written on its own. Failures are turned
into GenerationResult values at this boundary.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..logging_config import get_logger
from ..utils import check_encoding, load_properties_file, write_atomic
from .core.config import EnumConfig
from .core.emitter import EmittedEnum, EnumEmitter
from .core.errors import GeneratorError
from .core.generator import CodeGenerator, GenerationResult
from .core.schema import PropertyEntry, entries_from_pairs
from .core.templates import TemplateError
from .core.tracker import GenerationContext
from .registry import get_generator

logger = get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of a generation run, one GenerationResult per attempted source."""

    results: List[GenerationResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def failures(self) -> List[GenerationResult]:
        return [result for result in self.results if not result.success]

    @property
    def generated(self) -> List[GenerationResult]:
        return [result for result in self.results if result.success]

    @property
    def warnings(self) -> List[str]:
        return [warning for result in self.results for warning in result.warnings]

    def raise_on_error(self) -> None:
        """Re-raise the exception of the first failed source, if any."""
        for result in self.failures:
            if result.exception is not None:
                raise result.exception
            raise GeneratorError(result.error_message)


def _result_from_emitted(
    emitted: EmittedEnum, generator: CodeGenerator, source: str
) -> GenerationResult:
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "type_name": emitted.spec.qualified_name,
        "field_count": len(emitted.spec.fields),
    }
    return GenerationResult(
        emitted.code,
        emitted.warnings,
        metadata,
        output_path=emitted.output_path,
        source=source,
    )


def generate_file(
    source: Union[str, Path],
    emitter: EnumEmitter,
    context: GenerationContext,
    write: bool = True,
) -> GenerationResult:
    """
    Generate the enum of one property file.

    Args:
        source: Source path relative to the base directory
        emitter: Emitter configured for the run
        context: Run state shared by all sources
        write: Write the result to its output path

    Returns:
        GenerationResult, failed if any step raised
    """
    config = emitter.config
    try:
        entries = load_properties_file(
            emitter.resolver.source_path(source), config.source_encoding
        )
        emitted = emitter.emit(source, entries, context)
        if write:
            write_atomic(emitted.output_path, emitted.code, config.target_encoding)
            logger.info("Wrote %s", emitted.output_path)
        return _result_from_emitted(emitted, emitter.generator, str(source))

    except (GeneratorError, TemplateError) as e:
        logger.error("Failed to generate enum for %s: %s", source, e)
        return GenerationResult.error(str(e), exception=e, source=str(source))


def run_generation(
    config: EnumConfig,
    generator: Optional[CodeGenerator] = None,
    write: bool = True,
) -> RunResult:
    """
    Generate enums for every file in ``config.files``.

    With ``config.fail_fast`` the run stops at the first failed source,
    otherwise all sources are attempted.

    Args:
        config: Run configuration
        generator: Generator to use, looked up by ``config.language`` if omitted
        write: Write generated files (False only renders them)

    Returns:
        RunResult with one entry per attempted source
    """
    run = RunResult()

    try:
        check_encoding(config.source_encoding, "source")
        check_encoding(config.target_encoding, "target")
    except GeneratorError as e:
        logger.error("%s", e)
        run.results.append(GenerationResult.error(str(e), exception=e))
        return run

    if generator is None:
        generator = get_generator(config.language, config)

    emitter = EnumEmitter(config, generator)
    context = GenerationContext()

    if not config.files:
        logger.warning("No property files configured")

    for source in config.files:
        result = generate_file(source, emitter, context, write=write)
        run.results.append(result)
        if not result.success and config.fail_fast:
            logger.debug("Stopping after first failure")
            break

    logger.info(
        "Generated %d of %d enum types", len(run.generated), len(config.files)
    )
    return run


def generate_enum(
    source: Union[str, Path],
    entries: Iterable[Union[PropertyEntry, Tuple[str, str]]],
    config: Optional[EnumConfig] = None,
    generator: Optional[CodeGenerator] = None,
    context: Optional[GenerationContext] = None,
) -> GenerationResult:
    """
    Generate the enum for in-memory entries without touching the file system.

    Args:
        source: Source path the entries belong to (relative to the base directory)
        entries: PropertyEntry objects or ``(key, value)`` pairs, in order.
            A repeated key is merged as in a property file.
        config: Configuration, defaults if omitted
        generator: Generator to use, looked up by ``config.language`` if omitted
        context: Run state, a fresh one if omitted

    Returns:
        GenerationResult with the generated code
    """
    config = config or EnumConfig()

    # A repeated key keeps its first position and its last value
    values: Dict[str, str] = {}
    for entry in entries:
        key, value = (
            (entry.key, entry.value) if isinstance(entry, PropertyEntry) else entry
        )
        values[str(key)] = str(value)
    entries = entries_from_pairs(values.items())

    if generator is None:
        generator = get_generator(config.language, config)
    emitter = EnumEmitter(config, generator)

    try:
        emitted = emitter.emit(source, entries, context or GenerationContext())
    except (GeneratorError, TemplateError) as e:
        return GenerationResult.error(str(e), exception=e, source=str(source))

    return _result_from_emitted(emitted, generator, str(source))
