"""propenum - generate Java enums from property files."""

from .codegen import (
    EnumConfig,
    GenerationResult,
    RunResult,
    generate_enum,
    load_config,
    run_generation,
)

__version__ = "0.1.0"

__all__ = [
    "EnumConfig",
    "GenerationResult",
    "RunResult",
    "generate_enum",
    "load_config",
    "run_generation",
    "__version__",
]
