"""
Command line interface.

Provides the ``propenum generate`` and ``propenum languages`` commands.
"""

import argparse
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import RunResult, run_generation
from .codegen.core.config import ConfigError, EnumConfig, load_config
from .codegen.registry import (
    RegistryError,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

# Initialize rich console
console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="propenum",
        description="Generate Java enums from property files",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    generate = subparsers.add_parser(
        "generate",
        help="Generate enum sources from property files",
        description="Generate one enum type per property file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  propenum generate com/example/messages.properties
  propenum generate --config propenum.json
  propenum generate --prefix com.example --prefixed-only --stdout messages.properties
        """.strip(),
    )

    generate.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Property files, relative to the base directory",
    )
    generate.add_argument("--config", metavar="FILE", help="JSON configuration file")

    # Input and output
    io_group = generate.add_argument_group("input and output")
    io_group.add_argument("--base-dir", metavar="DIR", help="Directory sources are relative to")
    io_group.add_argument("--output-dir", metavar="DIR", help="Root directory for generated files")
    io_group.add_argument(
        "--source-encoding", metavar="ENCODING", help="Encoding of the property files"
    )
    io_group.add_argument(
        "--target-encoding", metavar="ENCODING", help="Encoding of the generated files"
    )
    io_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated code instead of writing files",
    )

    # Enum shape
    enum_group = generate.add_argument_group("generated enum")
    enum_group.add_argument(
        "--package-name",
        "--package",
        metavar="NAME",
        help="Package for all generated enums (default: derived from the path)",
    )
    enum_group.add_argument("--prefix", help="Key prefix removed from field names")
    enum_group.add_argument(
        "--prefixed-only",
        action="store_true",
        default=None,
        help="Only use keys starting with the prefix",
    )
    enum_group.add_argument(
        "--implement", metavar="INTERFACE", help="Interface the enums implement"
    )
    enum_group.add_argument(
        "--line-length", type=int, metavar="N", help="Maximum comment line length"
    )
    enum_group.add_argument(
        "--enum-javadoc",
        metavar="TEMPLATE",
        help="Comment of each constant, {key} and {value} are replaced",
    )
    enum_group.add_argument(
        "--field-pattern",
        metavar="REGEX",
        help="Regular expression every field name must match",
    )
    enum_group.add_argument("--language", "-l", help="Target language (default: java)")

    # Run behaviour
    run_group = generate.add_argument_group("run")
    run_group.add_argument(
        "--keep-going",
        action="store_false",
        dest="fail_fast",
        default=None,
        help="Process all files even after a failure",
    )
    run_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress and show generation metadata",
    )
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def _build_config(args: argparse.Namespace) -> EnumConfig:
    """Build configuration from CLI arguments."""
    overrides = {
        "base_dir": args.base_dir,
        "output_dir": args.output_dir,
        "package_name": args.package_name,
        "prefix": args.prefix,
        "prefixed_only": args.prefixed_only,
        "implement": args.implement,
        "line_length": args.line_length,
        "enum_javadoc": args.enum_javadoc,
        "field_pattern": args.field_pattern,
        "source_encoding": args.source_encoding,
        "target_encoding": args.target_encoding,
        "fail_fast": args.fail_fast,
    }
    if args.files:
        overrides["files"] = args.files

    if args.language:
        overrides["language"] = args.language.lower()

    try:
        config = load_config(
            custom_config=overrides,
            config_file=args.config,
            language=args.language or "java",
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    if not is_language_supported(config.language):
        raise CLIError(
            f"Unsupported language '{config.language}'. "
            f"Supported languages: {', '.join(list_supported_languages())}"
        )
    return config


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        config = _build_config(args)
        if not config.files:
            raise CLIError("No property files given (pass FILE or set 'files' in --config)")
        run = run_generation(config, write=not args.stdout)
    except (CLIError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    if args.stdout:
        _print_code(run, config)
    else:
        _print_summary(run)

    if args.verbose:
        _print_metadata(run)

    _print_warnings(run)

    for failure in run.failures:
        source = f" {failure.source}" if failure.source else ""
        console.print(
            f"[red]✗ Generation failed{escape(source)}:[/red] "
            f"{escape(failure.error_message)}"
        )

    return 0 if run.success else 1


def _print_code(run: RunResult, config: EnumConfig):
    """Display generated code with syntax highlighting."""
    for result in run.generated:
        console.print(
            Panel(
                Syntax(result.code, config.language, theme="monokai"),
                title=f"📄 {result.output_path.name}",
                border_style="green",
            )
        )


def _print_summary(run: RunResult):
    """Show one row per processed source."""
    if not run.results:
        return

    table = Table(title="📋 Generated Enums", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Source", style="bold")
    table.add_column("Status")
    table.add_column("Output", style="cyan")
    table.add_column("Constants", justify="right")

    for result in run.results:
        if result.success:
            table.add_row(
                result.source or "",
                "[green]✓[/green]",
                str(result.output_path),
                str(result.metadata.get("field_count", "")),
            )
        else:
            table.add_row(result.source or "", "[red]✗[/red]", "", "")

    console.print(table)


def _print_metadata(run: RunResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Type", style="bold")
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for result in run.generated:
        type_name = result.metadata.get("type_name", "")
        for key, value in result.metadata.items():
            if key == "type_name":
                continue
            metadata_table.add_row(type_name, key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def _print_warnings(run: RunResult):
    if run.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in run.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        console.print()


def _handle_languages(args: argparse.Namespace) -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Templates", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        table.add_row(
            f"🔧 {language}",
            info["file_extension"],
            info["class"],
            escape(info["templates"]),
        )

    console.print(table)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure, 2 for usage errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("INFO" if getattr(args, "verbose", False) else "WARNING")
    logger.debug("Running command %s", args.command)

    return args.func(args)
