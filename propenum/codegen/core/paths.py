"""
Path and package derivation for generated enum files.
"""

import os
from pathlib import Path
from typing import Optional, Union

from ...logging_config import get_logger
from .errors import PathResolutionError
from .schema import ResolvedPaths

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _absolute(path: PathLike) -> Path:
    # abspath normalizes ".." without touching the file system
    return Path(os.path.abspath(path))


def build_package_name(source: PathLike, base_dir: PathLike) -> str:
    """
    Build the package name from the source location below ``base_dir``.

    Args:
        source: Source file path (absolute or relative to the cwd)
        base_dir: Base directory to cut off

    Returns:
        e.g. "com.example" for "res/com/example/File.properties" below "res",
        or "" when the file sits directly in ``base_dir``

    Raises:
        PathResolutionError: If the source is not located below ``base_dir``
    """
    source_path = _absolute(source)
    base_path = _absolute(base_dir)
    try:
        relative_parent = source_path.parent.relative_to(base_path)
    except ValueError:
        raise PathResolutionError(source_path, base_path) from None
    return ".".join(relative_parent.parts)


def build_type_name(source: PathLike) -> str:
    """Source file stem with an upper-cased first character."""
    stem = Path(source).stem
    return stem[:1].upper() + stem[1:]


def build_base_name(source: PathLike, base_dir: PathLike) -> str:
    """
    Build the resource base name of a source file.

    Returns:
        e.g. "com.example.messages" for "res/com/example/messages.properties"
    """
    package_name = build_package_name(source, base_dir)
    stem = Path(source).stem
    return f"{package_name}.{stem}" if package_name else stem


def build_target_file(
    source: PathLike, package_name: str, output_dir: PathLike, extension: str
) -> Path:
    """
    Build the target file below ``output_dir``.

    Returns:
        e.g. "out/com/example/Messages.java"
    """
    directory = Path(output_dir)
    if package_name:
        directory = directory.joinpath(*package_name.split("."))
    return directory / f"{build_type_name(source)}{extension}"


class PathResolver:
    """Derives package, type name and output path for each source file."""

    def __init__(
        self,
        base_dir: PathLike,
        output_dir: PathLike,
        package_name: Optional[str] = None,
        file_extension: str = ".java",
    ):
        """
        Initialize resolver.

        Args:
            base_dir: Directory source paths are relative to
            output_dir: Root directory for generated files
            package_name: Explicit package overriding the derived one
            file_extension: Extension of generated files
        """
        self.base_dir = _absolute(base_dir)
        self.output_dir = _absolute(output_dir)
        self.package_name = package_name
        self.file_extension = file_extension

    def source_path(self, source: PathLike) -> Path:
        """Absolute path of a source given relative to the base directory."""
        return _absolute(self.base_dir / source)

    def resolve(self, source: PathLike) -> ResolvedPaths:
        """Resolve all derived names for one source file."""
        source_path = self.source_path(source)
        derived_package = build_package_name(source_path, self.base_dir)
        package_name = (
            self.package_name if self.package_name is not None else derived_package
        )

        target = build_target_file(
            source_path, package_name, self.output_dir, self.file_extension
        )
        resolved = ResolvedPaths(
            package_name=package_name,
            type_name=build_type_name(source_path),
            output_path=target,
            base_name=build_base_name(source_path, self.base_dir),
            relative_source=source_path.relative_to(self.base_dir).as_posix(),
        )
        logger.debug("Resolved %s -> %s", source, resolved.output_path)
        return resolved
