"""
Core data structures for enum generation.

Property entries come in, an EnumSpec describing one output type comes out
of the emitter and goes into a language generator.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class PropertyEntry:
    """One key/value pair of a property file."""

    key: str
    value: str


@dataclass(frozen=True)
class GeneratedField:
    """A single enum constant."""

    identifier_name: str
    original_key: str  # Kept verbatim for reverse lookup via toString()
    comment: str = ""


@dataclass(frozen=True)
class ResolvedPaths:
    """Names and locations derived from a source path."""

    package_name: str
    type_name: str
    output_path: Path
    base_name: str
    relative_source: str  # POSIX form, relative to the base directory


@dataclass
class EnumSpec:
    """Represents one enumeration type before it is rendered."""

    type_name: str
    package_name: str = ""
    interface_name: Optional[str] = None
    fields: List[GeneratedField] = field(default_factory=list)
    base_name: str = ""
    source_path: str = ""

    @property
    def qualified_name(self) -> str:
        """Type name prefixed with its package, if any."""
        if self.package_name:
            return f"{self.package_name}.{self.type_name}"
        return self.type_name

    def add_field(self, generated: GeneratedField) -> None:
        """Append a field, keeping source order."""
        self.fields.append(generated)

    def get_field(self, identifier_name: str) -> Optional[GeneratedField]:
        """Get field by identifier name."""
        for generated in self.fields:
            if generated.identifier_name == identifier_name:
                return generated
        return None

    @property
    def identifiers(self) -> List[str]:
        return [generated.identifier_name for generated in self.fields]


def entries_from_pairs(pairs: Iterable[tuple]) -> List[PropertyEntry]:
    """Build property entries from ``(key, value)`` pairs, keeping their order."""
    return [PropertyEntry(str(key), str(value)) for key, value in pairs]
