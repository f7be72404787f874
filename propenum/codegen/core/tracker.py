"""
Duplicate detection for generated enum fields.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...logging_config import get_logger
from .errors import DuplicateFieldError

logger = get_logger(__name__)


class DuplicateTracker:
    """Records generated identifiers per enum type and detects collisions."""

    def __init__(self):
        self._registered: Dict[Tuple[str, str], str] = {}

    def register(self, type_name: str, identifier: str, original_key: str) -> None:
        """
        Record an identifier for a type.

        Args:
            type_name: Qualified name of the enum type
            identifier: Generated field name
            original_key: Property key the field was generated from

        Raises:
            DuplicateFieldError: If the identifier was already registered
                for this type by another key
        """
        slot = (type_name, identifier)
        previous = self._registered.get(slot)
        if previous is not None:
            raise DuplicateFieldError(type_name, identifier, original_key, previous)
        self._registered[slot] = original_key

    def lookup(self, type_name: str, identifier: str) -> Optional[str]:
        """Key registered for an identifier, if any."""
        return self._registered.get((type_name, identifier))

    def reset(self, type_name: Optional[str] = None) -> None:
        """Forget registrations of one type, or of all types."""
        if type_name is None:
            self._registered.clear()
            return
        for slot in [s for s in self._registered if s[0] == type_name]:
            del self._registered[slot]

    def __len__(self) -> int:
        return len(self._registered)


@dataclass
class GenerationContext:
    """State of one generation run, passed explicitly into every emission."""

    duplicates: DuplicateTracker = field(default_factory=DuplicateTracker)
    generated_types: List[str] = field(default_factory=list)

    def begin_type(self, type_name: str) -> None:
        """Start a fresh duplicate scope for a type."""
        self.duplicates.reset(type_name)
        self.generated_types.append(type_name)
        logger.debug("Begin enum type %s", type_name)
