"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import EnumConfig
from .schema import EnumSpec
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[EnumConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or EnumConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        self.register_filters(self._template_engine)
        logger.debug("Template engine ready for %s", self.language_name)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    def register_filters(self, engine: TemplateEngine):
        """Hook for language specific template filters."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, spec: EnumSpec) -> str:
        """
        Generate the source of one enum type.

        Args:
            spec: Fully built enum description

        Returns:
            Generated code as a string
        """
        pass

    def validate_spec(self, spec: EnumSpec) -> List[str]:
        """
        Validate an enum spec for basic structural issues.

        Language generators should override this to add language-specific validation.

        Args:
            spec: Spec to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not spec.fields:
            warnings.append(f"Enum '{spec.qualified_name}' has no constants")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Code with trailing whitespace removed from every line
        """
        return "\n".join(line.rstrip() for line in code.split("\n"))

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
        output_path: Optional[Path] = None,
        source: Optional[str] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            output_path: File the code was (or would be) written to
            source: Source file the code was generated from
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.output_path = output_path
        self.source = source
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Exception = None, source: Optional[str] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="", source=source)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __repr__(self) -> str:
        state = "ok" if self.success else f"error={self.error_message!r}"
        return f"GenerationResult(source={self.source!r}, {state})"
