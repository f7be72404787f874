"""
Java enum generator implementation.

Renders an EnumSpec as a Java enum whose constants carry their original
property key.
"""

from pathlib import Path
from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import EnumConfig
from ...core.generator import CodeGenerator
from ...core.javadoc import build_javadoc
from ...core.schema import EnumSpec
from ...core.templates import TemplateEngine
from .naming import check_qualified_name, is_java_identifier

logger = get_logger(__name__)

ENUM_TEMPLATE = "enum.java.j2"

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    "\b": "\\b",
}


def java_string(value: str) -> str:
    """Escape text for use inside a Java string literal."""
    return "".join(_JAVA_ESCAPES.get(char, char) for char in str(value))


class JavaEnumGenerator(CodeGenerator):
    """Code generator for Java enums backed by property keys."""

    def __init__(self, config: Optional[EnumConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def register_filters(self, engine: TemplateEngine):
        engine.add_filter("javadoc", self._javadoc_filter)
        engine.add_filter("java_string", java_string)

    def _javadoc_filter(self, text: str, indent: str = "") -> str:
        # "*/" inside the text would close the comment early
        text = str(text).replace("*/", "*&#47;")
        return build_javadoc(text, indent, self.config.line_length)

    def generate(self, spec: EnumSpec) -> str:
        """
        Generate the Java source of one enum.

        Args:
            spec: Fully built enum description

        Returns:
            Java source text ending with a newline
        """
        context = {
            "package_name": spec.package_name,
            "type_name": spec.type_name,
            "interface_name": spec.interface_name,
            "fields": spec.fields,
            "base_name": spec.base_name,
            "type_description": (
                f'Auto generated enum type for property file "{spec.source_path}".'
            ),
            "constructor_description": (
                f"Constructs a new {{@link {spec.type_name}}}.\n"
                "@param originalKey\n"
                "         the property's key as it's denoted in the properties file"
            ),
        }
        logger.debug("Rendering %s with %s", spec.qualified_name, ENUM_TEMPLATE)
        return self.render_template(ENUM_TEMPLATE, context)

    def validate_spec(self, spec: EnumSpec) -> List[str]:
        """Add Java naming checks to the base validation."""
        warnings = super().validate_spec(spec)

        warnings.extend(check_qualified_name(spec.package_name, "Package name"))
        warnings.extend(check_qualified_name(spec.type_name, "Type name"))
        warnings.extend(check_qualified_name(spec.interface_name, "Interface name"))

        for generated in spec.fields:
            if not is_java_identifier(generated.identifier_name):
                warnings.append(
                    f"Constant '{generated.identifier_name}' in {spec.qualified_name} "
                    "is not a valid Java identifier"
                )

        return warnings


def create_java_generator(config: Optional[EnumConfig] = None) -> JavaEnumGenerator:
    """Create a Java enum generator."""
    return JavaEnumGenerator(config)
