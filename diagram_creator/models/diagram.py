"""
Value records exchanged with callers of the diagram creator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

DEFAULT_TITLE = "Untitled Diagram"
DEFAULT_DIRECTION = "TD"
METADATA_VERSION = "1.0.0"


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class DiagramRequest:
    """
    A caller-supplied description of one diagram.

    Either ``content`` (structured data whose shape depends on ``type``) or
    ``definition`` (raw Mermaid text) must be present. When ``definition`` is
    a non-empty string it wins and ``content`` is ignored.

    Attributes:
        type (Optional[str]): Diagram type tag, e.g. ``"flowchart"``
        title (Optional[str]): Human-readable title carried into the result
        direction (str): Flowchart direction (TD, LR, BT, RL)
        content (Any): Structured diagram content
        definition (Optional[str]): Raw Mermaid definition
        date_format (Optional[str]): Gantt date format fallback
    """
    type: Optional[str] = None
    title: Optional[str] = None
    direction: str = DEFAULT_DIRECTION
    content: Any = None
    definition: Optional[str] = None
    date_format: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiagramRequest":
        """Build a request from the camelCase wire shape."""
        date_format = data.get("dateFormat")
        if date_format is None:
            date_format = data.get("date_format")
        return cls(
            type=_enum_value(data.get("type")),
            title=data.get("title"),
            direction=_enum_value(data.get("direction")) or DEFAULT_DIRECTION,
            content=data.get("content"),
            definition=data.get("definition"),
            date_format=date_format,
        )

    @classmethod
    def coerce(cls, data: Any) -> "DiagramRequest":
        """Accept a request, a mapping, or any object exposing the same attributes."""
        if isinstance(data, cls):
            return data
        if isinstance(data, Mapping):
            return cls.from_dict(data)
        return cls(
            type=_enum_value(getattr(data, "type", None)),
            title=getattr(data, "title", None),
            direction=_enum_value(getattr(data, "direction", None)) or DEFAULT_DIRECTION,
            content=getattr(data, "content", None),
            definition=getattr(data, "definition", None),
            date_format=getattr(data, "date_format", None),
        )


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls):
        return cls(is_valid=True, errors=[])

    @classmethod
    def failure(cls, errors: List[str]):
        return cls(is_valid=False, errors=list(errors))

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class DiagramMetadata:
    created_at: str
    version: str = METADATA_VERSION

    def to_dict(self) -> Dict[str, str]:
        return {"createdAt": self.created_at, "version": self.version}


@dataclass(frozen=True)
class DiagramResult:
    """
    A generated diagram, ready to hand to a rendering engine.

    Attributes:
        definition (str): Mermaid definition text
        config (Dict[str, Any]): Merged rendering configuration
        type (str): Diagram type tag from the request
        title (str): Request title or ``"Untitled Diagram"``
        metadata (DiagramMetadata): Creation timestamp and version tag
        warnings (Tuple[str, ...]): Sections skipped while generating
    """
    definition: str
    config: Dict[str, Any]
    type: str
    title: str
    metadata: DiagramMetadata
    warnings: Tuple[str, ...] = ()

    def render_payload(self) -> Dict[str, Any]:
        """The ``{definition, config}`` pair consumed by rendering collaborators."""
        return {"definition": self.definition, "config": dict(self.config)}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "definition": self.definition,
            "config": dict(self.config),
            "type": self.type,
            "title": self.title,
            "metadata": self.metadata.to_dict(),
            "warnings": list(self.warnings),
        }
