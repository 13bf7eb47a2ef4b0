"""Selects the definition generator for a diagram request.

A raw ``definition`` always wins. Otherwise the request's type tag is matched
against a handler table that covers every ``DiagramType`` member; the table
is checked at import time so a new member cannot be added without a handler.
"""

from typing import Any, Callable, Dict, List, Optional

import structlog

from diagram_creator.core.exceptions import UnsupportedDiagramTypeError
from diagram_creator.generators.class_diagram import generate_class_diagram
from diagram_creator.generators.er import generate_er_diagram
from diagram_creator.generators.flowchart import generate_flowchart
from diagram_creator.generators.gantt import generate_gantt
from diagram_creator.generators.mindmap import generate_mindmap
from diagram_creator.generators.pie import generate_pie
from diagram_creator.generators.sequence import generate_sequence
from diagram_creator.generators.state import generate_state_diagram
from diagram_creator.models.diagram import DiagramRequest
from diagram_creator.models.enums import DiagramType

logger = structlog.get_logger()

Handler = Callable[[DiagramRequest, Optional[List[str]]], str]


def _unsupported(request: DiagramRequest, warnings: Optional[List[str]]) -> str:
    logger.warning("Diagram type has no generator", diagram_type=request.type)
    raise UnsupportedDiagramTypeError(request.type)


_HANDLERS: Dict[DiagramType, Handler] = {
    DiagramType.FLOWCHART: lambda request, warnings: generate_flowchart(
        request.content, request.direction, warnings=warnings),
    DiagramType.SEQUENCE: lambda request, warnings: generate_sequence(request.content, warnings=warnings),
    DiagramType.CLASS: lambda request, warnings: generate_class_diagram(request.content, warnings=warnings),
    DiagramType.STATE: lambda request, warnings: generate_state_diagram(request.content, warnings=warnings),
    DiagramType.ER: lambda request, warnings: generate_er_diagram(request.content, warnings=warnings),
    DiagramType.GANTT: lambda request, warnings: generate_gantt(
        request.content, request.date_format, warnings=warnings),
    DiagramType.PIE: lambda request, warnings: generate_pie(request.content, warnings=warnings),
    DiagramType.MINDMAP: lambda request, warnings: generate_mindmap(request.content, warnings=warnings),
    DiagramType.TIMELINE: _unsupported,
    DiagramType.GITGRAPH: _unsupported,
}

_missing = [member.value for member in DiagramType if member not in _HANDLERS]
if _missing:
    raise RuntimeError(f"No definition handler registered for diagram types: {_missing}")


def resolve_diagram_type(value: Any) -> Optional[DiagramType]:
    """Return the ``DiagramType`` for a tag, or None when it is not declared."""
    if isinstance(value, DiagramType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return DiagramType(value)
    except ValueError:
        return None


def generate_definition(request: Any, warnings: Optional[List[str]] = None) -> str:
    """Produce the Mermaid definition for a diagram request.

    Args:
        request: ``DiagramRequest`` or mapping with ``type``, ``content``,
            ``definition``, ``direction`` and ``dateFormat``
        warnings: Optional list receiving messages about skipped sections

    Returns:
        The raw definition when one is given, otherwise the generated text.
        Type tags outside ``DiagramType`` yield string content unchanged, or
        an empty string.

    Raises:
        UnsupportedDiagramTypeError: For declared types without a generator
            (``timeline``, ``gitGraph``)
    """
    request = DiagramRequest.coerce(request)

    if isinstance(request.definition, str) and request.definition:
        return request.definition

    diagram_type = resolve_diagram_type(request.type)
    if diagram_type is None:
        message = f"unknown diagram type '{request.type}'; no definition generated"
        logger.warning("Unknown diagram type", diagram_type=request.type)
        if isinstance(request.content, str) and request.content:
            return request.content
        if warnings is not None:
            warnings.append(message)
        return ""

    return _HANDLERS[diagram_type](request, warnings)
