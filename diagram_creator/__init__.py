"""
Mermaid Diagram Creator - generate Mermaid diagram definitions from
structured diagram data.

Each supported diagram type has a generator that maps a content mapping
(nodes and links, actors and messages, classes, states, entities, tasks,
pie slices or a mindmap tree) onto Mermaid text. ``create_diagram`` validates
a request, dispatches it and wraps the definition with rendering
configuration and metadata.

Example:
    >>> from diagram_creator import create_diagram
    >>> diagram = create_diagram({
    ...     "type": "pie",
    ...     "content": {"title": "T", "data": [{"label": "A", "value": 1}]},
    ... })
    >>> print(diagram.definition)
    pie showData
        title T
        "A" : 1
"""

from typing import List

__version__: str = "1.0.0"

from .models import (
    DiagramType, DIAGRAM_TYPES, Direction, NodeShape, LinkStyle, ActorType,
    MessageType, ClassRelationType, StateType,
    DiagramRequest, DiagramResult, DiagramMetadata, ValidationResult,
    RenderConfig, FlowchartOptions, SequenceOptions
)
from .core.exceptions import (
    DiagramCreatorError, InvalidDiagramDataError, UnsupportedDiagramTypeError
)
from .generators import (
    generate_flowchart, generate_sequence, generate_class_diagram,
    generate_state_diagram, generate_er_diagram, generate_gantt, generate_pie,
    generate_mindmap, emit_tree, generate_definition
)
from .services.diagram_service import (
    DiagramService, validate_diagram_data, create_diagram
)

__all__: List[str] = [
    # Main operations
    "validate_diagram_data",
    "generate_definition",
    "create_diagram",
    "DiagramService",

    # Per-type generators
    "generate_flowchart",
    "generate_sequence",
    "generate_class_diagram",
    "generate_state_diagram",
    "generate_er_diagram",
    "generate_gantt",
    "generate_pie",
    "generate_mindmap",
    "emit_tree",

    # Diagram types and style names
    "DiagramType",
    "DIAGRAM_TYPES",
    "Direction",
    "NodeShape",
    "LinkStyle",
    "ActorType",
    "MessageType",
    "ClassRelationType",
    "StateType",

    # Data models
    "DiagramRequest",
    "DiagramResult",
    "DiagramMetadata",
    "ValidationResult",
    "RenderConfig",
    "FlowchartOptions",
    "SequenceOptions",

    # Exceptions
    "DiagramCreatorError",
    "InvalidDiagramDataError",
    "UnsupportedDiagramTypeError",
]
