"""Lookup tables from abstract style names to Mermaid notation fragments.

Every lookup falls back to the table's default entry when the style is
absent or unrecognised.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from diagram_creator.generators.builder import text

# Node shape -> (opening, closing) bracket pair
NODE_SHAPES: Dict[str, Tuple[str, str]] = {
    "rect": ("[", "]"),
    "rounded": ("(", ")"),
    "stadium": ("([", "])"),
    "diamond": ("{", "}"),
    "hexagon": ("{{", "}}"),
    "circle": ("((", "))"),
}
DEFAULT_NODE_SHAPE = "rect"

# Flowchart link style -> arrow token
LINK_ARROWS: Dict[str, str] = {
    "arrow": "-->",
    "dotted": "-.->",
    "thick": "==>",
    "none": "---",
}
DEFAULT_LINK_STYLE = "arrow"

# Class relationship kind -> relationship symbol
CLASS_RELATIONS: Dict[str, str] = {
    "extends": "<|--",
    "implements": "<|..",
    "composition": "*--",
    "aggregation": "o--",
    "association": "-->",
    "dependency": "<..",
}
DEFAULT_CLASS_RELATION = "association"

# Sequence message type -> arrow token
MESSAGE_ARROWS: Dict[str, str] = {
    "solid": "->>",
    "dashed": "-->>",
}
DEFAULT_MESSAGE_TYPE = "solid"


def _style_key(value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        value = value.value
    return value if isinstance(value, str) else None


def node_shape(shape: Any = None) -> Tuple[str, str]:
    """Return the bracket pair for a node shape."""
    return NODE_SHAPES.get(_style_key(shape), NODE_SHAPES[DEFAULT_NODE_SHAPE])


def format_node(node_id: str, label: str, shape: Any = None) -> str:
    """Render a node as ``id`` followed by its bracketed label."""
    opening, closing = node_shape(shape)
    return f"{node_id}{opening}{label}{closing}"


def link_arrow(style: Any = None) -> str:
    return LINK_ARROWS.get(_style_key(style), LINK_ARROWS[DEFAULT_LINK_STYLE])


def class_relation(kind: Any = None) -> str:
    return CLASS_RELATIONS.get(_style_key(kind), CLASS_RELATIONS[DEFAULT_CLASS_RELATION])


def message_arrow(message_type: Any = None) -> str:
    return MESSAGE_ARROWS.get(_style_key(message_type), MESSAGE_ARROWS[DEFAULT_MESSAGE_TYPE])


def edge_label(label: Any = None) -> str:
    """``|label|`` when a label is present, otherwise empty."""
    return f"|{text(label)}|" if label else ""
