"""Flowchart definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.generators.notation import format_node, link_arrow, edge_label
from diagram_creator.models.diagram import DEFAULT_DIRECTION
from diagram_creator.models.enums import DiagramType


def generate_flowchart(content: Any, direction: Any = DEFAULT_DIRECTION,
                       warnings: Optional[List[str]] = None) -> str:
    """Generate a flowchart from ``nodes`` and ``links``.

    Nodes become ``id[label]`` lines (bracket pair chosen by ``shape``,
    label defaulting to the id) and links become ``from -->|label| to``
    lines, both in input order.

    Args:
        content: Mapping with ``nodes`` and ``links`` lists
        direction: Layout direction (TD, LR, BT, RL)
        warnings: Optional list receiving messages about skipped sections

    Returns:
        The flowchart definition, one newline-terminated line per statement
    """
    direction = getattr(direction, "value", direction) or DEFAULT_DIRECTION
    builder = DefinitionBuilder(f"flowchart {direction}", DiagramType.FLOWCHART.value, warnings)
    content = builder.content(content)

    for node in builder.items(content, "nodes"):
        node_id = text(node.get("id"))
        label = text(node.get("label") or node.get("id"))
        builder.line(format_node(node_id, label, node.get("shape")))

    for link in builder.items(content, "links"):
        arrow = link_arrow(link.get("style"))
        label = edge_label(link.get("label"))
        builder.line(f"{text(link.get('from'))} {arrow}{label} {text(link.get('to'))}")

    return builder.build()
