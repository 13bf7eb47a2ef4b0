"""Mindmap definition generator and the tree emitter behind it."""

from typing import Any, List, Mapping, Optional

import structlog

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.models.enums import DiagramType

logger = structlog.get_logger()

ROOT_INDENT = "  "
LEVEL_INDENT = "  "


def emit_tree(node: Mapping[str, Any], indent: str = ROOT_INDENT,
              warnings: Optional[List[str]] = None) -> str:
    """Emit a mindmap node and its descendants, depth-first and pre-order.

    Each node yields ``{indent}{text}`` with two more spaces of indentation
    per level below ``node``. Children keep their input order. The walk uses
    an explicit stack, so deep trees are not bounded by the recursion limit;
    the input must still be a finite tree (no cycles).

    Args:
        node: Mapping with ``text`` and an optional ``children`` list
        indent: Indentation of ``node`` itself
        warnings: Optional list receiving messages about skipped children

    Returns:
        Newline-terminated lines, one per node
    """
    def warn(message: str) -> None:
        message = f"{DiagramType.MINDMAP.value}: {message}"
        logger.debug("Skipped diagram section", diagram_type=DiagramType.MINDMAP.value, reason=message)
        if warnings is not None:
            warnings.append(message)

    lines: List[str] = []
    stack = [(node, 0, "root")]
    while stack:
        current, depth, path = stack.pop()
        if not isinstance(current, Mapping):
            warn(f"'{path}' is not an object; node skipped")
            continue

        lines.append(f"{indent}{LEVEL_INDENT * depth}{text(current.get('text'))}\n")

        children = current.get("children")
        if children is None:
            continue
        if not isinstance(children, (list, tuple)):
            warn(f"'{path}.children' is not a list; children skipped")
            continue
        # Reversed so the first child is popped next
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], depth + 1, f"{path}.children[{index}]"))

    return "".join(lines)


def generate_mindmap(content: Any, warnings: Optional[List[str]] = None) -> str:
    """Generate a mindmap from the tree under ``content['root']``."""
    builder = DefinitionBuilder("mindmap", DiagramType.MINDMAP.value, warnings)
    content = builder.content(content)

    definition = builder.build()
    root = content.get("root")
    if root is not None and root != "":
        definition += emit_tree(root, warnings=warnings)
    return definition
