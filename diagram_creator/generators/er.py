"""Entity-relationship diagram definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.models.enums import DiagramType

DEFAULT_CARDINALITY = "||"
# Right-hand side of every relationship; the caller's cardinality only
# controls the left-hand token.
RELATIONSHIP_SUFFIX = "--|{"


def generate_er_diagram(content: Any, warnings: Optional[List[str]] = None) -> str:
    """Generate an ER diagram from ``entities`` and ``relationships``.

    Args:
        content: Mapping with ``entities`` (each with ``attributes``) and
            ``relationships`` lists
        warnings: Optional list receiving messages about skipped sections

    Returns:
        The ER diagram definition
    """
    builder = DefinitionBuilder("erDiagram", DiagramType.ER.value, warnings)
    content = builder.content(content)

    for index, entity in enumerate(builder.items(content, "entities")):
        builder.line(f"{text(entity.get('name'))} {{")
        for attr in builder.items(entity, "attributes", f"entities[{index}].attributes"):
            key = attr.get("key")
            builder.line(
                f"{text(attr.get('type'))} {text(attr.get('name'))}{' ' + text(key) if key else ''}",
                depth=2,
            )
        builder.line("}")

    for rel in builder.items(content, "relationships"):
        cardinality = rel.get("cardinality") or DEFAULT_CARDINALITY
        builder.line(
            f"{text(rel.get('from'))} {text(cardinality)}{RELATIONSHIP_SUFFIX} "
            f"{text(rel.get('to'))} : \"{text(rel.get('label'))}\""
        )

    return builder.build()
