"""Pie chart definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.models.enums import DiagramType

DEFAULT_TITLE = "Pie Chart"


def generate_pie(content: Any, warnings: Optional[List[str]] = None) -> str:
    builder = DefinitionBuilder("pie showData", DiagramType.PIE.value, warnings)
    content = builder.content(content)

    builder.line(f"title {text(content.get('title') or DEFAULT_TITLE)}")
    for item in builder.items(content, "data"):
        builder.line(f"\"{text(item.get('label'))}\" : {text(item.get('value'))}")

    return builder.build()
