"""Class diagram definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.generators.notation import class_relation
from diagram_creator.models.enums import DiagramType

DEFAULT_VISIBILITY = "+"


def generate_class_diagram(content: Any, warnings: Optional[List[str]] = None) -> str:
    """Generate a class diagram from ``classes`` and ``relationships``.

    Each class becomes a ``class Name { ... }`` block holding its attributes
    (``+name: type``) followed by its methods (``+name(params) : returnType``).
    Relationship lines follow all class blocks.

    Args:
        content: Mapping with ``classes`` and ``relationships`` lists
        warnings: Optional list receiving messages about skipped sections

    Returns:
        The class diagram definition
    """
    builder = DefinitionBuilder("classDiagram", DiagramType.CLASS.value, warnings)
    content = builder.content(content)

    for index, cls in enumerate(builder.items(content, "classes")):
        builder.line(f"class {text(cls.get('name'))} {{")

        for attr in builder.items(cls, "attributes", f"classes[{index}].attributes"):
            visibility = attr.get("visibility") or DEFAULT_VISIBILITY
            builder.line(f"{visibility}{text(attr.get('name'))}: {text(attr.get('type'))}", depth=2)

        for method in builder.items(cls, "methods", f"classes[{index}].methods"):
            visibility = method.get("visibility") or DEFAULT_VISIBILITY
            return_type = method.get("returnType")
            builder.line(
                f"{visibility}{text(method.get('name'))}({text(method.get('params') or '')}) "
                f"{': ' + text(return_type) if return_type else ''}",
                depth=2,
            )

        builder.line("}")

    for rel in builder.items(content, "relationships"):
        symbol = class_relation(rel.get("type"))
        label = rel.get("label")
        builder.line(
            f"{text(rel.get('from'))} {symbol} {text(rel.get('to'))}"
            f"{f' : {text(label)}' if label else ''}"
        )

    return builder.build()
