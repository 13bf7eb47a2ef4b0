"""Sequence diagram definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.generators.notation import message_arrow
from diagram_creator.models.enums import ActorType, DiagramType


def generate_sequence(content: Any, warnings: Optional[List[str]] = None) -> str:
    """Generate a sequence diagram from ``actors`` and ``messages``.

    Actors typed ``participant`` are declared with an optional alias; every
    other actor is declared with the ``actor`` keyword.
    """
    builder = DefinitionBuilder("sequenceDiagram", DiagramType.SEQUENCE.value, warnings)
    content = builder.content(content)

    for actor in builder.items(content, "actors"):
        actor_id = text(actor.get("id"))
        if getattr(actor.get("type"), "value", actor.get("type")) == ActorType.PARTICIPANT.value:
            alias = actor.get("alias")
            builder.line(f"participant {actor_id}{f' as {text(alias)}' if alias else ''}")
        else:
            builder.line(f"actor {actor_id}")

    for message in builder.items(content, "messages"):
        arrow = message_arrow(message.get("type"))
        builder.line(
            f"{text(message.get('from'))}{arrow} {text(message.get('to'))}: "
            f"{text(message.get('label') or '')}"
        )

    return builder.build()
