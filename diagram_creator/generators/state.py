"""State diagram (``stateDiagram-v2``) definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.models.enums import DiagramType, StateType


def _labelled(head: str, label: Any) -> str:
    return f"{head} : {text(label)}" if label else head


def generate_state_diagram(content: Any, warnings: Optional[List[str]] = None) -> str:
    """Generate a state diagram from ``states`` and ``transitions``.

    A ``start`` state emits the bare ``[*]`` marker and an ``end`` state an
    ``id --> [*]`` transition. A state carrying a ``composite`` list becomes a
    nested ``state id { ... }`` block whose lines are copied verbatim.
    """
    builder = DefinitionBuilder("stateDiagram-v2", DiagramType.STATE.value, warnings)
    content = builder.content(content)

    for index, state in enumerate(builder.items(content, "states")):
        state_id = text(state.get("id"))
        state_type = getattr(state.get("type"), "value", state.get("type"))
        composite = state.get("composite")

        if state_type == StateType.START.value:
            builder.line("[*]")
        elif state_type == StateType.END.value:
            builder.line(f"{state_id} --> [*]")
        elif isinstance(composite, (list, tuple)):
            builder.line(f"state {state_id} {{")
            for sub_line in composite:
                builder.line(text(sub_line), depth=2)
            builder.line("}")
        else:
            if composite is not None:
                builder.warn(f"'states[{index}].composite' is not a list; emitted as a simple state")
            builder.line(_labelled(state_id, state.get("label")))

    for transition in builder.items(content, "transitions"):
        builder.line(_labelled(
            f"{text(transition.get('from'))} --> {text(transition.get('to'))}",
            transition.get("label"),
        ))

    return builder.build()
