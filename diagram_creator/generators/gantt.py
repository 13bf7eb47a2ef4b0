"""Gantt chart definition generator."""

from typing import Any, List, Optional

from diagram_creator.generators.builder import DefinitionBuilder, text
from diagram_creator.models.enums import DiagramType

DEFAULT_TITLE = "Project Schedule"
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"
TASK_NAME_GAP = " " * 11


def generate_gantt(content: Any, date_format: Optional[str] = None,
                   warnings: Optional[List[str]] = None) -> str:
    """Generate a Gantt chart from titled ``sections`` of tasks.

    Each section is preceded by a blank line. A task line reads
    ``name           :status,id start, duration`` where the status prefix is
    optional and ``duration`` is preferred over ``end``.

    Args:
        content: Mapping with optional ``title``/``dateFormat`` and a
            ``sections`` list
        date_format: Fallback when the content carries no ``dateFormat``
        warnings: Optional list receiving messages about skipped sections

    Returns:
        The Gantt chart definition
    """
    builder = DefinitionBuilder("gantt", DiagramType.GANTT.value, warnings)
    content = builder.content(content)

    builder.line(f"title {text(content.get('title') or DEFAULT_TITLE)}")
    builder.line(f"dateFormat {text(content.get('dateFormat') or date_format or DEFAULT_DATE_FORMAT)}")

    for index, section in enumerate(builder.items(content, "sections")):
        builder.blank()
        builder.line(f"section {text(section.get('name'))}")
        for task in builder.items(section, "tasks", f"sections[{index}].tasks"):
            status = task.get("status")
            status_prefix = f"{text(status)}," if status else ""
            span = task.get("duration") or task.get("end")
            builder.line(
                f"{text(task.get('name'))}{TASK_NAME_GAP}:{status_prefix}{text(task.get('id') or '')} "
                f"{text(task.get('start'))}, {text(span)}",
                depth=2,
            )

    return builder.build()
