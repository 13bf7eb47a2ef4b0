"""Line accumulator shared by the definition generators.

Generators read caller content leniently: a section that is present but not
a list, or a list element that is not a mapping, is left out of the output.
Each omission is logged and, when the caller passed a ``warnings`` list,
reported there as a readable message.
"""

from typing import Any, List, Mapping, Optional

import structlog

logger = structlog.get_logger()

INDENT = "    "


def text(value: Any) -> str:
    """Render a content value the way it appears in a definition."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class DefinitionBuilder:
    """Collects definition lines and omission warnings for one diagram.

    Attributes:
        kind: Diagram type tag used as a prefix in warning messages
        lines: Lines emitted so far, without trailing newlines
        warnings: Caller-supplied warning list, or None to only log
    """

    def __init__(self, header: str, kind: str, warnings: Optional[List[str]] = None):
        self.kind = kind
        self.lines: List[str] = [header]
        self.warnings = warnings

    def line(self, content: str, depth: int = 1) -> None:
        self.lines.append(f"{INDENT * depth}{content}")

    def blank(self) -> None:
        self.lines.append("")

    def warn(self, message: str) -> None:
        message = f"{self.kind}: {message}"
        logger.debug("Skipped diagram section", diagram_type=self.kind, reason=message)
        if self.warnings is not None:
            self.warnings.append(message)

    def content(self, content: Any) -> Mapping[str, Any]:
        """Return ``content`` when it is a mapping, otherwise an empty one."""
        if isinstance(content, Mapping):
            return content
        if content is None:
            self.warn("content is missing; only the header was generated")
        else:
            self.warn("content is not an object; only the header was generated")
        return {}

    def items(self, container: Any, key: str, path: Optional[str] = None) -> List[Mapping[str, Any]]:
        """Return the mapping elements of ``container[key]``.

        Args:
            container: Mapping holding the section
            key: Section name
            path: Name used in warnings (defaults to ``key``)

        Returns:
            The well-formed elements, in input order; empty when the section
            is absent or malformed
        """
        path = path or key
        value = container.get(key) if isinstance(container, Mapping) else None
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            self.warn(f"'{path}' is not a list; section skipped")
            return []

        elements = []
        for index, element in enumerate(value):
            if isinstance(element, Mapping):
                elements.append(element)
            else:
                self.warn(f"'{path}[{index}]' is not an object; entry skipped")
        return elements

    def build(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
