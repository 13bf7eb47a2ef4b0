"""Rendering configuration handed to the Mermaid engine.

The options mirror the keys the engine's ``initialize`` call recognises.
A ``RenderConfig`` is built per call (from defaults or from environment
settings) and merged with caller overrides; nothing here is shared state.

Classes:
    FlowchartOptions: Flowchart-specific rendering options
    SequenceOptions: Sequence-diagram layout options
    RenderConfig: Complete rendering configuration
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from diagram_creator.core.exceptions import InvalidDiagramDataError

DEFAULT_FONT_FAMILY = '"trebuchet ms", verdana, arial, sans-serif'


@dataclass
class FlowchartOptions:
    """Flowchart rendering options.

    Attributes:
        html_labels: Whether labels are rendered as HTML
        curve: Edge interpolation curve name
    """
    html_labels: bool = True
    curve: str = "basis"

    def to_dict(self) -> Dict[str, Any]:
        return {"htmlLabels": self.html_labels, "curve": self.curve}


@dataclass
class SequenceOptions:
    """Sequence diagram layout options, in pixels."""
    diagram_margin_x: int = 50
    diagram_margin_y: int = 10
    actor_margin: int = 50
    width: int = 150
    height: int = 65

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diagramMarginX": self.diagram_margin_x,
            "diagramMarginY": self.diagram_margin_y,
            "actorMargin": self.actor_margin,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class RenderConfig:
    """Complete rendering configuration for one diagram.

    Attributes:
        theme: Mermaid theme name
        start_on_load: Whether the engine renders on page load
        security_level: Engine security level
        font_family: CSS font family for all text
        flowchart: Flowchart-specific options
        sequence: Sequence-diagram layout options
    """
    theme: str = "default"
    start_on_load: bool = False
    security_level: str = "loose"
    font_family: str = DEFAULT_FONT_FAMILY
    flowchart: FlowchartOptions = field(default_factory=FlowchartOptions)
    sequence: SequenceOptions = field(default_factory=SequenceOptions)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the engine's camelCase configuration mapping.

        Returns:
            A freshly built dictionary; mutating it does not affect this config
        """
        return {
            "theme": self.theme,
            "startOnLoad": self.start_on_load,
            "securityLevel": self.security_level,
            "fontFamily": self.font_family,
            "flowchart": self.flowchart.to_dict(),
            "sequence": self.sequence.to_dict(),
        }

    def merge(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Shallow-merge caller overrides over this configuration.

        Each top-level key in ``overrides`` replaces the default value
        entirely; nested mappings are not merged.

        Args:
            overrides: Engine configuration keys to override

        Returns:
            The merged configuration mapping

        Raises:
            InvalidDiagramDataError: If ``overrides`` is not a mapping
        """
        if overrides is not None and not isinstance(overrides, Mapping):
            raise InvalidDiagramDataError(["Rendering config must be an object"])

        merged = self.to_dict()
        if overrides:
            merged.update(overrides)
        return merged

    @classmethod
    def from_settings(cls, settings) -> "RenderConfig":
        """Create a configuration from application settings.

        Args:
            settings: Object exposing the rendering fields of ``Settings``

        Returns:
            RenderConfig instance
        """
        return cls(
            theme=settings.theme,
            security_level=settings.security_level,
            font_family=settings.font_family,
            flowchart=FlowchartOptions(
                html_labels=settings.flowchart_html_labels,
                curve=settings.flowchart_curve,
            ),
        )
