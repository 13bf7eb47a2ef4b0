from .enums import (
    DiagramType, DIAGRAM_TYPES, Direction, NodeShape, LinkStyle, ActorType,
    MessageType, ClassRelationType, StateType
)
from .diagram import (
    DiagramRequest, DiagramResult, DiagramMetadata, ValidationResult
)
from .render_config import RenderConfig, FlowchartOptions, SequenceOptions
