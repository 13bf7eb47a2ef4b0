from enum import Enum
from typing import Dict


class DiagramType(str, Enum):
    FLOWCHART = "flowchart"
    SEQUENCE = "sequenceDiagram"
    CLASS = "classDiagram"
    STATE = "stateDiagram-v2"
    ER = "erDiagram"
    GANTT = "gantt"
    PIE = "pie"
    MINDMAP = "mindmap"
    # Declared by the rendering engine, no structured generator
    TIMELINE = "timeline"
    GITGRAPH = "gitGraph"


# Logical name -> type tag, as exposed to callers
DIAGRAM_TYPES: Dict[str, str] = {member.name: member.value for member in DiagramType}


class Direction(str, Enum):
    TOP_DOWN = "TD"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


class NodeShape(str, Enum):
    RECT = "rect"
    ROUNDED = "rounded"
    STADIUM = "stadium"
    DIAMOND = "diamond"
    HEXAGON = "hexagon"
    CIRCLE = "circle"


class LinkStyle(str, Enum):
    ARROW = "arrow"
    DOTTED = "dotted"
    THICK = "thick"
    NONE = "none"


class ActorType(str, Enum):
    ACTOR = "actor"
    PARTICIPANT = "participant"


class MessageType(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"


class ClassRelationType(str, Enum):
    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    ASSOCIATION = "association"
    DEPENDENCY = "dependency"


class StateType(str, Enum):
    START = "start"
    END = "end"
    NORMAL = "normal"
