"""
Mermaid definition generators, one per diagram type, plus the dispatcher
that picks between them.
"""

from .flowchart import generate_flowchart
from .sequence import generate_sequence
from .class_diagram import generate_class_diagram
from .state import generate_state_diagram
from .er import generate_er_diagram
from .gantt import generate_gantt
from .pie import generate_pie
from .mindmap import generate_mindmap, emit_tree
from .dispatcher import generate_definition, resolve_diagram_type
