"""
Document model — plain dataclasses, no validation.
"""
from .attributes import AttributeBlock, AttributeDefinition, AttributeValue
from .node import Node, Parent, Size, Position, Color
from .edge import Edge
from .graph import Graph
from .document import Document, Meta

__all__ = [
    'AttributeBlock',
    'AttributeDefinition',
    'AttributeValue',
    'Node',
    'Parent',
    'Size',
    'Position',
    'Color',
    'Edge',
    'Graph',
    'Document',
    'Meta',
]
