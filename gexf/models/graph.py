"""
    Graph model - the payload of a GEXF document.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..types import EdgeType, GraphMode, IDType
from .attributes import AttributeBlock
from .edge import Edge
from .node import Node


@dataclass
class Graph:
    """
    Graph settings plus its attribute declarations, nodes and edges.

    ``attributes``, ``nodes`` and ``edges`` each have three states:
        None              - element absent from markup
        empty list/block  - element present with no children
        populated         - element present with children, in order
    """
    mode: GraphMode = GraphMode.STATIC
    id_type: IDType = IDType.STRING
    default_edge_type: EdgeType = EdgeType.DIRECTED
    attributes: Optional[AttributeBlock] = None
    nodes: Optional[List[Node]] = None
    edges: Optional[List[Edge]] = None
