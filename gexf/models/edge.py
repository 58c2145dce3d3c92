"""
    Edge model - representation of a connection between nodes.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..types import EdgeType
from .attributes import AttributeValue


@dataclass
class Edge:
    """
    Class for an edge between two nodes, referenced by id.

    An unset ``type`` means the graph's default edge type applies; the codec
    leaves that interpretation to the caller.
    """
    id: str
    source: str
    target: str
    label: Optional[str] = None
    type: Optional[EdgeType] = None
    weight: Optional[float] = None
    attvalues: Optional[List[AttributeValue]] = None
