"""
    Node model - representation of a graph vertex and its viz styling.
"""
from dataclasses import dataclass
from typing import List, Optional

from .attributes import AttributeValue


@dataclass
class Parent:
    """Back-reference from a node to an ancestor node id."""
    for_: str


@dataclass
class Size:
    value: float


@dataclass
class Position:
    x: float
    y: float
    z: float = 0.0


@dataclass
class Color:
    """RGB color, each channel in [0, 255]."""
    r: int
    g: int
    b: int


@dataclass
class Node:
    """
    Class for a node in the graph.

    ``attvalues`` and ``parents`` are tri-state: ``None`` leaves the wrapping
    element out of markup, an empty list writes it with no children.
    ``size``, ``position`` and ``color`` live in the viz namespace and are
    each written only when set.
    """
    id: str
    label: Optional[str] = None
    attvalues: Optional[List[AttributeValue]] = None
    parents: Optional[List[Parent]] = None
    size: Optional[Size] = None
    position: Optional[Position] = None
    color: Optional[Color] = None
