"""
    Closed enumerations used by GEXF attributes.

    Each member's value is its wire token, so the enum itself is the only
    mapping between Python values and markup text.
"""
from enum import Enum


class EdgeType(Enum):
    """Edge direction type"""
    DIRECTED = "directed"
    UNDIRECTED = "undirected"
    MUTUAL = "mutual"


class IDType(Enum):
    """Type of node and edge identifiers"""
    STRING = "string"
    INTEGER = "integer"


class GraphMode(Enum):
    """Whether the graph carries time-varying data"""
    STATIC = "static"
    DYNAMIC = "dynamic"


class ClassType(Enum):
    """Element class an attribute block applies to"""
    NODE = "node"
    EDGE = "edge"
