"""
    Attribute models - typed attribute declarations and per-element values.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..types import ClassType


@dataclass
class AttributeDefinition:
    """
    One named, typed attribute slot.

    ``type`` is kept as free-form text ("string", "float", "boolean", ...);
    values assigned to the slot are never coerced to it.
    """
    id: str
    title: str
    type: str
    default: Optional[str] = None


@dataclass
class AttributeBlock:
    """
    Attribute declarations for either nodes or edges.

    A block with no definitions is still present in markup as an empty
    ``<attributes>`` element.
    """
    class_type: ClassType
    definitions: List[AttributeDefinition] = field(default_factory=list)


@dataclass
class AttributeValue:
    """Value assigned to attribute ``for_`` on a single node or edge."""
    for_: str
    value: str
