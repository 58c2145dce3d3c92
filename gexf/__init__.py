"""
GEXF 1.2 codec — document model and markup encode/decode.
"""
from .constants import VERSION, GEXF_NAMESPACE, VIZ_NAMESPACE
from .types import EdgeType, IDType, GraphMode, ClassType
from .adapters import ScalarAdapter
from .config import CodecConfig
from .exceptions import (
    GexfError,
    MalformedMarkupError,
    SchemaMismatchError,
    InvalidDateError,
    UnknownEnumValueError,
    ChannelOutOfRangeError,
)
from .models import (
    Document,
    Meta,
    Graph,
    AttributeBlock,
    AttributeDefinition,
    AttributeValue,
    Node,
    Parent,
    Size,
    Position,
    Color,
    Edge,
)
from .codec import GexfDecoder, GexfEncoder, GexfSerializer, decode, encode

__all__ = [
    'VERSION',
    'GEXF_NAMESPACE',
    'VIZ_NAMESPACE',
    'EdgeType',
    'IDType',
    'GraphMode',
    'ClassType',
    'ScalarAdapter',
    'CodecConfig',
    'GexfError',
    'MalformedMarkupError',
    'SchemaMismatchError',
    'InvalidDateError',
    'UnknownEnumValueError',
    'ChannelOutOfRangeError',
    'Document',
    'Meta',
    'Graph',
    'AttributeBlock',
    'AttributeDefinition',
    'AttributeValue',
    'Node',
    'Parent',
    'Size',
    'Position',
    'Color',
    'Edge',
    'GexfDecoder',
    'GexfEncoder',
    'GexfSerializer',
    'decode',
    'encode',
]
