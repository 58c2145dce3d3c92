"""
Codec — markup <-> Document transforms.
"""
from typing import Optional, Union

from ..config import CodecConfig
from ..models import Document
from .decoder import GexfDecoder
from .encoder import GexfEncoder
from .serializer import GexfSerializer


def decode(data: Union[bytes, str]) -> Document:
    """Decode GEXF markup into a Document."""
    return GexfDecoder().decode(data)


def encode(document: Document, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a Document as GEXF markup bytes."""
    return GexfEncoder(config).encode(document)


__all__ = [
    'GexfDecoder',
    'GexfEncoder',
    'GexfSerializer',
    'decode',
    'encode',
]
