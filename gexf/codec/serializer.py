"""
    Serialization facade for GEXF documents.

    Design Pattern: Strategy (output layout is configurable)
    ────────────────────────────────────────────────────────
    ``CodecConfig`` decides indentation, output encoding and whether an XML
    declaration is written.  Decoding is unaffected by any of it.
"""
from typing import Optional, Union

from ..config import CodecConfig
from ..models import Document
from .decoder import GexfDecoder
from .encoder import GexfEncoder


class GexfSerializer:
    """
    Encode / decode GEXF documents with configurable output layout.

    Usage:
        serializer = GexfSerializer(CodecConfig(indent="  "))
        raw = serializer.encode(document)       # → bytes
        text = serializer.dumps(document)       # → str
        document = serializer.decode(raw)       # → Document
        document = serializer.loads(text)       # → Document
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self._config = config or CodecConfig()
        self._decoder = GexfDecoder()
        self._encoder = GexfEncoder(self._config)

    @property
    def config(self) -> CodecConfig:
        return self._config

    @config.setter
    def config(self, value: CodecConfig) -> None:
        self._config = value
        self._encoder = GexfEncoder(value)

    # ── Encoding ─────────────────────────────────────────────────

    def encode(self, document: Document) -> bytes:
        """Serialize a Document to markup bytes in the configured encoding."""
        return self._encoder.encode(document)

    def dumps(self, document: Document) -> str:
        """Serialize a Document directly to a markup string."""
        return self.encode(document).decode(self._config.encoding)

    # ── Decoding ─────────────────────────────────────────────────

    def decode(self, data: Union[bytes, str]) -> Document:
        """Parse markup bytes (or text) into a Document."""
        return self._decoder.decode(data)

    def loads(self, text: str) -> Document:
        """Parse a markup string into a Document."""
        return self._decoder.decode(text)
