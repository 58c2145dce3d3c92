"""
    Codec configuration — output presentation settings.

    Nothing here changes what a document means: decoding ignores
    indentation and the XML declaration entirely.
"""
from dataclasses import dataclass


@dataclass
class CodecConfig:
    """
    Controls how encoded markup is laid out.

    Attributes:
        indent:          String written once per nesting level in front of
                         each element.  ``""`` produces compact output on a
                         single line.
        encoding:        Byte encoding of the encoded output.
        xml_declaration: Whether to prepend an ``<?xml ...?>`` declaration.
    """
    indent: str = "\t"
    encoding: str = "utf-8"
    xml_declaration: bool = False

    @property
    def pretty(self) -> bool:
        """True when elements are laid out one per line."""
        return bool(self.indent)
