"""
    Document -> markup encoding.

    Builds an lxml element tree from a ``Document`` and serializes it in a
    canonical layout: one element per line, ``CodecConfig.indent`` per level,
    empty elements written as start/end tag pairs.
"""
import logging
from typing import List, Optional

from lxml import etree

from ..adapters import ScalarAdapter
from ..config import CodecConfig
from ..constants import GEXF_NAMESPACE, ROOT_TAG, VIZ_NAMESPACE
from ..exceptions import SchemaMismatchError
from ..models import AttributeBlock, AttributeValue, Document, Edge, Graph, Meta, Node
from ..types import ClassType, EdgeType, GraphMode, IDType

logger = logging.getLogger(__name__)


def _tag(name: str) -> str:
    return f"{{{GEXF_NAMESPACE}}}{name}"


def _viz_tag(name: str) -> str:
    return f"{{{VIZ_NAMESPACE}}}{name}"


def _set(elem: etree._Element, name: str, value: str) -> None:
    """Set an attribute, reporting text lxml cannot store as a schema mismatch."""
    try:
        elem.set(name, value)
    except (TypeError, ValueError) as e:
        raise SchemaMismatchError(
            f"<{etree.QName(elem).localname}> attribute '{name}' cannot hold {value!r}: {e}"
        ) from e


def _set_text(elem: etree._Element, text: str) -> None:
    try:
        elem.text = text
    except (TypeError, ValueError) as e:
        raise SchemaMismatchError(
            f"<{etree.QName(elem).localname}> text cannot hold {text!r}: {e}"
        ) from e


class GexfEncoder:
    """
    Encodes a ``Document`` into GEXF 1.2 markup bytes.

    Usage:
        encoder = GexfEncoder(CodecConfig(indent="  "))
        raw = encoder.encode(document)
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def encode(self, document: Document) -> bytes:
        """
        Serialize ``document``.

        Raises:
            InvalidDateError, UnknownEnumValueError, ChannelOutOfRangeError,
            SchemaMismatchError: a field holds a value outside its domain.
        """
        root = self.build_tree(document)
        self._layout(root, 0)

        data = etree.tostring(
            root,
            encoding=self._config.encoding,
            xml_declaration=self._config.xml_declaration,
        )

        logger.debug(
            "Encoded GEXF document: %d nodes, %d edges, %d bytes",
            len(document.graph.nodes or []), len(document.graph.edges or []), len(data),
        )
        return data

    def build_tree(self, document: Document) -> etree._Element:
        """Build the element tree for ``document`` without any layout whitespace."""
        root = etree.Element(_tag(ROOT_TAG), nsmap={None: GEXF_NAMESPACE})
        _set(root, 'version', document.version)

        self._encode_meta(root, document.meta)
        self._encode_graph(root, document.graph)
        return root

    # ── Meta / graph ─────────────────────────────────────────────

    def _encode_meta(self, parent: etree._Element, meta: Meta) -> None:
        elem = etree.SubElement(parent, _tag('meta'))
        _set(elem, 'lastmodifieddate', ScalarAdapter.encode_date(meta.last_modified))

        for name, text in (('creator', meta.creator),
                           ('keywords', meta.keywords),
                           ('description', meta.description)):
            if text is not None:
                _set_text(etree.SubElement(elem, _tag(name)), text)

    def _encode_graph(self, parent: etree._Element, graph: Graph) -> None:
        elem = etree.SubElement(parent, _tag('graph'))

        # Defaults are left implicit
        mode = ScalarAdapter.encode_enum(GraphMode, graph.mode)
        if graph.mode != GraphMode.STATIC:
            _set(elem, 'mode', mode)
        id_type = ScalarAdapter.encode_enum(IDType, graph.id_type)
        if graph.id_type != IDType.STRING:
            _set(elem, 'idtype', id_type)
        default_edge_type = ScalarAdapter.encode_enum(EdgeType, graph.default_edge_type)
        if graph.default_edge_type != EdgeType.DIRECTED:
            _set(elem, 'defaultedgetype', default_edge_type)

        if graph.attributes is not None:
            self._encode_attribute_block(elem, graph.attributes)

        if graph.nodes is not None:
            nodes_elem = etree.SubElement(elem, _tag('nodes'))
            for node in graph.nodes:
                self._encode_node(nodes_elem, node)

        if graph.edges is not None:
            edges_elem = etree.SubElement(elem, _tag('edges'))
            for edge in graph.edges:
                self._encode_edge(edges_elem, edge)

    def _encode_attribute_block(self, parent: etree._Element, block: AttributeBlock) -> None:
        elem = etree.SubElement(parent, _tag('attributes'))
        _set(elem, 'class', ScalarAdapter.encode_enum(ClassType, block.class_type))

        for definition in block.definitions:
            attr = etree.SubElement(elem, _tag('attribute'))
            _set(attr, 'id', definition.id)
            _set(attr, 'title', definition.title)
            _set(attr, 'type', definition.type)
            if definition.default is not None:
                _set_text(etree.SubElement(attr, _tag('default')), definition.default)

    # ── Nodes / edges ────────────────────────────────────────────

    def _encode_node(self, parent: etree._Element, node: Node) -> None:
        elem = etree.SubElement(parent, _tag('node'))
        _set(elem, 'id', node.id)
        if node.label is not None:
            _set(elem, 'label', node.label)

        if node.attvalues is not None:
            self._encode_attvalues(elem, node.attvalues)

        if node.parents is not None:
            parents_elem = etree.SubElement(elem, _tag('parents'))
            for ancestor in node.parents:
                _set(etree.SubElement(parents_elem, _tag('parent')), 'for', ancestor.for_)

        # Each viz element declares its own namespace
        if node.size is not None:
            size = etree.SubElement(elem, _viz_tag('size'), nsmap={None: VIZ_NAMESPACE})
            _set(size, 'value', ScalarAdapter.encode_float(node.size.value))

        if node.position is not None:
            pos = etree.SubElement(elem, _viz_tag('position'), nsmap={None: VIZ_NAMESPACE})
            _set(pos, 'x', ScalarAdapter.encode_float(node.position.x))
            _set(pos, 'y', ScalarAdapter.encode_float(node.position.y))
            _set(pos, 'z', ScalarAdapter.encode_float(node.position.z))

        if node.color is not None:
            color = etree.SubElement(elem, _viz_tag('color'), nsmap={None: VIZ_NAMESPACE})
            _set(color, 'r', ScalarAdapter.encode_channel(node.color.r))
            _set(color, 'g', ScalarAdapter.encode_channel(node.color.g))
            _set(color, 'b', ScalarAdapter.encode_channel(node.color.b))

    def _encode_edge(self, parent: etree._Element, edge: Edge) -> None:
        elem = etree.SubElement(parent, _tag('edge'))
        _set(elem, 'id', edge.id)
        if edge.label is not None:
            _set(elem, 'label', edge.label)
        if edge.type is not None:
            _set(elem, 'type', ScalarAdapter.encode_enum(EdgeType, edge.type))
        _set(elem, 'source', edge.source)
        _set(elem, 'target', edge.target)
        if edge.weight is not None:
            _set(elem, 'weight', ScalarAdapter.encode_float(edge.weight))

        if edge.attvalues is not None:
            self._encode_attvalues(elem, edge.attvalues)

    @staticmethod
    def _encode_attvalues(parent: etree._Element, values: List[AttributeValue]) -> None:
        elem = etree.SubElement(parent, _tag('attvalues'))
        for value in values:
            attvalue = etree.SubElement(elem, _tag('attvalue'))
            _set(attvalue, 'for', value.for_)
            _set(attvalue, 'value', value.value)

    # ── Layout ───────────────────────────────────────────────────

    def _layout(self, elem: etree._Element, level: int) -> None:
        """
        Insert indentation whitespace and force start/end tag pairs on leaves.
        """
        if len(elem):
            if self._config.pretty:
                child_pad = "\n" + self._config.indent * (level + 1)
                elem.text = child_pad
                for child in elem:
                    self._layout(child, level + 1)
                    child.tail = child_pad
                elem[-1].tail = "\n" + self._config.indent * level
            else:
                for child in elem:
                    self._layout(child, level + 1)
        elif elem.text is None:
            # An empty text node keeps lxml from writing <x/>
            elem.text = ""
