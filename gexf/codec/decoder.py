"""
    Markup -> Document decoding.

    Parses GEXF bytes with lxml and maps the element tree onto the
    document model.  Wrapping elements that are missing decode to ``None``;
    wrapping elements present without children decode to empty lists, so
    a later encode reproduces the same shape.
"""
import logging
from typing import Callable, Iterator, List, Optional, TypeVar, Union

from lxml import etree

from ..adapters import ScalarAdapter
from ..constants import GEXF_NAMESPACE, ROOT_TAG, VERSION, VIZ_NAMESPACE
from ..exceptions import GexfError, MalformedMarkupError, SchemaMismatchError
from ..models import (
    AttributeBlock,
    AttributeDefinition,
    AttributeValue,
    Color,
    Document,
    Edge,
    Graph,
    Meta,
    Node,
    Parent,
    Position,
    Size,
)
from ..types import ClassType, EdgeType, GraphMode, IDType

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Primary elements may carry the GEXF namespace or none at all
_PRIMARY_NAMESPACES = (GEXF_NAMESPACE, None)

_VIZ_CHILDREN = {'size', 'position', 'color'}


class GexfDecoder:
    """
    Decodes GEXF 1.2 markup into a ``Document``.

    Usage:
        decoder = GexfDecoder()
        document = decoder.decode(raw_bytes)
    """

    def __init__(self):
        self._parser = self._make_parser()
        # Text input is re-encoded as UTF-8, whatever its declaration says
        self._text_parser = self._make_parser(encoding='utf-8')

    @staticmethod
    def _make_parser(**options) -> etree.XMLParser:
        return etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
            **options,
        )

    def decode(self, data: Union[bytes, str]) -> Document:
        """
        Parse one GEXF document.

        Raises:
            MalformedMarkupError: ``data`` is not well-formed XML.
            SchemaMismatchError:  a required element or attribute is missing
                                  or malformed.
            InvalidDateError, UnknownEnumValueError, ChannelOutOfRangeError:
                                  a value could not be converted.
        """
        parser = self._parser
        if isinstance(data, str):
            data = data.encode('utf-8')
            parser = self._text_parser
        if not data.strip():
            raise MalformedMarkupError("Input is empty")

        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise MalformedMarkupError(f"Input is not well-formed XML: {e}") from e

        self._check_root(root)

        document = Document()
        document.meta = self._decode_meta(self._require_child(root, 'meta'))
        document.graph = self._decode_graph(self._require_child(root, 'graph'))

        logger.debug(
            "Decoded GEXF document: %d nodes, %d edges",
            len(document.graph.nodes or []), len(document.graph.edges or []),
        )
        return document

    # ── Root / meta ──────────────────────────────────────────────

    def _check_root(self, root: etree._Element) -> None:
        qname = etree.QName(root)
        if qname.localname != ROOT_TAG or qname.namespace != GEXF_NAMESPACE:
            raise SchemaMismatchError(
                f"Root element must be {{{GEXF_NAMESPACE}}}{ROOT_TAG}, found {root.tag}"
            )
        version = self._require_attr(root, 'version')
        if version != VERSION:
            raise SchemaMismatchError(
                f"Unsupported GEXF version {version!r} (only {VERSION} is supported)"
            )

    def _decode_meta(self, elem: etree._Element) -> Meta:
        last_modified = self._convert(
            elem, ScalarAdapter.decode_date, self._require_attr(elem, 'lastmodifieddate')
        )
        return Meta(
            last_modified=last_modified,
            creator=self._child_text(elem, 'creator'),
            keywords=self._child_text(elem, 'keywords'),
            description=self._child_text(elem, 'description'),
        )

    # ── Graph ────────────────────────────────────────────────────

    def _decode_graph(self, elem: etree._Element) -> Graph:
        graph = Graph()

        mode = elem.get('mode')
        if mode is not None:
            graph.mode = self._convert(elem, lambda t: ScalarAdapter.decode_enum(GraphMode, t), mode)
        id_type = elem.get('idtype')
        if id_type is not None:
            graph.id_type = self._convert(elem, lambda t: ScalarAdapter.decode_enum(IDType, t), id_type)
        default_edge_type = elem.get('defaultedgetype')
        if default_edge_type is not None:
            graph.default_edge_type = self._convert(
                elem, lambda t: ScalarAdapter.decode_enum(EdgeType, t), default_edge_type
            )

        for child in self._element_children(elem):
            name = self._primary_name(child)
            if name == 'attributes':
                if graph.attributes is not None:
                    logger.warning("Skipping extra <attributes> block at %s", self._path(child))
                    continue
                graph.attributes = self._decode_attribute_block(child)
            elif name == 'nodes':
                if graph.nodes is None:
                    graph.nodes = []
                graph.nodes.extend(
                    self._decode_node(n) for n in self._children(child, 'node')
                )
            elif name == 'edges':
                if graph.edges is None:
                    graph.edges = []
                graph.edges.extend(
                    self._decode_edge(e) for e in self._children(child, 'edge')
                )
            else:
                logger.warning("Skipping unsupported element %s", self._path(child))

        return graph

    def _decode_attribute_block(self, elem: etree._Element) -> AttributeBlock:
        class_type = self._convert(
            elem,
            lambda t: ScalarAdapter.decode_enum(ClassType, t),
            self._require_attr(elem, 'class'),
        )
        definitions = [
            AttributeDefinition(
                id=self._require_attr(attr, 'id'),
                title=self._require_attr(attr, 'title'),
                type=self._require_attr(attr, 'type'),
                default=self._child_text(attr, 'default'),
            )
            for attr in self._children(elem, 'attribute')
        ]
        return AttributeBlock(class_type=class_type, definitions=definitions)

    # ── Nodes / edges ────────────────────────────────────────────

    def _decode_node(self, elem: etree._Element) -> Node:
        node = Node(id=self._require_attr(elem, 'id'), label=elem.get('label'))

        for child in self._element_children(elem):
            qname = etree.QName(child)
            if qname.namespace == VIZ_NAMESPACE and qname.localname in _VIZ_CHILDREN:
                self._decode_viz(node, child, qname.localname)
            elif self._primary_name(child) == 'attvalues':
                node.attvalues = self._decode_attvalues(child)
            elif self._primary_name(child) == 'parents':
                node.parents = [
                    Parent(for_=self._require_attr(p, 'for'))
                    for p in self._children(child, 'parent')
                ]
            else:
                logger.warning("Skipping unsupported element %s", self._path(child))

        return node

    def _decode_viz(self, node: Node, elem: etree._Element, name: str) -> None:
        if name == 'size':
            node.size = Size(value=self._float_attr(elem, 'value'))
        elif name == 'position':
            z = elem.get('z')
            node.position = Position(
                x=self._float_attr(elem, 'x'),
                y=self._float_attr(elem, 'y'),
                z=0.0 if z is None else self._convert(elem, ScalarAdapter.decode_float, z),
            )
        else:
            node.color = Color(
                r=self._channel_attr(elem, 'r'),
                g=self._channel_attr(elem, 'g'),
                b=self._channel_attr(elem, 'b'),
            )

    def _decode_edge(self, elem: etree._Element) -> Edge:
        edge_type = elem.get('type')
        weight = elem.get('weight')
        edge = Edge(
            id=self._require_attr(elem, 'id'),
            source=self._require_attr(elem, 'source'),
            target=self._require_attr(elem, 'target'),
            label=elem.get('label'),
            type=None if edge_type is None else self._convert(
                elem, lambda t: ScalarAdapter.decode_enum(EdgeType, t), edge_type
            ),
            weight=None if weight is None else self._convert(
                elem, ScalarAdapter.decode_float, weight
            ),
        )

        for child in self._element_children(elem):
            if self._primary_name(child) == 'attvalues':
                edge.attvalues = self._decode_attvalues(child)
            else:
                logger.warning("Skipping unsupported element %s", self._path(child))

        return edge

    def _decode_attvalues(self, elem: etree._Element) -> List[AttributeValue]:
        # Kept as an ordered list; repeated ``for`` values are not merged
        return [
            AttributeValue(
                for_=self._require_attr(v, 'for'),
                value=self._require_attr(v, 'value'),
            )
            for v in self._children(elem, 'attvalue')
        ]

    # ── Helpers ──────────────────────────────────────────────────

    @staticmethod
    def _path(elem: etree._Element) -> str:
        """
        Readable location of an element, i.e. /gexf/graph/nodes/node[2].
        """
        parts = []
        while elem is not None:
            name = etree.QName(elem).localname
            parent = elem.getparent()
            if parent is not None:
                siblings = [c for c in parent if c.tag == elem.tag]
                if len(siblings) > 1:
                    name = f"{name}[{siblings.index(elem) + 1}]"
            parts.append(name)
            elem = parent
        return "/" + "/".join(reversed(parts))

    @staticmethod
    def _element_children(elem: etree._Element) -> Iterator[etree._Element]:
        for child in elem:
            if isinstance(child.tag, str):
                yield child

    @staticmethod
    def _primary_name(elem: etree._Element) -> Optional[str]:
        """Local name of a non-viz GEXF element, or None for foreign elements."""
        qname = etree.QName(elem)
        if qname.namespace in _PRIMARY_NAMESPACES:
            return qname.localname
        return None

    def _children(self, elem: etree._Element, name: str) -> Iterator[etree._Element]:
        for child in self._element_children(elem):
            if self._primary_name(child) == name:
                yield child

    def _require_child(self, elem: etree._Element, name: str) -> etree._Element:
        child = next(self._children(elem, name), None)
        if child is None:
            raise SchemaMismatchError(f"Missing required <{name}> element in {self._path(elem)}")
        return child

    def _child_text(self, elem: etree._Element, name: str) -> Optional[str]:
        child = next(self._children(elem, name), None)
        if child is None:
            return None
        return child.text or ""

    def _require_attr(self, elem: etree._Element, name: str) -> str:
        value = elem.get(name)
        if value is None:
            raise SchemaMismatchError(
                f"Missing required attribute '{name}' on {self._path(elem)}"
            )
        return value

    def _float_attr(self, elem: etree._Element, name: str) -> float:
        return self._convert(elem, ScalarAdapter.decode_float, self._require_attr(elem, name))

    def _channel_attr(self, elem: etree._Element, name: str) -> int:
        return self._convert(elem, ScalarAdapter.decode_channel, self._require_attr(elem, name))

    def _convert(self, elem: etree._Element, func: Callable[[str], T], text: str) -> T:
        """Run an adapter, prefixing any failure with the element path."""
        try:
            return func(text)
        except GexfError as e:
            raise type(e)(f"{self._path(elem)}: {e}") from e
