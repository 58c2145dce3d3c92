# tests/conftest.py
"""
Shared test fixtures.
Expected documents for the .gexf files under tests/codec_test/fixtures,
built by hand so decode results can be compared field by field.
"""
import pytest
from datetime import date
from pathlib import Path

from gexf import (
    AttributeBlock,
    AttributeDefinition,
    AttributeValue,
    ClassType,
    CodecConfig,
    Color,
    Document,
    Edge,
    EdgeType,
    GexfSerializer,
    Graph,
    GraphMode,
    IDType,
    Meta,
    Node,
    Parent,
    Position,
    Size,
)

FIXTURES_DIR = Path(__file__).parent / "codec_test" / "fixtures"

LAST_MODIFIED = date(2009, 3, 20)


def read_fixture(name: str) -> bytes:
    """Raw fixture bytes without any trailing newline an editor may add."""
    return (FIXTURES_DIR / name).read_bytes().rstrip(b"\n")


# ── Expected documents ───────────────────────────────────────────

def _hello_world() -> Document:
    doc = Document()
    doc.meta = Meta(
        last_modified=LAST_MODIFIED,
        creator="Gephi.org",
        description="A hello world! file",
    )
    doc.graph = Graph(
        nodes=[
            Node(id="0", label="Hello", attvalues=[], parents=[]),
            Node(id="1", label="World", attvalues=[], parents=[]),
        ],
        edges=[
            Edge(id="0", source="0", target="1", label="Foo", attvalues=[]),
        ],
    )
    return doc


def _attributes() -> Document:
    doc = Document()
    doc.meta = Meta(last_modified=LAST_MODIFIED)
    doc.graph = Graph(
        attributes=AttributeBlock(
            class_type=ClassType.NODE,
            definitions=[
                AttributeDefinition(id="0", title="url", type="string"),
                AttributeDefinition(id="1", title="indegree", type="float"),
                AttributeDefinition(id="2", title="frog", type="boolean", default="true"),
            ],
        ),
        nodes=[
            Node(
                id="0",
                attvalues=[
                    AttributeValue(for_="0", value="http://gephi.org"),
                    AttributeValue(for_="2", value="false"),
                ],
                parents=[],
            ),
            Node(
                id="1",
                attvalues=[
                    AttributeValue(for_="1", value="2"),
                    AttributeValue(for_="2", value="true"),
                ],
                parents=[],
            ),
        ],
        edges=[],
    )
    return doc


def _parents() -> Document:
    doc = Document()
    doc.meta = Meta(last_modified=LAST_MODIFIED)
    doc.graph = Graph(
        nodes=[
            Node(id="0", attvalues=[], parents=[]),
            Node(id="1", attvalues=[], parents=[Parent(for_="0")]),
        ],
        edges=[],
    )
    return doc


def _viz() -> Document:
    doc = Document()
    doc.meta = Meta(last_modified=LAST_MODIFIED)
    doc.graph = Graph(
        nodes=[
            Node(
                id="0",
                attvalues=[],
                parents=[],
                size=Size(value=20.5),
                position=Position(x=1.5, y=-3.4),
                color=Color(r=50, g=100, b=200),
            ),
        ],
        edges=[],
    )
    return doc


def _transit() -> Document:
    doc = Document()
    doc.meta = Meta(
        last_modified=date(2024, 11, 2),
        creator="Transit Lab",
        keywords="transit, stations",
        description="Stations and the lines between them",
    )
    doc.graph = Graph(
        mode=GraphMode.DYNAMIC,
        id_type=IDType.INTEGER,
        default_edge_type=EdgeType.UNDIRECTED,
        attributes=AttributeBlock(
            class_type=ClassType.EDGE,
            definitions=[
                AttributeDefinition(id="line", title="Line", type="string"),
                AttributeDefinition(id="minutes", title="Travel time", type="float", default="1"),
            ],
        ),
        nodes=[
            Node(id="10", label="Central", size=Size(value=4.0)),
            Node(id="11", label="Harbour", position=Position(x=12.25, y=0.5, z=-1.0)),
            Node(id="12"),
        ],
        edges=[
            Edge(
                id="100", source="10", target="11", label="Red",
                type=EdgeType.DIRECTED, weight=2.5,
                attvalues=[
                    AttributeValue(for_="line", value="red"),
                    AttributeValue(for_="minutes", value="4"),
                    AttributeValue(for_="line", value="red-express"),
                ],
            ),
            Edge(id="101", source="11", target="12", type=EdgeType.MUTUAL, weight=0.0),
            Edge(id="102", source="12", target="10"),
        ],
    )
    return doc


EXPECTED_DOCUMENTS = {
    "hello_world.gexf": _hello_world,
    "attributes.gexf": _attributes,
    "parents.gexf": _parents,
    "viz.gexf": _viz,
    "transit.gexf": _transit,
}


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def serializer() -> GexfSerializer:
    """Serializer with the default tab-indented layout."""
    return GexfSerializer(CodecConfig())


@pytest.fixture
def hello_world_markup() -> bytes:
    return read_fixture("hello_world.gexf")


@pytest.fixture
def hello_world_document() -> Document:
    """Freshly built each time — safe to mutate."""
    return _hello_world()


@pytest.fixture
def minimal_document() -> Document:
    """Document with only the required meta date and an all-default graph."""
    return Document(meta=Meta(last_modified=LAST_MODIFIED))
