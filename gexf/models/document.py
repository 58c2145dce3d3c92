"""
    Document model - root container of a GEXF file.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ..constants import GEXF_NAMESPACE, ROOT_TAG, VERSION
from .graph import Graph


def _today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class Meta:
    """Descriptive header; ``last_modified`` is the only required field."""
    last_modified: date = field(default_factory=_today)
    creator: Optional[str] = None
    keywords: Optional[str] = None
    description: Optional[str] = None


@dataclass
class Document:
    """
    A GEXF 1.2 document.

    The root namespace, tag and version are fixed and cannot be set;
    callers fill in ``meta`` and ``graph``.
    """
    meta: Meta = field(default_factory=Meta)
    graph: Graph = field(default_factory=Graph)
    version: str = field(default=VERSION, init=False)

    @property
    def namespace(self) -> str:
        return GEXF_NAMESPACE

    @property
    def tag(self) -> str:
        return ROOT_TAG
