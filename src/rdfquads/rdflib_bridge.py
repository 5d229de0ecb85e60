"""Conversion between :mod:`rdfquads` models and rdflib nodes.

rdflib's :class:`~rdflib.Dataset` plays the graph store: decoded quads are
added to it with :func:`add_quad` / :func:`add_quads` and queried through
rdflib's own API.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rdflib import BNode, Dataset, URIRef
from rdflib import Literal as RDFLiteral
from rdflib.term import Node

from .models import IRI, BlankNode, Literal, Quad, Term

__all__ = [
    "add_quad",
    "add_quads",
    "from_rdflib",
    "to_rdflib",
]

logger = logging.getLogger(__name__)


def to_rdflib(term: Term) -> Node:
    """Convert a term to the matching rdflib node."""
    if isinstance(term, IRI):
        return URIRef(term.value)
    if isinstance(term, BlankNode):
        return BNode(term.label)
    if isinstance(term, Literal):
        datatype = URIRef(term.datatype.value) if term.datatype is not None else None
        return RDFLiteral(term.value, lang=term.language, datatype=datatype)
    raise TypeError(f"Unsupported term type: {type(term).__name__}")


def from_rdflib(node: Node) -> Term:
    """Convert an rdflib node back to a term."""
    if isinstance(node, URIRef):
        return IRI(value=str(node))
    if isinstance(node, BNode):
        return BlankNode(label=str(node))
    if isinstance(node, RDFLiteral):
        datatype = IRI(value=str(node.datatype)) if node.datatype is not None else None
        return Literal(value=str(node), language=node.language, datatype=datatype)
    raise TypeError(f"Unsupported rdflib node: {type(node).__name__}")


def add_quad(dataset: Dataset, quad: Quad) -> None:
    """Add one quad to ``dataset``; quads without a graph go to the default graph."""
    triple = (to_rdflib(quad.subject), to_rdflib(quad.predicate), to_rdflib(quad.object))
    if quad.graph is None:
        dataset.add(triple)
    else:
        dataset.graph(to_rdflib(quad.graph)).add(triple)


def add_quads(dataset: Dataset, quads: Iterable[Quad]) -> int:
    """Add every quad in ``quads`` to ``dataset``.

    Returns:
        Number of quads added
    """
    count = 0
    for quad in quads:
        add_quad(dataset, quad)
        count += 1
    logger.debug(f"Added {count} quads to dataset")
    return count
