"""Main rdfquads functionalities for reading, converting and loading N-Quads."""

import io
from collections import Counter
from pathlib import Path
from typing import IO, Any, Dict, Iterable, Iterator, List, Optional, Union

import pandas as pd
from rdflib import Dataset

from .decoder import Decoder
from .models import IRI, BlankNode, Quad, Term
from .rdflib_bridge import add_quads

__all__ = [
    "count_by_graph",
    "iter_file",
    "load_file",
    "load_into_dataset",
    "parse_string",
    "quad_to_dict",
    "serialize",
    "to_dataframe",
    "write_quads",
]

DEFAULT_GRAPH_KEY = "@default"

DATAFRAME_COLUMNS = ["subject", "predicate", "object", "graph"]


def parse_string(text: str, strict: bool = True) -> List[Quad]:
    """Parse an N-Quads document held in a string.

    Args:
        text: N-Quads document
        strict: Raise on the first malformed line instead of skipping it

    Returns:
        Quads in document order
    """
    with Decoder(io.StringIO(text, newline=None), strict=strict) as decoder:
        return list(decoder)


def iter_file(
    path: Union[str, Path],
    strict: bool = True,
    chunk_size: Optional[int] = None,
) -> Iterator[Quad]:
    """Yield the quads of an N-Quads file (optionally gzipped).

    The file is closed when the generator is exhausted, raises or is
    closed early.

    Args:
        path: Path to a ``.nq`` or ``.nq.gz`` file
        strict: Raise on the first malformed line instead of skipping it
        chunk_size: Characters requested per read
    """
    with Decoder.open(path, chunk_size=chunk_size, strict=strict) as decoder:
        yield from decoder


def load_file(path: Union[str, Path], strict: bool = True) -> List[Quad]:
    """Read all quads of an N-Quads file into a list."""
    return list(iter_file(path, strict=strict))


def serialize(quads: Iterable[Quad]) -> str:
    """Serialize quads to an N-Quads document."""
    return "".join(f"{quad.to_nquads()}\n" for quad in quads)


def write_quads(quads: Iterable[Quad], stream: IO[str]) -> int:
    """Write quads to a text stream, one line each.

    Returns:
        Number of quads written
    """
    count = 0
    for quad in quads:
        stream.write(quad.to_nquads())
        stream.write("\n")
        count += 1
    return count


def to_dataframe(quads: Iterable[Quad]) -> pd.DataFrame:
    """Tabulate quads with their terms in N-Quads syntax.

    The ``graph`` column is None for quads in the default graph.
    """
    rows = [
        {
            "subject": quad.subject.to_nquads(),
            "predicate": quad.predicate.to_nquads(),
            "object": quad.object.to_nquads(),
            "graph": quad.graph.to_nquads() if quad.graph is not None else None,
        }
        for quad in quads
    ]
    return pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)


def count_by_graph(quads: Iterable[Quad]) -> Dict[str, int]:
    """Count quads per graph label; the default graph is keyed ``@default``."""
    counts: Counter = Counter()
    for quad in quads:
        key = quad.graph.to_nquads() if quad.graph is not None else DEFAULT_GRAPH_KEY
        counts[key] += 1
    return dict(counts)


def load_into_dataset(
    path: Union[str, Path],
    dataset: Optional[Dataset] = None,
    strict: bool = True,
) -> Dataset:
    """Decode an N-Quads file into an rdflib Dataset.

    Args:
        path: Path to a ``.nq`` or ``.nq.gz`` file
        dataset: Dataset to add to; a new in-memory one is created if None
        strict: Raise on the first malformed line instead of skipping it

    Returns:
        The dataset holding the decoded quads
    """
    if dataset is None:
        dataset = Dataset()
    add_quads(dataset, iter_file(path, strict=strict))
    return dataset


def _term_to_dict(term: Term) -> Dict[str, Any]:
    if isinstance(term, IRI):
        return {"type": "iri", "value": term.value}
    if isinstance(term, BlankNode):
        return {"type": "blank node", "value": term.label}
    data: Dict[str, Any] = {"type": "literal", "value": term.value}
    if term.language is not None:
        data["language"] = term.language
    if term.datatype is not None:
        data["datatype"] = term.datatype.value
    return data


def quad_to_dict(quad: Quad) -> Dict[str, Any]:
    """Convert a quad to a JSON-serializable dict.

    Each term becomes ``{"type": ..., "value": ...}`` where ``type`` is
    ``iri``, ``blank node`` or ``literal``; literals may add ``language`` or
    ``datatype``. ``graph`` is None for the default graph.
    """
    return {
        "subject": _term_to_dict(quad.subject),
        "predicate": _term_to_dict(quad.predicate),
        "object": _term_to_dict(quad.object),
        "graph": _term_to_dict(quad.graph) if quad.graph is not None else None,
    }
