"""rdfquads: a streaming decoder for RDF 1.1 N-Quads.

Main modules:
- escape: backslash escape decoding and encoding
- models: Pydantic models for terms (IRI, BlankNode, Literal) and quads
- parser: parse_quad / parse_term for single lines and terms
- decoder: Decoder for pulling quads from text or binary streams
- rdflib_bridge: conversion to rdflib nodes and loading into a Dataset
- api: convenience functions for strings, files and DataFrames
"""

from . import api
from .decoder import Decoder, DecoderState
from .errors import DecoderClosedError, InvalidEscapeError, NQuadsError, NQuadsSyntaxError
from .escape import resolve
from .models import IRI, BlankNode, Literal, Quad, Term
from .parser import parse_quad, parse_term

# Import version information
from .version import VERSION

__all__ = [
    "IRI",
    "VERSION",
    "BlankNode",
    "Decoder",
    "DecoderClosedError",
    "DecoderState",
    "InvalidEscapeError",
    "Literal",
    "NQuadsError",
    "NQuadsSyntaxError",
    "Quad",
    "Term",
    "api",
    "parse_quad",
    "parse_term",
    "resolve",
]
