"""Tests for the rdflib conversion helpers."""

import pytest
from rdflib import BNode, Dataset, URIRef
from rdflib import Literal as RDFLiteral
from rdflib.namespace import XSD

from rdfquads.models import IRI, BlankNode, Literal, Quad
from rdfquads.parser import parse_quad
from rdfquads.rdflib_bridge import add_quad, add_quads, from_rdflib, to_rdflib


class TestConversion:
    """Test to_rdflib() and from_rdflib()."""

    def test_iri(self):
        assert to_rdflib(IRI(value="http://example.org/a")) == URIRef("http://example.org/a")

    def test_blank_node(self):
        assert to_rdflib(BlankNode(label="b1")) == BNode("b1")

    def test_literals(self):
        assert to_rdflib(Literal(value="x")) == RDFLiteral("x")
        assert to_rdflib(Literal(value="chat", language="fr")) == RDFLiteral("chat", lang="fr")
        typed = Literal(value="42", datatype=IRI(value=str(XSD.integer)))
        assert to_rdflib(typed) == RDFLiteral("42", datatype=XSD.integer)

    @pytest.mark.parametrize(
        "term",
        [
            IRI(value="http://example.org/a"),
            BlankNode(label="b1"),
            Literal(value="plain"),
            Literal(value="chat", language="fr"),
            Literal(value="42", datatype=IRI(value="http://www.w3.org/2001/XMLSchema#integer")),
        ],
    )
    def test_round_trip(self, term):
        if from_rdflib(to_rdflib(term)) != term:
            pytest.fail(f"Round trip changed {term!r}")

    def test_unsupported(self):
        with pytest.raises(TypeError):
            to_rdflib("http://example.org/a")
        with pytest.raises(TypeError):
            from_rdflib("http://example.org/a")


class TestDataset:
    """Test loading quads into an rdflib Dataset."""

    def test_add_quads(self):
        named = parse_quad('<http://a> <http://b> "c" <http://g> .')
        default = parse_quad('<http://a> <http://b> "d" .')
        dataset = Dataset()

        count = add_quads(dataset, [named, default])

        assert count == 2
        s, p = URIRef("http://a"), URIRef("http://b")
        assert (s, p, RDFLiteral("c")) in dataset.graph(URIRef("http://g"))
        assert (s, p, RDFLiteral("d")) in dataset
        assert (s, p, RDFLiteral("c")) not in dataset

    def test_blank_node_graph(self):
        quad = Quad(
            subject=IRI(value="http://a"),
            predicate=IRI(value="http://b"),
            object=IRI(value="http://c"),
            graph=BlankNode(label="g"),
        )
        dataset = Dataset()
        add_quad(dataset, quad)
        graph = dataset.graph(BNode("g"))
        assert (URIRef("http://a"), URIRef("http://b"), URIRef("http://c")) in graph
