"""
Pydantic models for RDF terms and quads.

Provides immutable, hashable value types for the terms found in an N-Quads
document and for the quads built from them.
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .escape import escape_iri, escape_literal

__all__ = [
    "IRI",
    "BlankNode",
    "Literal",
    "Quad",
    "Term",
]


class IRI(BaseModel):
    """An IRI reference, stored without its angle brackets."""

    value: str = Field(..., description="IRI text with escapes decoded")

    model_config = ConfigDict(frozen=True)

    def to_nquads(self) -> str:
        """Get the N-Quads lexical form, e.g. ``<http://example.org/>``."""
        return f"<{escape_iri(self.value)}>"

    def __str__(self) -> str:
        return self.to_nquads()


class BlankNode(BaseModel):
    """A blank node, identified by a label local to its document."""

    label: str = Field(..., min_length=1, description="Label without the '_:' prefix")

    model_config = ConfigDict(frozen=True)

    def to_nquads(self) -> str:
        """Get the N-Quads lexical form, e.g. ``_:b0``."""
        return f"_:{self.label}"

    def __str__(self) -> str:
        return self.to_nquads()


class Literal(BaseModel):
    """A literal with an optional language tag or datatype (never both)."""

    value: str = Field(..., description="Lexical value with escapes decoded")
    language: Optional[str] = Field(None, min_length=1, description="Language tag")
    datatype: Optional[IRI] = Field(None, description="Datatype IRI")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_suffixes(self) -> "Literal":
        """Reject literals carrying both a language tag and a datatype."""
        if self.language is not None and self.datatype is not None:
            raise ValueError("a literal cannot have both a language tag and a datatype")
        return self

    def to_nquads(self) -> str:
        """Get the N-Quads lexical form, e.g. ``"chat"@fr``."""
        text = f'"{escape_literal(self.value)}"'
        if self.language is not None:
            return f"{text}@{self.language}"
        if self.datatype is not None:
            return f"{text}^^{self.datatype.to_nquads()}"
        return text

    def __str__(self) -> str:
        return self.to_nquads()


Term = Union[IRI, BlankNode, Literal]


class Quad(BaseModel):
    """A subject, predicate and object, plus the graph they belong to.

    A quad whose ``graph`` is ``None`` belongs to the default graph.
    """

    subject: Union[IRI, BlankNode]
    predicate: IRI
    object: Union[IRI, BlankNode, Literal]
    graph: Optional[Union[IRI, BlankNode]] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("subject", "graph", mode="before")
    @classmethod
    def reject_literal(cls, v):
        """Literals may only appear in the object position."""
        if isinstance(v, Literal):
            raise ValueError("a literal is not allowed in this position")
        return v

    @property
    def in_default_graph(self) -> bool:
        """Whether the quad belongs to the default graph."""
        return self.graph is None

    def as_tuple(self) -> Tuple[Term, ...]:
        """Get the terms as a 3-tuple (default graph) or a 4-tuple."""
        if self.graph is None:
            return (self.subject, self.predicate, self.object)
        return (self.subject, self.predicate, self.object, self.graph)

    def to_nquads(self) -> str:
        """Get the quad as one N-Quads line, without the line terminator."""
        return " ".join(term.to_nquads() for term in self.as_tuple()) + " ."

    def __str__(self) -> str:
        return self.to_nquads()
