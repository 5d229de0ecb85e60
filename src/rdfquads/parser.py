"""
N-Quads line parser.

Turns one line of an RDF 1.1 N-Quads document into a :class:`~rdfquads.models.Quad`.
The grammar handled here is, left to right::

    subject predicate object [graph] '.' [# comment]

where the subject and graph label are IRIs or blank nodes, the predicate is
an IRI and the object is an IRI, a blank node or a literal.
"""

from typing import Optional

from .errors import InvalidEscapeError
from .escape import resolve
from .models import IRI, BlankNode, Literal, Quad, Term
from .scanner import Scanner, Token, TokenKind

__all__ = [
    "parse_quad",
    "parse_term",
]


def _decode(scanner: Scanner, token: Token) -> str:
    """Resolve the escapes of an IRI or string token."""
    try:
        return resolve(token.text, token.escaped)
    except InvalidEscapeError as e:
        column = token.start + 1 + (e.column or 0)
        raise InvalidEscapeError(e.reason, line=scanner.text, column=column) from None


def _describe(token: Optional[Token]) -> str:
    if token is None:
        return "end of line"
    if token.kind is TokenKind.COMMENT:
        return "a comment"
    return f"{token.kind.value} token"


def _read_term(scanner: Scanner, position: str) -> Term:
    """Consume one term, with its literal suffix if it has one."""
    token = scanner.next()
    if token is None or token.kind is TokenKind.COMMENT:
        raise scanner.error(f"missing {position}, found {_describe(token)}")

    if token.kind is TokenKind.IRIREF:
        return IRI(value=_decode(scanner, token))
    if token.kind is TokenKind.BLANK_NODE_LABEL:
        return BlankNode(label=token.text)
    if token.kind is TokenKind.STRING:
        return _read_literal(scanner, token)
    raise scanner.error(f"expected {position}, found {_describe(token)}", token.start)


def _read_literal(scanner: Scanner, token: Token) -> Literal:
    value = _decode(scanner, token)
    language = None
    datatype = None

    suffix = scanner.peek()
    if suffix is not None and suffix.kind is TokenKind.LANGTAG:
        scanner.next()
        language = suffix.text
    elif suffix is not None and suffix.kind is TokenKind.DATATYPE_MARK:
        scanner.next()
        dt = scanner.next()
        if dt is None or dt.kind is not TokenKind.IRIREF:
            raise scanner.error("expected a datatype IRI after '^^'", suffix.start)
        datatype = IRI(value=_decode(scanner, dt))

    after = scanner.peek()
    if after is not None and after.kind in (TokenKind.LANGTAG, TokenKind.DATATYPE_MARK):
        raise scanner.error(
            "a literal cannot have both a language tag and a datatype", after.start
        )

    return Literal(value=value, language=language, datatype=datatype)


def parse_quad(line: str) -> Optional[Quad]:
    """
    Parse one line of N-Quads.

    Args:
        line: A single line, with or without its line terminator

    Returns:
        The quad defined by the line, or None if the line is blank or holds
        only a comment.

    Raises:
        NQuadsSyntaxError: If the line is not a valid N-Quads statement
    """
    scanner = Scanner(line.rstrip("\r\n"))
    first = scanner.peek()
    if first is None or first.kind is TokenKind.COMMENT:
        return None

    subject = _read_term(scanner, "subject")
    if isinstance(subject, Literal):
        raise scanner.error("a literal cannot be the subject", first.start)

    token = scanner.peek()
    predicate = _read_term(scanner, "predicate")
    if not isinstance(predicate, IRI):
        raise scanner.error("the predicate must be an IRI", token.start)

    obj = _read_term(scanner, "object")

    graph = None
    token = scanner.peek()
    if token is not None and token.kind is not TokenKind.DOT:
        if token.kind is TokenKind.STRING:
            raise scanner.error("a literal cannot be a graph label", token.start)
        if token.kind not in (TokenKind.IRIREF, TokenKind.BLANK_NODE_LABEL):
            raise scanner.error(f"expected graph label or '.', found {_describe(token)}")
        graph = _read_term(scanner, "graph label")

    token = scanner.next()
    if token is None or token.kind is not TokenKind.DOT:
        raise scanner.error(f"expected '.' to end the statement, found {_describe(token)}")

    trailing = scanner.next()
    if trailing is not None and trailing.kind is not TokenKind.COMMENT:
        raise scanner.error("only a comment may follow the final '.'", trailing.start)

    return Quad(subject=subject, predicate=predicate, object=obj, graph=graph)


def parse_term(text: str) -> Term:
    """
    Parse a single term written in N-Quads syntax.

    Args:
        text: An IRI, blank node or literal, e.g. ``"chat"@fr``

    Returns:
        The parsed term

    Raises:
        NQuadsSyntaxError: If ``text`` is not exactly one term
    """
    scanner = Scanner(text.strip())
    term = _read_term(scanner, "term")
    if not scanner.at_end():
        raise scanner.error("unexpected content after the term")
    return term

