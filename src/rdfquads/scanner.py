"""Tokenizer for a single N-Quads line.

:class:`Scanner` keeps a cursor into the line and hands out typed tokens.
Escapes are not decoded here; string and IRI tokens only record whether a
backslash was seen so that :func:`rdfquads.escape.resolve` can skip the
work when there was none.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from .errors import NQuadsSyntaxError

__all__ = [
    "Scanner",
    "Token",
    "TokenKind",
]

WHITESPACE = " \t"

# Characters that may not appear raw inside <...>
IRI_FORBIDDEN = frozenset('<"{}|^`')


class TokenKind(enum.Enum):
    """Kinds of token found on an N-Quads line."""

    IRIREF = "IRIREF"
    BLANK_NODE_LABEL = "BLANK_NODE_LABEL"
    STRING = "STRING"
    LANGTAG = "LANGTAG"
    DATATYPE_MARK = "^^"
    DOT = "."
    COMMENT = "#"


class Token(NamedTuple):
    """A token and where it starts on the line.

    ``text`` is the token content without its delimiters: the IRI between
    ``<`` and ``>``, the label after ``_:``, the string between the quotes,
    the tag after ``@`` or the comment after ``#``.
    """

    kind: TokenKind
    text: str
    start: int
    escaped: bool = False


# PN_CHARS_BASE code point ranges of the N-Quads grammar
PN_CHARS_BASE = (
    (0x41, 0x5A),
    (0x61, 0x7A),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

DIGITS = "0123456789"


def _is_label_start(c: str) -> bool:
    """PN_CHARS_U or a digit."""
    if c in "_:" or c in DIGITS:
        return True
    cp = ord(c)
    return any(lo <= cp <= hi for lo, hi in PN_CHARS_BASE)


def _is_label_char(c: str) -> bool:
    """PN_CHARS."""
    if c == "-" or c == "\u00b7" or _is_label_start(c):
        return True
    cp = ord(c)
    return 0x300 <= cp <= 0x36F or 0x203F <= cp <= 0x2040


class Scanner:
    """Cursor over one line of N-Quads text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._peeked: Token | None = None

    def error(self, reason: str, column: int | None = None) -> NQuadsSyntaxError:
        """Build a syntax error pointing at ``column`` (default: the cursor)."""
        return NQuadsSyntaxError(
            reason, line=self.text, column=self.pos if column is None else column
        )

    def at_end(self) -> bool:
        """Whether only whitespace is left on the line."""
        return self.peek() is None

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self._peeked is None:
            self._peeked = self._scan()
        return self._peeked

    def next(self) -> Token | None:
        """Consume and return the next token, or ``None`` at end of line."""
        token = self.peek()
        self._peeked = None
        return token

    # ── Lexical rules ─────────────────────────────────────────────

    def _skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in WHITESPACE:
            self.pos += 1

    def _scan(self) -> Token | None:
        self._skip_whitespace()
        if self.pos >= len(self.text):
            return None

        c = self.text[self.pos]
        if c == "<":
            return self._scan_iri()
        if c == "_":
            return self._scan_blank_node()
        if c == '"':
            return self._scan_string()
        if c == "@":
            return self._scan_langtag()
        if c == "^":
            if self.text.startswith("^^", self.pos):
                self.pos += 2
                return Token(TokenKind.DATATYPE_MARK, "^^", self.pos - 2)
            raise self.error("expected '^^' before a datatype IRI")
        if c == ".":
            self.pos += 1
            return Token(TokenKind.DOT, ".", self.pos - 1)
        if c == "#":
            start = self.pos
            self.pos = len(self.text)
            return Token(TokenKind.COMMENT, self.text[start + 1 :], start)
        raise self.error(f"unexpected character {c!r}")

    def _scan_iri(self) -> Token:
        text = self.text
        start = self.pos
        i = start + 1
        escaped = False
        while i < len(text):
            c = text[i]
            if c == ">":
                self.pos = i + 1
                return Token(TokenKind.IRIREF, text[start + 1 : i], start, escaped)
            if c == "\\":
                if text[i + 1 : i + 2] not in ("u", "U"):
                    raise self.error("only \\u and \\U escapes are allowed in an IRI", i)
                escaped = True
            elif c <= " " or c in IRI_FORBIDDEN:
                raise self.error(f"character {c!r} is not allowed in an IRI", i)
            i += 1
        raise self.error("unterminated IRI, missing '>'", start)

    def _scan_blank_node(self) -> Token:
        text = self.text
        start = self.pos
        if not text.startswith("_:", start):
            raise self.error("expected '_:' to start a blank node label")
        i = start + 2
        if i >= len(text) or not _is_label_start(text[i]):
            raise self.error("empty or invalid blank node label", i)
        while i < len(text) and (_is_label_char(text[i]) or text[i] == "."):
            i += 1
        # A label may contain '.' but not end with one
        while text[i - 1] == ".":
            i -= 1
        self.pos = i
        return Token(TokenKind.BLANK_NODE_LABEL, text[start + 2 : i], start)

    def _scan_string(self) -> Token:
        text = self.text
        start = self.pos
        i = start + 1
        escaped = False
        while i < len(text):
            c = text[i]
            if c == '"':
                self.pos = i + 1
                return Token(TokenKind.STRING, text[start + 1 : i], start, escaped)
            if c == "\\":
                escaped = True
                i += 2
                continue
            if c in "\r\n":
                raise self.error("line break inside a string literal", i)
            i += 1
        raise self.error("unterminated string literal", start)

    def _scan_langtag(self) -> Token:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text) and text[i].isascii() and text[i].isalpha():
            i += 1
        if i == start + 1:
            raise self.error("empty language tag", start)
        while i < len(text) and text[i] == "-":
            j = i + 1
            while j < len(text) and text[j].isascii() and text[j].isalnum():
                j += 1
            if j == i + 1:
                raise self.error("empty language subtag", i)
            i = j
        self.pos = i
        return Token(TokenKind.LANGTAG, text[start + 1 : i], start)
