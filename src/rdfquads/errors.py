"""Exceptions raised while decoding N-Quads."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "DecoderClosedError",
    "InvalidEscapeError",
    "NQuadsError",
    "NQuadsSyntaxError",
]


class NQuadsError(Exception):
    """Base class for all errors raised by :mod:`rdfquads`."""


class NQuadsSyntaxError(NQuadsError, ValueError):
    """A line (or term) does not conform to the N-Quads grammar.

    Args:
        reason: What is wrong with the input
        line: Raw text of the offending line, if known
        lineno: 1-based physical line number in the decoded stream
        column: 0-based offset into ``line`` where the problem was found
    """

    def __init__(
        self,
        reason: str,
        line: Optional[str] = None,
        lineno: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.reason = reason
        self.line = line
        self.lineno = lineno
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.reason
        if self.column is not None:
            message = f"{message} (column {self.column})"
        if self.line is not None:
            message = f"failed to parse {self.line!r}: {message}"
        if self.lineno is not None:
            message = f"line {self.lineno}: {message}"
        return message

    def with_context(
        self, line: Optional[str] = None, lineno: Optional[int] = None
    ) -> "NQuadsSyntaxError":
        """Return a copy of this error carrying the given line context."""
        return type(self)(
            self.reason,
            line=line if line is not None else self.line,
            lineno=lineno if lineno is not None else self.lineno,
            column=self.column,
        )


class InvalidEscapeError(NQuadsSyntaxError):
    """A backslash escape has an unknown letter or a malformed payload."""


class DecoderClosedError(NQuadsError):
    """The decoder was used after :meth:`~rdfquads.decoder.Decoder.close`."""
