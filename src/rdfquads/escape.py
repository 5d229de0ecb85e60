"""
Backslash escape handling for N-Quads strings and IRIs.

:func:`resolve` decodes the escapes found in the raw content of a quoted
literal or an IRI reference. :func:`escape_literal` and :func:`escape_iri`
do the reverse when terms are written back out.
"""

from typing import Dict

from .errors import InvalidEscapeError

__all__ = [
    "escape_iri",
    "escape_literal",
    "resolve",
]

# ECHAR letters and the character each one stands for
ECHARS: Dict[str, str] = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

# UCHAR letters and the number of hex digits that follow them
UCHARS: Dict[str, int] = {
    "u": 4,
    "U": 8,
}

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_LITERAL_ESCAPES = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
}

_IRI_FORBIDDEN = frozenset('<>"{}|^`\\')


def _decode_uchar(raw: str, start: int, width: int) -> str:
    """Decode ``width`` hex digits of ``raw`` beginning at ``start``."""
    digits = raw[start : start + width]
    if len(digits) != width or not all(c in HEX_DIGITS for c in digits):
        raise InvalidEscapeError(
            f"expected {width} hex digits after {raw[start - 2 : start]!r}, got {digits!r}",
            column=start - 2,
        )
    code_point = int(digits, 16)
    if 0xD800 <= code_point <= 0xDFFF or code_point > 0x10FFFF:
        raise InvalidEscapeError(
            f"escape does not denote a Unicode scalar value: U+{code_point:04X}",
            column=start - 2,
        )
    return chr(code_point)


def resolve(raw: str, was_escaped: bool) -> str:
    """
    Decode the backslash escapes in ``raw``.

    Args:
        raw: Scanned content of a literal or IRI, without its delimiters
        was_escaped: Whether the scanner saw any backslash in ``raw``

    Returns:
        The decoded text. When ``was_escaped`` is false ``raw`` is returned
        as is.

    Raises:
        InvalidEscapeError: If an escape letter is unknown or a ``\\u`` /
            ``\\U`` payload is not made of exactly 4 / 8 hex digits
    """
    if not was_escaped:
        return raw

    parts = []
    i = 0
    end = len(raw)
    while i < end:
        j = raw.find("\\", i)
        if j < 0:
            parts.append(raw[i:])
            break
        parts.append(raw[i:j])
        if j + 1 >= end:
            raise InvalidEscapeError("dangling backslash at end of string", column=j)

        letter = raw[j + 1]
        if letter in ECHARS:
            parts.append(ECHARS[letter])
            i = j + 2
        elif letter in UCHARS:
            width = UCHARS[letter]
            parts.append(_decode_uchar(raw, j + 2, width))
            i = j + 2 + width
        else:
            raise InvalidEscapeError(f"unknown escape sequence '\\{letter}'", column=j)

    return "".join(parts)


def escape_literal(value: str) -> str:
    """Escape a lexical value for use between double quotes."""
    return value.translate(_LITERAL_ESCAPES)


def escape_iri(value: str) -> str:
    """Escape the characters an IRI reference may not contain raw."""
    if all(c > " " and c not in _IRI_FORBIDDEN for c in value):
        return value
    out = []
    for c in value:
        if c <= " " or c in _IRI_FORBIDDEN:
            out.append(f"\\u{ord(c):04X}")
        else:
            out.append(c)
    return "".join(out)
