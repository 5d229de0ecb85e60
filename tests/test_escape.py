"""Tests for escape decoding and encoding."""

import pytest

from rdfquads.errors import InvalidEscapeError
from rdfquads.escape import escape_iri, escape_literal, resolve


class TestResolve:
    """Test resolve()."""

    def test_unescaped_returned_as_is(self):
        """Without escapes the input object itself comes back."""
        raw = "plain text"
        if resolve(raw, False) is not raw:
            pytest.fail("Expected the fast path to return its input")

    def test_tab(self):
        assert resolve(r"a\tb", True) == "a\tb"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (r"\t", "\t"),
            (r"\b", "\b"),
            (r"\n", "\n"),
            (r"\r", "\r"),
            (r"\f", "\f"),
            (r"\"", '"'),
            (r"\'", "'"),
            (r"\\", "\\"),
        ],
    )
    def test_echars(self, raw, expected):
        assert resolve(raw, True) == expected

    def test_short_unicode_escape(self):
        assert resolve(r"\u0041", True) == "A"

    def test_long_unicode_escape(self):
        assert resolve(r"\U00010000", True) == "\U00010000"

    def test_mixed_content(self):
        """Escapes and raw characters, including astral ones, combine."""
        assert resolve("caf\\u00E9 \U0001F600\\n!", True) == "café \U0001F600\n!"

    def test_consecutive_backslashes(self):
        assert resolve(r"\\\\n", True) == r"\\n"

    @pytest.mark.parametrize(
        "raw",
        [
            r"\u00ZZ",
            r"\u12",
            r"\U0001000",
            r"\U0001F60G",
            r"\x41",
            "trailing\\",
            r"\uD800",
            r"\U00110000",
        ],
    )
    def test_invalid_escapes(self, raw):
        """Malformed escapes are syntax errors, never crashes."""
        with pytest.raises(InvalidEscapeError):
            resolve(raw, True)

    def test_error_column(self):
        with pytest.raises(InvalidEscapeError) as excinfo:
            resolve(r"ab\q", True)
        assert excinfo.value.column == 2

    def test_invalid_escape_is_value_error(self):
        with pytest.raises(ValueError):
            resolve(r"\u+041", True)


class TestEscape:
    """Test escape_literal() and escape_iri()."""

    def test_escape_literal(self):
        assert escape_literal('say "hi"\\\n') == 'say \\"hi\\"\\\\\\n'

    def test_escape_literal_keeps_unicode(self):
        assert escape_literal("é\U0001F600") == "é\U0001F600"

    def test_escape_literal_inverts_resolve(self):
        value = "tab\there\r\nquote\" back\\slash \b\f"
        assert resolve(escape_literal(value), True) == value

    def test_escape_iri_plain(self):
        assert escape_iri("http://example.org/a#b") == "http://example.org/a#b"

    def test_escape_iri_forbidden(self):
        assert escape_iri("http://example.org/a b>") == "http://example.org/a\\u0020b\\u003E"
