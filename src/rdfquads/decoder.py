"""
Streaming N-Quads decoder.

A :class:`Decoder` pulls one logical line at a time from a text or binary
stream, skips blank and comment lines, and hands every other line to
:func:`~rdfquads.parser.parse_quad`.
"""

import enum
import gzip
import io
import logging
from collections import deque
from pathlib import Path
from typing import IO, Deque, Iterator, List, Optional, Union

from .config import Config
from .errors import DecoderClosedError, NQuadsSyntaxError
from .models import Quad
from .parser import parse_quad

__all__ = [
    "Decoder",
    "DecoderState",
]

# Create logger with NullHandler by default - no output unless user configures
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class DecoderState(enum.Enum):
    """Lifecycle of a :class:`Decoder`."""

    OPEN = "open"
    EXHAUSTED = "exhausted"
    FAILED = "failed"
    CLOSED = "closed"


class Decoder:
    """Decoder for RDF 1.1 N-Quads documents.

    Example:
        >>> with Decoder.open("data.nq") as decoder:
        ...     for quad in decoder:
        ...         print(quad.subject, quad.graph)

    Text sources are read as they are. Binary sources are read as bytes and
    every physical line is decoded with ``encoding`` on its own, so an
    undecodable byte only affects its line. LF, CRLF and CR all end a line
    in binary sources; ``encoding`` must be ASCII compatible. Streams passed
    by the caller are never closed by the decoder.
    """

    def __init__(
        self,
        source: IO,
        chunk_size: Optional[int] = None,
        strict: bool = True,
        encoding: Optional[str] = None,
    ):
        """Initialize the decoder.

        Args:
            source: Text or binary stream to read N-Quads from
            chunk_size: Characters (or bytes) requested per read, defaults
                to ``Config.CHUNK_SIZE``; longer lines are read in pieces
            strict: Stop at the first syntax error. When False, bad lines
                are logged, collected in :attr:`errors` and skipped
            encoding: Encoding of a binary ``source``
        """
        self.chunk_size = chunk_size if chunk_size is not None else Config.CHUNK_SIZE
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        self.strict = strict
        self.encoding = encoding or Config.ENCODING
        self.errors: List[NQuadsSyntaxError] = []
        self.lineno = 0
        self.quads_read = 0

        self._reader = source
        self._binary = not isinstance(source, io.TextIOBase)
        self._newline: Union[str, bytes] = b"\n" if self._binary else "\n"
        self._buffer: List[Union[str, bytes]] = []
        # Lines split off a binary chunk at bare CRs, not yet handed out
        self._pending: Deque[bytes] = deque()
        self._owned = False
        self._state = DecoderState.OPEN
        self._error: Optional[BaseException] = None

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        chunk_size: Optional[int] = None,
        strict: bool = True,
        encoding: Optional[str] = None,
    ) -> "Decoder":
        """Open an N-Quads file (``*.gz`` files are decompressed on the fly).

        The returned decoder owns the file and closes it in :meth:`close`.
        """
        path = Path(path)
        if path.suffix == ".gz":
            stream = gzip.open(path, "rb")
        else:
            stream = open(path, "rb")
        logger.debug(f"Opened {path} for decoding")

        decoder = cls(stream, chunk_size=chunk_size, strict=strict, encoding=encoding)
        decoder._owned = True
        return decoder

    @property
    def state(self) -> DecoderState:
        """Current lifecycle state."""
        return self._state

    def next_quad(self) -> Optional[Quad]:
        """Return the next quad, or None once the stream is exhausted.

        Raises:
            NQuadsSyntaxError: If a line is malformed (strict mode)
            OSError: If reading the underlying source fails
            DecoderClosedError: If the decoder has been closed
        """
        if self._state is DecoderState.CLOSED:
            raise DecoderClosedError("decoder is closed")
        if self._state is DecoderState.FAILED:
            raise self._error
        if self._state is DecoderState.EXHAUSTED:
            return None

        while True:
            try:
                raw = self._read_line()
            except OSError as e:
                self._fail(e)
                raise
            except NQuadsSyntaxError as e:
                self._reject(e)
                continue

            if raw is None:
                self._state = DecoderState.EXHAUSTED
                logger.debug(
                    f"End of stream after {self.lineno} lines, {self.quads_read} quads"
                )
                return None

            line = raw.strip()
            if not line or line.startswith("#"):
                logger.debug(f"Skipping blank or comment line {self.lineno}")
                continue

            try:
                quad = parse_quad(line)
            except NQuadsSyntaxError as e:
                self._reject(e.with_context(line=line, lineno=self.lineno), cause=e)
                continue

            if quad is None:
                continue
            self.quads_read += 1
            return quad

    def _reject(self, error: NQuadsSyntaxError, cause: Optional[BaseException] = None) -> None:
        """Record a bad line in lenient mode, otherwise fail with ``error``."""
        if not self.strict:
            logger.warning(f"Skipping invalid line: {error}")
            self.errors.append(error)
            return
        self._fail(error)
        if cause is None:
            raise error
        raise error from cause

    def _read_line(self) -> Optional[str]:
        """Return the next physical line, or None at end of input."""
        if self._pending:
            return self._decode_pending()

        buffer = self._buffer
        buffer.clear()
        while True:
            chunk = self._reader.readline(self.chunk_size)
            if not chunk:
                break
            buffer.append(chunk)
            if chunk.endswith(self._newline):
                break

        if not buffer:
            return None
        if len(buffer) > 1:
            logger.debug(f"Line {self.lineno + 1} was read in {len(buffer)} chunks")

        if not self._binary:
            self.lineno += 1
            return "".join(buffer)

        pieces = b"".join(buffer).rstrip(b"\n").split(b"\r")
        # CRLF (or a final CR) leaves an empty piece behind
        if len(pieces) > 1 and not pieces[-1]:
            pieces.pop()
        self._pending.extend(pieces)
        return self._decode_pending()

    def _decode_pending(self) -> str:
        raw = self._pending.popleft()
        self.lineno += 1
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise NQuadsSyntaxError(
                f"input is not valid {self.encoding}: {e.reason}",
                line=raw.decode(self.encoding, errors="replace").strip(),
                lineno=self.lineno,
            ) from e

    def _fail(self, error: BaseException) -> None:
        self._state = DecoderState.FAILED
        self._error = error

    def close(self) -> None:
        """Release the source.

        Files opened by :meth:`open` are closed; streams passed by the caller
        are left open.
        """
        if self._state is DecoderState.CLOSED:
            return
        if self._owned:
            self._reader.close()
        self._buffer.clear()
        self._pending.clear()
        self._state = DecoderState.CLOSED

    def __iter__(self) -> Iterator[Quad]:
        return self

    def __next__(self) -> Quad:
        quad = self.next_quad()
        if quad is None:
            raise StopIteration
        return quad

    def __enter__(self) -> "Decoder":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
