"""Read logical lines from a text or binary stream."""

from __future__ import annotations

import codecs
from typing import IO, AnyStr, Iterator

from treetextconf.config import TREETEXTCONF_ENCODING, TREETEXTCONF_READ_CHUNK


class LineSource:
    """Yield logical lines from ``stream`` and count the bytes consumed.

    Reads are bounded by ``chunk_size``, so a long physical line arrives in
    several fragments which are joined back into a single logical line
    before it is yielded. With ``size_limit`` set, reading stops as soon as
    the consumed bytes reach the limit, even in the middle of a line; the
    truncated line is still yielded so the caller can report it.

    Args:
        stream: Any object with a ``readline(size)`` method returning either
            ``str`` or ``bytes``.
        encoding: Used to decode bytes, and to measure text lines in bytes.
        chunk_size: Upper bound for a single physical read.
        size_limit: Byte count at which a line stops being read.

    Attributes:
        size: Bytes consumed so far, excluding line terminators.
        lines: Logical lines yielded so far.

    Raises:
        LookupError: If ``encoding`` is not a known codec.
    """

    def __init__(
        self,
        stream: IO[AnyStr],
        *,
        encoding: str = TREETEXTCONF_ENCODING,
        chunk_size: int = TREETEXTCONF_READ_CHUNK,
        size_limit: int | None = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        codecs.lookup(encoding)
        self._stream = stream
        self.encoding = encoding
        self.chunk_size = chunk_size
        self.size_limit = size_limit
        self.size = 0
        self.lines = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line

    def read_line(self) -> str | None:
        """Return the next logical line without its terminator, or None at end of input."""
        fragments = []
        pending = 0
        truncated = False
        while True:
            chunk = self._stream.readline(self.chunk_size)
            if not chunk:
                break
            fragments.append(chunk)
            if chunk[-1:] in ("\n", b"\n"):
                break
            pending += self._measure(chunk)
            if self.size_limit is not None and self.size + pending >= self.size_limit:
                truncated = True
                break

        if not fragments:
            return None

        raw = fragments[0][:0].join(fragments)
        raw = _strip_terminator(raw)
        self.size += self._measure(raw)
        self.lines += 1
        if isinstance(raw, bytes):
            # a cut line may end inside a multibyte character
            return raw.decode(self.encoding, errors="replace" if truncated else "strict")
        return raw

    def _measure(self, raw: AnyStr) -> int:
        if isinstance(raw, bytes):
            return len(raw)
        return len(raw.encode(self.encoding))


def _strip_terminator(raw: AnyStr) -> AnyStr:
    """Drop a trailing ``\\n`` or ``\\r\\n``."""
    if raw[-1:] in ("\n", b"\n"):
        raw = raw[:-1]
        if raw[-1:] in ("\r", b"\r"):
            raw = raw[:-1]
    return raw
