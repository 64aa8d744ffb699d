"""Byte to word encoding."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Union

import numpy as np

from .tables import Scheme, get_scheme

BytesLike = Union[bytes, bytearray, memoryview]


class Encoder:
    """Lazy byte -> word stream.

    ``data`` is any iterable of ints in 0..255 (bytes-like objects qualify).
    For paired schemes the word family alternates with every byte, starting
    with the first family.  Errors raised by ``data`` propagate unchanged.
    """

    def __init__(self, data: Iterable[int], scheme: "str | Scheme | None" = None, start_parity: int = 0) -> None:
        self.scheme = get_scheme(scheme)
        self._iter = iter(data)
        self._parity = start_parity % 2 if self.scheme.paired else 0

    @property
    def parity(self) -> int:
        return self._parity

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        byte = next(self._iter)
        if not isinstance(byte, (int, np.integer)) or not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte!r}")
        word = self.scheme.family(self._parity)[int(byte)]
        if self.scheme.paired:
            self._parity ^= 1
        return word


def encode(data: Iterable[int], scheme: "str | Scheme | None" = None) -> Encoder:
    return Encoder(data, scheme)


def encode_block(data: BytesLike, scheme: "str | Scheme | None" = None, start_parity: int = 0) -> List[str]:
    """Encode a whole buffer at once with vectorised table lookups.

    Produces exactly what :class:`Encoder` yields for the same bytes and
    starting parity.
    """
    scheme = get_scheme(scheme)
    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    if raw.size == 0:
        return []
    if not scheme.paired:
        return scheme.families[0].table[raw].tolist()
    out = np.empty(raw.size, dtype=object)
    odd = (np.arange(raw.size) + start_parity) % 2 == 1
    out[~odd] = scheme.families[0].table[raw[~odd]]
    out[odd] = scheme.families[1].table[raw[odd]]
    return out.tolist()


def render_words(words: Iterable[str], line_words: int | None = None) -> str:
    """Join words with single spaces and a trailing newline.

    With ``line_words`` set, every ``line_words``-th separator becomes a
    newline instead.  No words render as the empty string.
    """
    words = list(words)
    if not words:
        return ""
    if not line_words:
        return " ".join(words) + "\n"
    lines = [" ".join(words[i:i + line_words]) for i in range(0, len(words), line_words)]
    return "\n".join(lines) + "\n"


__all__ = ["Encoder", "encode", "encode_block", "render_words"]
