"""String/byte codec convenience wrappers."""

from __future__ import annotations

from typing import Union

from . import config
from .decoder import decode
from .encoder import encode_block, render_words
from .tables import Scheme


def _coerce_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Unsupported type for encoding: {type(data)!r}")


def encode_bytes(
    data: Union[str, bytes, bytearray, memoryview],
    scheme: "str | Scheme | None" = None,
    line_words: int | None = None,
) -> str:
    """Render ``data`` as words, one space apart, with a trailing newline.

    Text is encoded as UTF-8 first.  ``line_words`` defaults to
    ``LASTRESORT_LINE_WORDS``.
    """
    if line_words is None:
        line_words = config.line_words()
    return render_words(encode_block(_coerce_bytes(data), scheme), line_words)


def encode_words(data: Union[str, bytes, bytearray, memoryview], scheme: "str | Scheme | None" = None) -> list:
    return encode_block(_coerce_bytes(data), scheme)


def decode_text(text: str, scheme: "str | Scheme | None" = None, strict: bool = False) -> bytes:
    return bytes(decode(text, scheme, strict=strict))


__all__ = ["decode_text", "encode_bytes", "encode_words"]
