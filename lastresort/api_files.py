"""Stream and file transcoding used by the command line."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, NamedTuple, TextIO

from . import config
from .decoder import Decoder, iter_chars
from .encoder import encode_block
from .tables import Scheme, get_scheme


class StreamResult(NamedTuple):
    consumed: int
    produced: int
    truncated: bool = False


def encode_stream(
    source: BinaryIO,
    dest: TextIO,
    scheme: "str | Scheme | None" = None,
    line_words: int | None = None,
    chunk_size: int | None = None,
) -> StreamResult:
    """Encode ``source`` chunk by chunk into ``dest``.

    Word families keep alternating across chunk boundaries, so the output is
    identical to encoding the whole input at once.  Returns the number of
    bytes read and words written.
    """
    scheme = get_scheme(scheme)
    chunk_size = chunk_size or config.read_chunk()
    consumed = written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        words = encode_block(chunk, scheme, start_parity=consumed % 2)
        consumed += len(chunk)
        parts = []
        for word in words:
            if written:
                parts.append("\n" if line_words and written % line_words == 0 else " ")
            parts.append(word)
            written += 1
        dest.write("".join(parts))
    if written:
        dest.write("\n")
    return StreamResult(consumed, written)


def decode_stream(
    source: TextIO,
    dest: BinaryIO,
    scheme: "str | Scheme | None" = None,
    strict: bool = False,
    chunk_size: int | None = None,
) -> StreamResult:
    """Decode text from ``source`` into raw bytes on ``dest``.

    Bytes decoded before an error are still written.  Returns the number of
    characters read, the number of bytes written and whether the input ended
    inside a word.
    """
    decoder = Decoder(scheme)
    chunk_size = chunk_size or config.read_chunk()
    chunks = iter(lambda: source.read(chunk_size), "")
    out = bytearray()
    produced = 0
    try:
        for char in iter_chars(chunks):
            byte = decoder.feed(char)
            if byte is None:
                continue
            out.append(byte)
            if len(out) >= chunk_size:
                dest.write(bytes(out))
                produced += len(out)
                out.clear()
        decoder.finish(strict)
    finally:
        if out:
            dest.write(bytes(out))
            produced += len(out)
    return StreamResult(decoder.state.offset, produced, decoder.pending)


def encode_file(src: "str | Path", dst: "str | Path", scheme: "str | Scheme | None" = None, line_words: int | None = None) -> StreamResult:
    with open(src, "rb") as source, open(dst, "w", encoding="utf-8", newline="\n") as dest:
        return encode_stream(source, dest, scheme, line_words)


def decode_file(src: "str | Path", dst: "str | Path", scheme: "str | Scheme | None" = None, strict: bool = False) -> StreamResult:
    with open(src, "r", encoding="utf-8", newline="") as source, open(dst, "wb") as dest:
        return decode_stream(source, dest, scheme, strict)


__all__ = ["StreamResult", "decode_file", "decode_stream", "encode_file", "encode_stream"]
