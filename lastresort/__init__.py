"""Transcode binary data to and from natural-language word lists.

Each byte maps to one word of a fixed 256-word list.  Decoding tolerates
missing, doubled or misplaced whitespace and ignores letter case.
"""

from .api_files import decode_file, decode_stream, encode_file, encode_stream
from .api_strings import decode_text, encode_bytes, encode_words
from .decoder import Decoder, DecoderState, ListSelector, decode
from .encoder import Encoder, encode, encode_block, render_words
from .errors import (
    InvalidDataError,
    LastResortError,
    TruncatedInputError,
    UnknownSchemeError,
    WordlistError,
)
from .tables import SCHEMES, Scheme, custom_scheme, get_scheme
from .version import __version__


def pgp_encode(data): return encode_bytes(data, "pgp")
def pgp_decode(text: str, strict: bool = False): return decode_text(text, "pgp", strict=strict)
def eff_encode(data): return encode_bytes(data, "eff")
def eff_decode(text: str, strict: bool = False): return decode_text(text, "eff", strict=strict)


__all__ = [
    "Decoder",
    "DecoderState",
    "Encoder",
    "InvalidDataError",
    "LastResortError",
    "ListSelector",
    "SCHEMES",
    "Scheme",
    "TruncatedInputError",
    "UnknownSchemeError",
    "WordlistError",
    "__version__",
    "custom_scheme",
    "decode",
    "decode_file",
    "decode_stream",
    "decode_text",
    "eff_decode",
    "eff_encode",
    "encode",
    "encode_block",
    "encode_bytes",
    "encode_file",
    "encode_stream",
    "encode_words",
    "get_scheme",
    "pgp_decode",
    "pgp_encode",
    "render_words",
]
