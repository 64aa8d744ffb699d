"""Word-list sources, schemes and the cached per-scheme tables.

Two schemes ship with the package:

``pgp``
    The PGP word list.  Bytes at even positions use the two-syllable
    family, bytes at odd positions the three-syllable family.
``eff``
    A single family taken from the EFF Short Wordlist 2.0: every fourth
    word of the first 1024 entries of the official list.

Tables are parsed and validated the first time a scheme is requested and are
shared, read-only, for the rest of the process.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Iterable, Sequence, Tuple

import numpy as np

from . import config
from .errors import UnknownSchemeError, WordlistError
from .wordlist import TABLE_SIZE, DecodeIndex, build_decode_index, validate_words

logger = logging.getLogger(__name__)

EFF_SOURCE = "eff_short_wordlist_2_0_base256.txt"
PGP_TWO_SYLLABLE_SOURCE = "pgpfone_two_syllable_word_list.txt"
PGP_THREE_SYLLABLE_SOURCE = "pgpfone_three_syllable_word_list.txt"
EFF_FULL_PREFIX = 1024
EFF_STRIDE = EFF_FULL_PREFIX // TABLE_SIZE

SCHEMES = ("pgp", "eff")


@dataclass(frozen=True, eq=False)
class Family:
    """One 256-word list: the encode table and its decode index."""

    name: str
    words: Tuple[str, ...]
    index: DecodeIndex = field(repr=False)
    table: np.ndarray = field(repr=False)

    @classmethod
    def from_words(cls, name: str, words: Sequence[str]) -> "Family":
        words = validate_words(words, name)
        index = build_decode_index(words, name)
        table = np.asarray(words, dtype=object)
        table.setflags(write=False)
        return cls(name, words, index, table)

    def __getitem__(self, byte: int) -> str:
        return self.words[byte]


@dataclass(frozen=True, eq=False)
class Scheme:
    name: str
    families: Tuple[Family, ...]

    def __post_init__(self) -> None:
        if len(self.families) not in (1, 2):
            raise WordlistError(f"{self.name}: a scheme has one or two word families")

    @property
    def paired(self) -> bool:
        return len(self.families) == 2

    def family(self, selector: int) -> Family:
        return self.families[selector % len(self.families)]

    def index(self, selector: int) -> DecodeIndex:
        return self.family(selector).index


def parse_eff_wordlist(lines: Iterable[str], name: str = "eff") -> Tuple[str, ...]:
    """Parse a tab-delimited ``<dice>\\t<word>`` list.

    A full official list (1296 lines) contributes every fourth word of its
    first 1024 entries; a pre-selected list of exactly 256 entries is used
    as is.
    """
    words = []
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue
        parts = line.split("\t")
        if len(parts) < 2 or not parts[1].strip():
            raise WordlistError(f"{name}: line {lineno} is not '<dice>\\t<word>': {line!r}")
        words.append(parts[1].strip())
    if len(words) >= EFF_FULL_PREFIX:
        words = words[:EFF_FULL_PREFIX:EFF_STRIDE]
    elif len(words) != TABLE_SIZE:
        raise WordlistError(
            f"{name}: expected {TABLE_SIZE} or at least {EFF_FULL_PREFIX} entries, got {len(words)}"
        )
    return tuple(words)


def parse_pgp_wordlist(text: str, name: str = "pgp") -> Tuple[str, ...]:
    """Parse a whitespace-delimited PGPfone syllable list."""
    words = tuple(text.split())
    if len(words) != TABLE_SIZE:
        raise WordlistError(f"{name}: expected {TABLE_SIZE} words, got {len(words)}")
    return words


def _read_bundled(filename: str) -> str:
    return resources.files(__package__).joinpath("wordlists", filename).read_text(encoding="utf-8")


@functools.lru_cache(maxsize=None)
def _load_eff(path: str | None) -> Scheme:
    if path:
        logger.debug("loading EFF word list from %s", path)
        text = Path(path).read_text(encoding="utf-8")
    else:
        text = _read_bundled(EFF_SOURCE)
    words = parse_eff_wordlist(text.splitlines(), "eff")
    return Scheme("eff", (Family.from_words("eff", words),))


@functools.lru_cache(maxsize=None)
def _load_pgp() -> Scheme:
    two = parse_pgp_wordlist(_read_bundled(PGP_TWO_SYLLABLE_SOURCE), "pgp-two-syllable")
    three = parse_pgp_wordlist(_read_bundled(PGP_THREE_SYLLABLE_SOURCE), "pgp-three-syllable")
    return Scheme(
        "pgp",
        (
            Family.from_words("pgp-two-syllable", two),
            Family.from_words("pgp-three-syllable", three),
        ),
    )


def get_scheme(scheme: "str | Scheme | None" = None) -> Scheme:
    """Resolve a scheme name (case-insensitive) or pass a Scheme through."""
    if isinstance(scheme, Scheme):
        return scheme
    name = (scheme or config.default_scheme()).strip().lower()
    if name == "pgp":
        return _load_pgp()
    if name == "eff":
        return _load_eff(config.eff_wordlist_path())
    raise UnknownSchemeError(name, SCHEMES)


def custom_scheme(name: str, *families: Sequence[str]) -> Scheme:
    """Build a scheme from one or two caller-supplied 256-word lists."""
    if len(families) == 1:
        built = (Family.from_words(name, families[0]),)
    else:
        built = tuple(Family.from_words(f"{name}-{pos}", words) for pos, words in enumerate(families))
    return Scheme(name, built)


__all__ = [
    "Family",
    "SCHEMES",
    "Scheme",
    "custom_scheme",
    "get_scheme",
    "parse_eff_wordlist",
    "parse_pgp_wordlist",
]
