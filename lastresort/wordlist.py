"""Word list entries and the length-partitioned decode index.

A decode index holds the 256 (word, byte) pairs of one word family, grouped
into subsets of equal case-folded length.  Subsets are ordered by ascending
word length and each subset is sorted by case-folded word, so the decoder can
narrow candidates with a monotonic length scan followed by a binary search
for the still-matching prefix range.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from .errors import WordlistError

logger = logging.getLogger(__name__)

TABLE_SIZE = 256
WHITESPACE = frozenset(" \n\r")


def fold(text: str) -> str:
    return text.casefold()


@dataclass(frozen=True)
class WordlistEntry:
    word: str
    byte: int


@dataclass(frozen=True)
class WordlistSubset:
    word_len: int
    words: Tuple[WordlistEntry, ...]

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class DecodeIndex:
    name: str
    subsets: Tuple[WordlistSubset, ...]

    def __iter__(self) -> Iterator[WordlistSubset]:
        return iter(self.subsets)

    def __len__(self) -> int:
        return len(self.subsets)

    def __getitem__(self, pos: int) -> WordlistSubset:
        return self.subsets[pos]

    @property
    def entries(self) -> Iterator[WordlistEntry]:
        for subset in self.subsets:
            yield from subset.words


def validate_words(words: Sequence[str], name: str = "wordlist") -> Tuple[str, ...]:
    """Check that ``words`` can act as a byte table and return them as a tuple.

    The table must hold exactly 256 non-empty words free of the separator
    characters, pairwise distinct once case-folded.
    """
    words = tuple(words)
    if len(words) != TABLE_SIZE:
        raise WordlistError(f"{name}: expected {TABLE_SIZE} words, got {len(words)}")
    seen = {}
    for pos, word in enumerate(words):
        if not isinstance(word, str) or not word:
            raise WordlistError(f"{name}: empty word at byte 0x{pos:02x}")
        if WHITESPACE.intersection(word):
            raise WordlistError(f"{name}: word {word!r} at byte 0x{pos:02x} contains whitespace")
        folded = fold(word)
        if folded in seen:
            raise WordlistError(
                f"{name}: {word!r} (0x{pos:02x}) duplicates {words[seen[folded]]!r} "
                f"(0x{seen[folded]:02x}) after case-folding"
            )
        seen[folded] = pos
    return words


def _check_prefix_free(entries: Sequence[WordlistEntry], name: str) -> None:
    # Sorted by folded word, so a prefix always sits directly before some word it prefixes.
    ordered = sorted(entries, key=lambda entry: entry.word)
    for left, right in zip(ordered, ordered[1:]):
        if right.word.startswith(left.word):
            raise WordlistError(
                f"{name}: {left.word!r} (0x{left.byte:02x}) is a prefix of "
                f"{right.word!r} (0x{right.byte:02x}); the shorter word could never be decoded"
            )


def build_decode_index(words: Sequence[str], name: str = "wordlist") -> DecodeIndex:
    """Build the decode index for a 256-word family, ``words[b]`` encoding byte ``b``."""
    words = validate_words(words, name)
    entries = [WordlistEntry(fold(word), byte) for byte, word in enumerate(words)]
    _check_prefix_free(entries, name)
    entries.sort(key=lambda entry: (len(entry.word), entry.word))
    subsets = tuple(
        WordlistSubset(word_len, tuple(group))
        for word_len, group in itertools.groupby(entries, key=lambda entry: len(entry.word))
    )
    logger.debug(
        "built decode index %s: %d subsets, lengths %d..%d",
        name,
        len(subsets),
        subsets[0].word_len,
        subsets[-1].word_len,
    )
    return DecodeIndex(name, subsets)


def is_sorted(words: Iterable[str], key=None) -> bool:
    a, b = itertools.tee(key(word) if key else word for word in words)
    next(b, None)
    return all(x <= y for x, y in zip(a, b))


__all__ = [
    "DecodeIndex",
    "TABLE_SIZE",
    "WHITESPACE",
    "WordlistEntry",
    "WordlistSubset",
    "build_decode_index",
    "fold",
    "is_sorted",
    "validate_words",
]
