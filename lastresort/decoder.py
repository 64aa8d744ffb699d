"""Incremental word -> byte decoding.

The decoder never tokenizes its input.  Spaces, newlines and carriage returns
are dropped, everything else is case-folded and matched one character at a
time against the live candidate words.  A byte is emitted the moment the
candidates collapse to a single word that has been matched completely, after
which matching starts over from the full decode index (the other family's
index for paired schemes).

Candidates are kept as ``(subset, lo, hi)`` windows into the immutable
decode index.  A new character first drops the subsets whose words are now
too short, then shrinks each remaining window to the words whose next
characters equal the folded input; since every word in a window shares the
prefix matched so far, that range is contiguous and found by bisection.
"""

from __future__ import annotations

import bisect
import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidDataError, TruncatedInputError
from .tables import Scheme, get_scheme
from .wordlist import WHITESPACE, DecodeIndex, WordlistSubset, fold

logger = logging.getLogger(__name__)

Window = Tuple[WordlistSubset, int, int]


class ListSelector(enum.IntEnum):
    FIRST = 0
    SECOND = 1

    def advance(self, paired: bool) -> "ListSelector":
        if not paired:
            return self
        return ListSelector.SECOND if self is ListSelector.FIRST else ListSelector.FIRST


def _full_view(index: DecodeIndex) -> List[Window]:
    return [(subset, 0, len(subset.words)) for subset in index]


@dataclass
class DecoderState:
    """Narrowing state of one decode stream."""

    candidates: List[Window]
    prev_match_len: int = 0
    curr_match_len: int = 0
    list_selector: ListSelector = ListSelector.FIRST
    matched: str = ""
    offset: int = 0
    decoded: int = 0
    error: Optional[InvalidDataError] = None

    @classmethod
    def initial(cls, index: DecodeIndex) -> "DecoderState":
        return cls(_full_view(index))

    @property
    def candidate_count(self) -> int:
        return sum(hi - lo for _, lo, hi in self.candidates)

    def candidate_words(self) -> List[str]:
        return [entry.word for subset, lo, hi in self.candidates for entry in subset.words[lo:hi]]


class Decoder:
    """Character-at-a-time decoder for one stream.

    ``feed`` consumes one character and returns the decoded byte when that
    character completes a word, otherwise ``None``.  An
    :class:`InvalidDataError` ends the stream: the candidates are left as
    they were before the offending character and every later ``feed``
    raises the same error until ``reset`` is called.
    """

    def __init__(self, scheme: "str | Scheme | None" = None) -> None:
        self.scheme = get_scheme(scheme)
        self._state = DecoderState.initial(self.scheme.index(ListSelector.FIRST))

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._state.curr_match_len > 0

    def reset(self) -> None:
        """Forget any partial match and return to the first word family."""
        self._state = DecoderState.initial(self.scheme.index(ListSelector.FIRST))

    def _resolve(self, byte: int) -> int:
        state = self._state
        state.list_selector = state.list_selector.advance(self.scheme.paired)
        state.candidates = _full_view(self.scheme.index(state.list_selector))
        state.prev_match_len = 0
        state.curr_match_len = 0
        state.matched = ""
        state.decoded += 1
        return byte

    def feed(self, char: str) -> Optional[int]:
        state = self._state
        if state.error is not None:
            raise state.error
        if len(char) != 1:
            raise ValueError(f"feed expects a single character, got {char!r}")
        offset = state.offset
        state.offset += 1
        if char in WHITESPACE:
            return None

        segment = fold(char)
        prev = state.prev_match_len
        curr = prev + len(segment)

        def key(entry):
            return entry.word[prev:curr]

        first = bisect.bisect_left(state.candidates, curr, key=lambda window: window[0].word_len)
        survivors = []
        for subset, lo, hi in state.candidates[first:]:
            lo = bisect.bisect_left(subset.words, segment, lo, hi, key=key)
            hi = bisect.bisect_right(subset.words, segment, lo, hi, key=key)
            if lo < hi:
                survivors.append((subset, lo, hi))

        if not survivors:
            state.error = InvalidDataError(char, offset, state.decoded, state.matched)
            raise state.error

        if len(survivors) == 1:
            subset, lo, hi = survivors[0]
            if hi - lo == 1 and subset.word_len == curr:
                entry = subset.words[lo]
                logger.debug("resolved %r -> 0x%02x at offset %d", entry.word, entry.byte, offset)
                return self._resolve(entry.byte)

        state.candidates = survivors
        state.prev_match_len = state.curr_match_len = curr
        state.matched += segment
        return None

    def finish(self, strict: bool = False) -> None:
        """Signal end of input; raise if ``strict`` and a word is still open."""
        if strict and self.pending:
            raise TruncatedInputError(self._state.matched, self._state.decoded)


def iter_chars(chunks: Iterable[str]) -> Iterator[str]:
    for chunk in chunks:
        yield from chunk


def decode(
    chars: Iterable[str],
    scheme: "str | Scheme | None" = None,
    strict: bool = False,
) -> Iterator[int]:
    """Lazily decode bytes from an iterable of characters or text chunks.

    Iteration stops at end of input.  A trailing partial word is dropped
    silently unless ``strict`` is set, in which case
    :class:`TruncatedInputError` is raised.  Exceptions from ``chars`` pass
    through untouched.
    """
    decoder = Decoder(scheme)
    for char in iter_chars(chars):
        byte = decoder.feed(char)
        if byte is not None:
            yield byte
    decoder.finish(strict)


__all__ = ["Decoder", "DecoderState", "ListSelector", "decode", "iter_chars"]
