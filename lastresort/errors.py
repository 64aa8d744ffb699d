"""Exception taxonomy shared by the encoder, decoder and table loaders."""


class LastResortError(Exception):
    """Base class for every error raised by lastresort itself."""


class WordlistError(LastResortError, ValueError):
    """A word list cannot serve as a 256-entry byte table."""


class UnknownSchemeError(LastResortError, ValueError):
    def __init__(self, name: str, known) -> None:
        super().__init__(f"unknown scheme {name!r} (expected one of: {', '.join(known)})")
        self.name = name
        self.known = tuple(known)


class InvalidDataError(LastResortError, ValueError):
    """The character stream stopped matching every candidate word."""

    def __init__(self, char: str, offset: int, decoded: int, matched: str = "") -> None:
        where = f" after {matched!r}" if matched else ""
        super().__init__(
            f"invalid data at offset {offset}: {char!r}{where} matches no word "
            f"({decoded} bytes decoded)"
        )
        self.char = char
        self.offset = offset
        self.decoded = decoded
        self.matched = matched


class TruncatedInputError(LastResortError, ValueError):
    """Input ended while a word was only partially matched."""

    def __init__(self, matched: str, decoded: int) -> None:
        super().__init__(
            f"input ended inside a word: {matched!r} is incomplete or ambiguous "
            f"({decoded} bytes decoded)"
        )
        self.matched = matched
        self.decoded = decoded


__all__ = [
    "InvalidDataError",
    "LastResortError",
    "TruncatedInputError",
    "UnknownSchemeError",
    "WordlistError",
]
