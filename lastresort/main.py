"""Command line entry point.

Encodes raw bytes to words (the default) or decodes words back to bytes::

    lastresort -i secret.key -o secret.txt
    lastresort -d -i secret.txt -o secret.key
    lastresort -e eff < data.bin
    lastresort -d eff < words.txt
"""

from __future__ import annotations

import argparse
import io
import sys
from contextlib import ExitStack

from . import config
from .api_files import decode_stream, encode_stream
from .errors import LastResortError, UnknownSchemeError
from .tables import SCHEMES, get_scheme
from .version import __version__

_SILENT_MODE = False
_DEFAULT_DECODER = object()


def _status(message: str) -> None:
    if not _SILENT_MODE:
        print(message, file=sys.stderr)


def _is_std(path: str | None) -> bool:
    return path is None or path == "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lastresort",
        description="Transcode binary data to and from word lists (PGP Word List, EFF Short Wordlist 2.0)",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "-d", "--decode",
        nargs="?",
        const=_DEFAULT_DECODER,
        default=None,
        metavar="DECODER",
        help=f"Decode data (default action is to encode). Decoder: {', '.join(SCHEMES)}; "
             f"defaults to {config.DEFAULT_SCHEME} or LASTRESORT_SCHEME"
    )
    action.add_argument(
        "-e", "--encoder",
        default=None,
        metavar="ENCODER",
        help=f"Encoder to use: {', '.join(SCHEMES)}"
    )
    parser.add_argument(
        "-i", "--input",
        metavar="INPUT_FILE",
        help="Read input from INPUT_FILE. Default is stdin; passing - also represents stdin"
    )
    parser.add_argument(
        "-o", "--output",
        metavar="OUTPUT_FILE",
        help="Write output to OUTPUT_FILE. Default is stdout; passing - also represents stdout"
    )
    parser.add_argument(
        "--line-words",
        type=int,
        default=None,
        metavar="N",
        help="Start a new line after every N encoded words (LASTRESORT_LINE_WORDS)"
    )
    parser.add_argument(
        "--allow-truncated",
        action="store_true",
        help="Do not fail when decoding input that ends inside a word"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress status messages"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log decoder and table activity to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _decode(args, scheme, stack: ExitStack) -> int:
    if _is_std(args.input):
        source = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
        stack.callback(source.detach)
    else:
        source = stack.enter_context(open(args.input, "r", encoding="utf-8", newline=""))
    if _is_std(args.output):
        dest = sys.stdout.buffer
    else:
        dest = stack.enter_context(open(args.output, "wb"))
    result = decode_stream(source, dest, scheme, strict=not args.allow_truncated)
    dest.flush()
    if result.truncated:
        _status("warning: input ended inside a word; trailing characters ignored")
    if not _is_std(args.output):
        _status(f"{args.output}: {result.produced} bytes")
    return 0


def _encode(args, scheme, stack: ExitStack) -> int:
    if _is_std(args.input):
        source = sys.stdin.buffer
    else:
        source = stack.enter_context(open(args.input, "rb"))
    if _is_std(args.output):
        dest = sys.stdout
    else:
        dest = stack.enter_context(open(args.output, "w", encoding="utf-8", newline="\n"))
    line_words = args.line_words if args.line_words is not None else config.line_words()
    if line_words is not None and line_words <= 0:
        line_words = None
    result = encode_stream(source, dest, scheme, line_words=line_words)
    dest.flush()
    if not _is_std(args.output):
        _status(f"{args.output}: {result.produced} words")
    return 0


def cli(argv=None) -> int:
    global _SILENT_MODE

    parser = build_parser()
    args = parser.parse_args(argv)
    _SILENT_MODE = args.quiet
    config.setup_logging(args.verbose)

    decoding = args.decode is not None
    if decoding:
        name = None if args.decode is _DEFAULT_DECODER else args.decode
    else:
        name = args.encoder
    try:
        scheme = get_scheme(name)
    except UnknownSchemeError as exc:
        if name is not None:
            parser.error(str(exc))
        print(f"lastresort: LASTRESORT_SCHEME: {exc}", file=sys.stderr)
        return 1
    except (LastResortError, OSError) as exc:
        print(f"lastresort: {exc}", file=sys.stderr)
        return 1

    try:
        with ExitStack() as stack:
            if decoding:
                return _decode(args, scheme, stack)
            return _encode(args, scheme, stack)
    except (LastResortError, OSError, UnicodeDecodeError) as exc:
        print(f"lastresort: {exc}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
