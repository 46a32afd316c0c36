#!/usr/bin/env python3
"""z32 — z-base32 encoding from the command line."""

import argparse
import logging
import sys

from z32 import zbase32

logger = logging.getLogger(__name__)


def _read_input(parser, args) -> bytes:
    if args.data in (None, "-"):
        raw = sys.stdin.buffer.read()
        logger.debug("read %d bytes from stdin", len(raw))
        if not args.hex:
            return raw
        text = raw.decode("ascii", errors="replace")
    else:
        if not args.hex:
            return args.data.encode("utf-8")
        text = args.data
    try:
        return bytes.fromhex("".join(text.split()))
    except ValueError as e:
        parser.error(f"invalid hex input: {e}")


def cmd_encode(parser, args):
    data = _read_input(parser, args)
    if args.bits is None:
        logger.debug("encoding %d full bytes", len(data))
        print(zbase32.encode_full_bytes(data))
    else:
        logger.debug("encoding %d bits of %d bytes", args.bits, len(data))
        print(zbase32.encode(data, args.bits))


def cmd_alphabet(parser, args):
    print(zbase32.ALPHABET)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="z32", description="z-base32 encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command")

    # encode
    p = sub.add_parser("encode", help="Encode bytes as z-base32")
    p.add_argument("data", nargs="?", default="-", help="Text to encode (or - for stdin)")
    p.add_argument("--hex", action="store_true", help="Input is a hex string")
    p.add_argument("--bits", type=int, help="Encode only the first N bits")
    p.set_defaults(func=cmd_encode)

    # alphabet
    p = sub.add_parser("alphabet", help="Print the z-base32 alphabet")
    p.set_defaults(func=cmd_alphabet)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(parser, args)
    except zbase32.InsufficientInputError as e:
        parser.exit(2, f"{parser.prog}: error: {e}\n")


if __name__ == "__main__":
    main()
