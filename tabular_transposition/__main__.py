"""
Command-line entry point.

    python -m tabular_transposition -e -k "3 1 2" -t "hello"
    python -m tabular_transposition -d -k 312 -t EOLXHL --show-grid
    python -m tabular_transposition            # interactive session
"""

import argparse
import logging
import sys

from . import __version__
from .cipher import TranspositionCipher
from .session import InteractiveSession

logger = logging.getLogger(__name__)


def filler_letter(value: str) -> str:
    letter = value.upper()
    if len(letter) != 1 or letter not in TranspositionCipher.ALPHA:
        raise argparse.ArgumentTypeError("filler must be a single letter A-Z")
    return letter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabular-transposition",
        description="Columnar transposition cipher with a numeric key.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encrypt", action="store_true", help="Encrypt --text")
    mode.add_argument("-d", "--decrypt", action="store_true", help="Decrypt --text")

    parser.add_argument("-k", "--key", help='Numeric key, e.g. "3 1 2" or 312')
    parser.add_argument("-t", "--text", help="Plaintext or ciphertext (letters only)")
    parser.add_argument("--filler", type=filler_letter, default=TranspositionCipher.FILLER,
                        metavar="LETTER",
                        help="Padding letter for the last grid row (default: X)")
    parser.add_argument("--no-strip", action="store_true",
                        help="Keep trailing filler letters after decryption")
    parser.add_argument("--show-grid", action="store_true",
                        help="Print the working grid before the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=' %(message)s',
    )

    if not (args.encrypt or args.decrypt):
        InteractiveSession(filler=args.filler).run()
        return 0

    if args.key is None or args.text is None:
        parser.error("--encrypt/--decrypt require both --key and --text")

    try:
        cipher = TranspositionCipher(args.key, filler=args.filler)
        if args.encrypt:
            text, rows = cipher.encrypt(args.text)
        else:
            text, rows = cipher.decrypt(args.text, strip=not args.no_strip)
    except ValueError as e:
        # every TranspositionError is a ValueError
        logger.debug(f"{type(e).__name__}: {e}")
        sys.exit(f"Error: {e}")

    logger.debug(f"{'Encrypted' if args.encrypt else 'Decrypted'} with {cipher!r}")
    if args.show_grid:
        for row in rows:
            print(row)
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
