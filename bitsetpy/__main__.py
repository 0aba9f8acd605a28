"""Top-level script environment.

Print the left and right shifts of an all-ones bit-vector::

    python -m bitsetpy --words 2 --word-type U64 --limit 130

"""
import argparse
import logging

from bitsetpy.bitvector import core
from bitsetpy.bitvector.bitvec import Bitvec

logger = logging.getLogger(__name__)

list_word_types = {t.__name__: t for t in core.word_types}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bitsetpy",
        description="Print the shifts of an all-ones bit-vector.")
    parser.add_argument("-n", "--words", type=int, default=2,
                        help="number of words of the bit-vector")
    parser.add_argument("-w", "--word-type", choices=list(list_word_types.keys()),
                        default="U64")
    parser.add_argument("-l", "--limit", type=int, default=130,
                        help="shift amounts go from 0 to LIMIT - 1")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s")

    if args.words < 1:
        build_parser().error("--words must be positive")

    bitvec_type = Bitvec.of(args.words, list_word_types[args.word_type])
    logger.info("shifting %s up to %d", bitvec_type.__name__, args.limit)

    bitv = bitvec_type.ones()
    print(bitv)
    print()
    for i in range(args.limit):
        print("{:>3}: {}".format(i, bitv.shift_left(i)))
    for i in range(args.limit):
        print("{:>3}: {}".format(i, bitv.shift_right(i)))


if __name__ == "__main__":
    main()
