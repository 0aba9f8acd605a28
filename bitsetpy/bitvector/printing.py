"""Manage the representation of bitsets."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


def _digits(word):
    """Return the zero-padded binary digits of a word, without prefix."""
    return format(word.val, "0{}b".format(word.width()))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BitsetStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Bitset`.

        >>> from bitsetpy.bitvector.core import U8, U32
        >>> from bitsetpy.bitvector.bitvec import Bitvec
        >>> print(U32(0x998))
        0x00000998
        >>> print(Bitvec.of(2, U8)([1, 2]))
        bitvector[ 00000010 00000001 ]

    """

    def _print_Word(self, bs):
        if bs.width() % 4 == 0:
            return bs.hex()
        else:
            return bs.bin()

    def _print_Bitvec(self, bs):
        # most significant word first; nested vectors are flattened
        words = " ".join(_digits(w) for w in reversed(bs.words))
        return "bitvector[ {} ]".format(words)


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BitsetReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `repr` method of `Bitset`.

        >>> from bitsetpy.bitvector.core import U8, I16
        >>> from bitsetpy.bitvector.bitvec import Bitvec
        >>> I16(-2)
        I16(0xfffe)
        >>> Bitvec.of(2, U8)([1, 2])
        Bitvec2xU8([U8(0x01), U8(0x02)])

    """

    def _print_Word(self, bs):
        return "{}({})".format(type(bs).__name__, BitsetStrPrinter().doprint(bs))

    def _print_Bitvec(self, bs):
        words = ", ".join(self._print(w) for w in bs.words)
        return "{}([{}])".format(type(bs).__name__, words)
