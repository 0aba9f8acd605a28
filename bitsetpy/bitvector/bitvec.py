"""Provide bit-vectors composed of fixed-size arrays of words."""
import functools
import logging

from bitsetpy.bitvector import core

logger = logging.getLogger(__name__)


class Bitvec(core.Bitset):
    """Represent a bit-vector made of a fixed number of words.

    A bit-vector type is determined by its number of words ``length`` and
    its word type ``word_type`` (any `Bitset`, including another bit-vector
    type). Types are obtained with `Bitvec.of`; the same pair of arguments
    always returns the same type.

    The words are *little-word-endian*: index 0 holds the least significant
    word, so that the bit ``i`` of the vector is the bit ``i % W`` of the
    word ``i // W``, where ``W`` is the width of the word type. The vector
    behaves as a single value of ``length * W`` bits; in particular shifts
    move bits across word boundaries and saturate to zero when the amount
    is greater or equal than the total width.

    Args:
        words: a sequence of exactly ``length`` words (or plain integers),
            least significant first. The words are copied.

    ::

        >>> from bitsetpy.bitvector.core import U8
        >>> from bitsetpy.bitvector.bitvec import Bitvec
        >>> Bitvec2xU8 = Bitvec.of(2, U8)
        >>> v = Bitvec2xU8([0b10000001, 0b00000001])
        >>> print(v)
        bitvector[ 00000001 10000001 ]
        >>> print(v << 1)
        bitvector[ 00000011 00000010 ]
        >>> print(v >> 7)
        bitvector[ 00000000 00000011 ]
        >>> v[8], int(v), Bitvec2xU8.width()
        (True, 385, 16)
        >>> v.words
        (U8(0x81), U8(0x01))

    """

    __slots__ = ["_words"]

    length = None

    word_type = None

    def __init__(self, words):
        cls = type(self)
        if cls.length is None:
            raise TypeError("use Bitvec.of(length, word_type) to get a bit-vector type")

        newwords = []
        for w in words:
            if isinstance(w, int):
                w = cls.word_type.from_int(w)
            assert isinstance(w, cls.word_type)
            newwords.append(w.copy())

        assert len(newwords) == cls.length
        self._words = newwords

    @staticmethod
    def of(length, word_type):
        """Return the bit-vector type with *length* words of *word_type*.

            >>> from bitsetpy.bitvector.core import U32
            >>> from bitsetpy.bitvector.bitvec import Bitvec
            >>> Bitvec.of(2, U32)
            <class 'bitsetpy.bitvector.bitvec.Bitvec2xU32'>
            >>> Bitvec.of(2, U32) is Bitvec.of(2, U32)
            True

        """
        return _bitvec_type(length, word_type)

    @classmethod
    def _new(cls, words):
        obj = object.__new__(cls)
        obj._words = words
        return obj

    @classmethod
    def ones(cls):
        return cls._new([cls.word_type.ones() for _ in range(cls.length)])

    @classmethod
    def zeroes(cls):
        return cls._new([cls.word_type.zeroes() for _ in range(cls.length)])

    @classmethod
    def from_int(cls, val):
        """Return the bit-vector representing the non-negative integer *val*.

            >>> from bitsetpy.bitvector.core import U32
            >>> from bitsetpy.bitvector.bitvec import Bitvec
            >>> Bitvec.of(2, U32).from_int(0x00000998FFFFFB97)
            Bitvec2xU32([U32(0xfffffb97), U32(0x00000998)])

        """
        assert isinstance(val, int) and 0 <= val < 2 ** cls.width()
        w = cls.word_type.width()
        mask = (1 << w) - 1
        return cls._new([cls.word_type.from_int((val >> (i * w)) & mask)
                         for i in range(cls.length)])

    @classmethod
    def width(cls):
        if cls.length is None:
            raise TypeError("{} has no fixed width".format(cls.__name__))
        return cls.length * cls.word_type.width()

    @property
    def val(self):
        w = self.word_type.width()
        return sum(word.val << (i * w) for i, word in enumerate(self._words))

    @property
    def words(self):
        """A tuple with a copy of the words, least significant first."""
        return tuple(word.copy() for word in self._words)

    def copy(self):
        return self._new([word.copy() for word in self._words])

    # Getter + Setter

    def get(self, index):
        self._check_index(index)
        q, r = divmod(index, self.word_type.width())
        return self._words[q].get(r)

    def set(self, index, flag=True):
        self._check_index(index)
        q, r = divmod(index, self.word_type.width())
        self._words[q].set(r, flag)

    # In-place operations

    def iand(self, other):
        other = self._parse_operand(other)
        for word, other_word in zip(self._words, other._words):
            word.iand(other_word)

    def inand(self, other):
        other = self._parse_operand(other)
        for word, other_word in zip(self._words, other._words):
            word.inand(other_word)

    def ior(self, other):
        other = self._parse_operand(other)
        for word, other_word in zip(self._words, other._words):
            word.ior(other_word)

    def ixor(self, other):
        other = self._parse_operand(other)
        for word, other_word in zip(self._words, other._words):
            word.ixor(other_word)

    def inor(self, other):
        other = self._parse_operand(other)
        for word, other_word in zip(self._words, other._words):
            word.inor(other_word)

    def inot(self):
        for word in self._words:
            word.inot()

    def ishift_left(self, amount):
        self._check_amount(amount)
        words = self._words
        w = self.word_type.width()
        q, r = divmod(amount, w)

        # words[idx - q - 1] is read before being overwritten
        for idx in reversed(range(self.length)):
            if q > idx:
                words[idx] = self.word_type.zeroes()
            elif idx - q == 0:
                words[idx] = words[idx - q].shift_left(r)
            else:
                words[idx] = (words[idx - q].shift_left(r) |
                              words[idx - q - 1].shift_right(w - r))

    def ishift_right(self, amount):
        self._check_amount(amount)
        words = self._words
        n = self.length
        w = self.word_type.width()
        q, r = divmod(amount, w)

        # words[idx + q + 1] is read before being overwritten
        for idx in range(n):
            if idx + q >= n:
                words[idx] = self.word_type.zeroes()
            elif idx + q == n - 1:
                words[idx] = words[idx + q].shift_right(r)
            else:
                words[idx] = (words[idx + q].shift_right(r) |
                              words[idx + q + 1].shift_left(w - r))


@functools.lru_cache(maxsize=None)
def _bitvec_type(length, word_type):
    assert isinstance(length, int) and 0 < length
    assert isinstance(word_type, type) and issubclass(word_type, core.Bitset)
    word_width = word_type.width()

    name = "Bitvec{}x{}".format(length, word_type.__name__)
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "length": length,
        "word_type": word_type,
    }
    new_type = type(name, (Bitvec,), namespace)
    logger.debug("created bit-vector type %s of %d bits", name, length * word_width)
    return new_type


Bitvec512 = Bitvec.of(8, core.U64)
"""The 512-bit vector made of 8 `U64` words."""
