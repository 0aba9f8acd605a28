"""Provide the bitset capability and the primitive word types."""
import struct

from bitsetpy.bitvector import context


class Bitset(object):
    """Represent fixed-width binary values.

    A bitset is a value of a fixed bit-width, known at the class level,
    whose bits are numbered from 0 (least significant) to ``width() - 1``.
    Bitsets support the bitwise Boolean algebra (AND, NAND, OR, XOR, NOR
    and NOT), logical shifts and single-bit access.

    Every operation comes in two forms that always agree bit-for-bit:

    - a pure form (``and_``, ``nand``, ``or_``, ``xor``, ``nor``, ``not_``,
      ``shift_left``, ``shift_right``) returning a new bitset,
    - an in-place form (``iand``, ``inand``, ``ior``, ``ixor``, ``inor``,
      ``inot``, ``ishift_left``, ``ishift_right``) mutating the receiver.

    Bitsets support many operations with the standard operator symbols
    (``~``, ``&``, ``|``, ``^``, ``<<``, ``>>`` and their augmented
    assignments). Binary Boolean operations provide *Automatic Constant
    Conversion*: a plain `int` operand is converted to the type of
    the receiver.

        >>> from bitsetpy.bitvector.core import U8
        >>> U8(0b1100) & U8(0b1010)
        U8(0x08)
        >>> U8(0b1100).nor(0b1010)
        U8(0xf1)
        >>> x = U8(1)
        >>> x <<= 7
        >>> x
        U8(0x80)
        >>> x << 8
        U8(0x00)

    This class is not meant to be instantiated but to provide a base
    class for the different types of bitsets.

    .. Implementation details:

        Subclasses must implement the following methods:

        - the constructors ones(), zeroes() and from_int()
        - width() and the val property
        - copy(), get() and set()
        - the in-place operations; the pure ones are derived from them

    """

    __slots__ = ()

    # Constructors

    @classmethod
    def ones(cls):
        """Return the bitset with every bit set."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def zeroes(cls):
        """Return the bitset with every bit cleared."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def from_int(cls, val):
        """Return the bitset representing the given integer."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def width(cls):
        """The bit-width of the bitset type."""
        raise NotImplementedError("subclasses need to override this method")

    @property
    def val(self):
        """The non-negative integer represented by the bits."""
        raise NotImplementedError("subclasses need to override this method")

    def copy(self):
        """Return an independent copy of the bitset."""
        raise NotImplementedError("subclasses need to override this method")

    # Getter + Setter

    def get(self, index):
        """Return the bit at position *index* as a bool."""
        raise NotImplementedError("subclasses need to override this method")

    def set(self, index, flag=True):
        """Set the bit at position *index* to *flag*."""
        raise NotImplementedError("subclasses need to override this method")

    # In-place operations

    def iand(self, other):
        raise NotImplementedError("subclasses need to override this method")

    def inand(self, other):
        raise NotImplementedError("subclasses need to override this method")

    def ior(self, other):
        raise NotImplementedError("subclasses need to override this method")

    def ixor(self, other):
        raise NotImplementedError("subclasses need to override this method")

    def inor(self, other):
        raise NotImplementedError("subclasses need to override this method")

    def inot(self):
        raise NotImplementedError("subclasses need to override this method")

    def ishift_left(self, amount):
        raise NotImplementedError("subclasses need to override this method")

    def ishift_right(self, amount):
        raise NotImplementedError("subclasses need to override this method")

    # Immutable operations

    def and_(self, other):
        """Return the bitwise AND of the operands."""
        result = self.copy()
        result.iand(other)
        return result

    def nand(self, other):
        """Return the negated bitwise AND of the operands."""
        result = self.copy()
        result.inand(other)
        return result

    def or_(self, other):
        """Return the bitwise OR of the operands."""
        result = self.copy()
        result.ior(other)
        return result

    def xor(self, other):
        """Return the bitwise XOR of the operands."""
        result = self.copy()
        result.ixor(other)
        return result

    def nor(self, other):
        """Return the negated bitwise OR of the operands."""
        result = self.copy()
        result.inor(other)
        return result

    def not_(self):
        """Return the bitwise negation."""
        result = self.copy()
        result.inot()
        return result

    def shift_left(self, amount):
        """Return the logical left shift, zero if *amount* >= width."""
        result = self.copy()
        result.ishift_left(amount)
        return result

    def shift_right(self, amount):
        """Return the logical right shift, zero if *amount* >= width."""
        result = self.copy()
        result.ishift_right(amount)
        return result

    def count_ones(self):
        """Return the number of bits set."""
        return bin(self.val).count("1")

    # Validation

    def _parse_operand(self, other):
        # Automatic Constant Conversion
        if not context.Validation.current_context:
            return other
        if isinstance(other, int):
            return type(self).from_int(other)
        if type(other) is not type(self):
            msg = "expected {} operand, got {}"
            raise TypeError(msg.format(type(self).__name__, type(other).__name__))
        return other

    def _is_operand(self, other):
        return isinstance(other, (int, type(self)))

    def _check_index(self, index):
        if context.Validation.current_context:
            if not isinstance(index, int):
                raise TypeError("invalid index")
            if index < 0 or index >= self.width():
                raise IndexError("index out of range")

    @staticmethod
    def _check_amount(amount):
        if context.Validation.current_context:
            if not isinstance(amount, int):
                raise TypeError("invalid shift amount")
            if amount < 0:
                raise ValueError("negative shift count")

    # Bitwise operators

    def __invert__(self):
        """Override ~ operator."""
        return self.not_()

    def __and__(self, other):
        """Override & operator."""
        if not self._is_operand(other):
            return NotImplemented
        return self.and_(other)

    __rand__ = __and__

    def __or__(self, other):
        """Override | operator."""
        if not self._is_operand(other):
            return NotImplemented
        return self.or_(other)

    __ror__ = __or__

    def __xor__(self, other):
        """Override ^ operator."""
        if not self._is_operand(other):
            return NotImplemented
        return self.xor(other)

    __rxor__ = __xor__

    def __iand__(self, other):
        """Override &= operator."""
        if not self._is_operand(other):
            return NotImplemented
        self.iand(other)
        return self

    def __ior__(self, other):
        """Override |= operator."""
        if not self._is_operand(other):
            return NotImplemented
        self.ior(other)
        return self

    def __ixor__(self, other):
        """Override ^= operator."""
        if not self._is_operand(other):
            return NotImplemented
        self.ixor(other)
        return self

    # Shifts

    def __lshift__(self, amount):
        """Override << operator."""
        if not isinstance(amount, int):
            return NotImplemented
        return self.shift_left(amount)

    def __rshift__(self, amount):
        """Override >> operator."""
        if not isinstance(amount, int):
            return NotImplemented
        return self.shift_right(amount)

    def __ilshift__(self, amount):
        """Override <<= operator."""
        if not isinstance(amount, int):
            return NotImplemented
        self.ishift_left(amount)
        return self

    def __irshift__(self, amount):
        """Override >>= operator."""
        if not isinstance(amount, int):
            return NotImplemented
        self.ishift_right(amount)
        return self

    # Bit access

    def __getitem__(self, index):
        """Override [] operator."""
        return self.get(index)

    def __setitem__(self, index, flag):
        """Override []= operator."""
        self.set(index, flag)

    def __iter__(self):
        """Iterate over the bits, least significant first."""
        for i in range(self.width()):
            yield self.get(i)

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, int):
            return int(self) == other
        elif type(other) is type(self):
            return self.val == other.val
        else:
            return False

    # mutable values are not hashable
    __hash__ = None

    def __int__(self):
        return self.val

    def __str__(self):
        """Return the non-verbose string representation."""
        from bitsetpy.bitvector import printing
        return (printing.BitsetStrPrinter()).doprint(self)

    def __repr__(self):
        """Return the verbose string representation."""
        from bitsetpy.bitvector import printing
        return (printing.BitsetReprPrinter()).doprint(self)

    def bin(self):
        """Return the binary representation.

            >>> from bitsetpy.bitvector.core import U8
            >>> print(U8(3).bin())
            0b00000011

        """
        width = self.width() + 2  # 2 due to '0b'
        return format(self.val, r'0=#{}b'.format(width))

    def hex(self):
        """Return the hexadecimal representation.

            >>> from bitsetpy.bitvector.core import U16
            >>> print(U16(3).hex())
            0x0003

        """
        assert self.width() % 4 == 0
        width = (self.width() // 4) + 2
        return format(self.val, '0=#{}x'.format(width))


class Word(Bitset):
    """Represent a single machine word.

    The word is stored as its unsigned bit pattern. Signed words accept
    negative integers (two's complement) and return the signed value
    with `int`, but their shifts are logical like the unsigned ones.

    Args:
        val: the integer value.

    ::

        >>> from bitsetpy.bitvector.core import U32, I8
        >>> U32(0x998)
        U32(0x00000998)
        >>> I8(-1)
        I8(0xff)
        >>> int(I8(-1)), I8(-1).val
        (-1, 255)
        >>> I8(-128) >> 7
        I8(0x01)

    This class is not meant to be instantiated; use one of the fixed-width
    subclasses.
    """

    __slots__ = ["_val"]

    _width = None

    signed = False

    def __init__(self, val=0):
        cls = type(self)
        if cls._width is None:
            raise TypeError("{} has no fixed width".format(cls.__name__))
        assert isinstance(val, int)
        if cls.signed:
            assert -2 ** (cls._width - 1) <= val < 2 ** cls._width
        else:
            assert 0 <= val < 2 ** cls._width
        self._val = val & cls._mask()

    @classmethod
    def _new(cls, val):
        obj = object.__new__(cls)
        obj._val = val
        return obj

    @classmethod
    def _mask(cls):
        return (1 << cls._width) - 1

    @classmethod
    def ones(cls):
        return cls._new(cls._mask())

    @classmethod
    def zeroes(cls):
        return cls._new(0)

    @classmethod
    def from_int(cls, val):
        return cls(val)

    @classmethod
    def width(cls):
        if cls._width is None:
            raise TypeError("{} has no fixed width".format(cls.__name__))
        return cls._width

    @property
    def val(self):
        return self._val

    def __int__(self):
        if self.signed and self._val >> (self._width - 1):
            return self._val - (1 << self._width)
        return self._val

    def copy(self):
        return self._new(self._val)

    def get(self, index):
        self._check_index(index)
        return bool((self._val >> index) & 1)

    def set(self, index, flag=True):
        self._check_index(index)
        if flag:
            self._val = (self._val | (1 << index)) & self._mask()
        else:
            self._val &= ~(1 << index)

    def iand(self, other):
        other = self._parse_operand(other)
        self._val &= other.val

    def inand(self, other):
        other = self._parse_operand(other)
        self._val = ~(self._val & other.val) & self._mask()

    def ior(self, other):
        other = self._parse_operand(other)
        self._val |= other.val

    def ixor(self, other):
        other = self._parse_operand(other)
        self._val ^= other.val

    def inor(self, other):
        other = self._parse_operand(other)
        self._val = ~(self._val | other.val) & self._mask()

    def inot(self):
        self._val ^= self._mask()

    def ishift_left(self, amount):
        self._check_amount(amount)
        if amount >= self._width:
            self._val = 0
        else:
            self._val = (self._val << amount) & self._mask()

    def ishift_right(self, amount):
        self._check_amount(amount)
        if amount >= self._width:
            self._val = 0
        else:
            self._val >>= amount


class U8(Word):
    """8-bit unsigned word."""
    __slots__ = ()
    _width = 8


class U16(Word):
    """16-bit unsigned word."""
    __slots__ = ()
    _width = 16


class U32(Word):
    """32-bit unsigned word."""
    __slots__ = ()
    _width = 32


class U64(Word):
    """64-bit unsigned word."""
    __slots__ = ()
    _width = 64


class U128(Word):
    """128-bit unsigned word."""
    __slots__ = ()
    _width = 128


class Usize(Word):
    """Unsigned word with the pointer width of the running interpreter."""
    __slots__ = ()
    _width = struct.calcsize("P") * 8


class I8(Word):
    """8-bit signed word."""
    __slots__ = ()
    _width = 8
    signed = True


class I16(Word):
    """16-bit signed word."""
    __slots__ = ()
    _width = 16
    signed = True


class I32(Word):
    """32-bit signed word."""
    __slots__ = ()
    _width = 32
    signed = True


class I64(Word):
    """64-bit signed word."""
    __slots__ = ()
    _width = 64
    signed = True


class I128(Word):
    """128-bit signed word."""
    __slots__ = ()
    _width = 128
    signed = True


word_types = (U8, U16, U32, U64, U128, Usize, I8, I16, I32, I64, I128)
"""The primitive word types."""
