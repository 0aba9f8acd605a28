"""Manipulate fixed-width bit-vectors.

This module implements the bitwise Boolean algebra (AND, NAND, OR, XOR,
NOR and NOT), logical shifts and single-bit access uniformly over the
machine words (`core`) and over bit-vectors made of fixed-size arrays
of words (`bitvec`). Every operation is provided both as a pure function
returning a new value and as an in-place update of the receiver.

"""
