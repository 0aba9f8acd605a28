"""Provide context managers to modify the default behaviour."""
import contextlib
import logging

logger = logging.getLogger(__name__)


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context
        logger.debug("%s: %r -> %r", type(self).__name__,
                     self.previous_context, self.new_context)

    def __exit__(self, *args):
        type(self).current_context = self.previous_context
        logger.debug("%s restored to %r", type(self).__name__,
                     self.previous_context)


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not operands and bit indices are validated.
    By default, validation is enabled: out-of-range indices raise
    `IndexError` and operands of a different type raise `TypeError`.

    Note that when it is disabled, Automatic Constant Conversion is no longer
    available (see `Bitset`) and accessing a bit out of range is an
    unchecked precondition.

        >>> from bitsetpy.bitvector.core import U8
        >>> from bitsetpy.bitvector.context import Validation
        >>> U8(0b1100) & 0b1010
        U8(0x08)
        >>> U8(1).get(8)
        Traceback (most recent call last):
         ...
        IndexError: index out of range
        >>> with Validation(False):
        ...     U8(0b1100) & 0b1010
        Traceback (most recent call last):
         ...
        AttributeError: 'int' object has no attribute 'val'

    Note:
        Disabling `Validation` speeds up long sequences of operations.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
