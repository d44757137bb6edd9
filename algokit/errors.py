"""Exceptions raised by the data structures in this package."""


class StructureError(Exception):
    """Base class for all data-structure errors."""

    default_message = "Basic exception"

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class RangeError(StructureError, ValueError):
    """A size or range argument is not acceptable."""

    default_message = "RangeError"


class OutOfMemory(StructureError, MemoryError):
    """Storage for a structure could not be obtained."""

    default_message = "OutOfMemory"


class IndexOutOfBounds(StructureError, IndexError):
    """An index lies outside the valid positions."""

    default_message = "IndexOutOfBounds"


class NoSuchElement(StructureError, LookupError):
    """A requested element does not exist."""

    default_message = "NoSuchElement"


class IllegalAction(StructureError):
    """An operation is not allowed in the current state."""

    default_message = "IllegalAction"


class Overflow(StructureError, OverflowError):
    """A structure has no room left for another element."""

    default_message = "Overflow"