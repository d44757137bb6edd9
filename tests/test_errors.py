import pytest

from algokit.errors import (
    IllegalAction,
    IndexOutOfBounds,
    NoSuchElement,
    OutOfMemory,
    Overflow,
    RangeError,
    StructureError,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (StructureError, "Basic exception"),
        (RangeError, "RangeError"),
        (OutOfMemory, "OutOfMemory"),
        (IndexOutOfBounds, "IndexOutOfBounds"),
        (NoSuchElement, "NoSuchElement"),
        (IllegalAction, "IllegalAction"),
        (Overflow, "Overflow"),
    ],
)
def test_default_messages(cls, message):
    error = cls()
    assert str(error) == message
    assert isinstance(error, StructureError)


def test_custom_message_replaces_default():
    error = RangeError("size must be positive")
    assert str(error) == "size must be positive"


def test_builtin_bases_catch_errors():
    index_error = IndexOutOfBounds()
    assert isinstance(index_error, IndexError)
    assert str(index_error) == "IndexOutOfBounds"

    range_error = RangeError()
    assert isinstance(range_error, ValueError)
    assert str(range_error) == "RangeError"

    lookup_error = NoSuchElement()
    assert isinstance(lookup_error, LookupError)
    assert str(lookup_error) == "NoSuchElement"

    overflow_error = Overflow()
    assert isinstance(overflow_error, OverflowError)
    assert str(overflow_error) == "Overflow"