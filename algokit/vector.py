"""A fixed-size, bounds-checked, resizable vector."""

from .errors import IndexOutOfBounds, RangeError


class Vector:
    """A sequence with an explicit length that is changed only by resize."""

    def __init__(self, size=1, initial=None):
        if not isinstance(size, int) or size <= 0:
            raise RangeError()
        self._data = [initial] * size

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def resize(self, new_size):
        """Change the length, keeping existing items; new slots hold None."""
        if not isinstance(new_size, int) or new_size <= 0:
            raise RangeError()
        current = len(self._data)
        if new_size < current:
            del self._data[new_size:]
        elif new_size > current:
            self._data.extend([None] * (new_size - current))
        return len(self._data)

    def __str__(self):
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self):
        return f"Vector({self._data!r})"

    def _check(self, index):
        if not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        if index < 0 or index >= len(self._data):
            raise IndexOutOfBounds()

    def __getitem__(self, index):
        self._check(index)
        return self._data[index]

    def __setitem__(self, index, value):
        self._check(index)
        self._data[index] = value

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def assign(self, other):
        """Make this vector an identical copy of other."""
        if other is not self:
            self._data = list(other._data)
        return self

    def copy(self):
        """Return an independent copy of this vector."""
        duplicate = Vector()
        duplicate._data = list(self._data)
        return duplicate

    __copy__ = copy