"""A stack that reports its minimum in constant time."""


class MinStack:
    """Stack of integers that also tracks the smallest element held."""

    def __init__(self):
        self._items = []

    def push(self, val):
        """Push ``val`` onto the stack."""
        current_min = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current_min))

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty MinStack")
        return self._items.pop()[0]

    def top(self):
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty MinStack")
        return self._items[-1][0]

    def get_min(self):
        """Return the smallest value on the stack."""
        if not self._items:
            raise IndexError("minimum of empty MinStack")
        return self._items[-1][1]

    def __len__(self):
        return len(self._items)