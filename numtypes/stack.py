"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 8


@dataclass
class MeteoData:
    """A weather reading taken at a location."""

    location: str
    temperature: float
    pressure: float


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the stack can hold."""
        return self._capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise OverflowError if the stack is full."""
        if self.full():
            raise OverflowError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def full(self) -> bool:
        """Return True when the stack holds ``capacity`` items."""
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> BoundedStack[T]:
        """Return a stack with the same capacity and items."""
        other: BoundedStack[T] = BoundedStack(self._capacity)
        other._items = list(self._items)
        return other

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={self._items!r})"


def main(argv: list[str] | None = None) -> int:
    """Show a stack of integers and a stack of weather readings."""
    del argv
    out = sys.stdout

    out.write("--- Stack of integers ---\n")
    ints: BoundedStack[int] = BoundedStack()
    out.write(f"Is empty: {str(ints.empty()).lower()}\n")
    out.write("Pushing 10 and 20\n")
    ints.push(10)
    ints.push(20)
    out.write(f"{ints.pop()}\n")
    out.write(f"Is empty: {str(ints.empty()).lower()}\n")
    out.write(f"{ints.pop()}\n")
    out.write(f"Is empty: {str(ints.empty()).lower()}\n")

    out.write("--- Stack of meteo_data ---\n")
    readings: BoundedStack[MeteoData] = BoundedStack()
    out.write(f"Is empty: {str(readings.empty()).lower()}\n")
    readings.push(MeteoData("Torino", 25.1, 1013.0))
    readings.push(MeteoData("Milano", 23.1, 1015.0))
    out.write(f"Is empty: {str(readings.empty()).lower()}\n")
    try:
        md = readings.pop()
    except IndexError:
        out.write("Error: popped an empty stack\n")
        return 1
    out.write(f"{md.location}, {md.temperature:g}, {md.pressure:g}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())