#!/usr/bin/env python3
"""
Fixed-size key grid for a 33-key keyboard.

Grid positions:
     LEFT HAND    |     RIGHT HAND
   0  1  2  3  4  |  5  6  7  8  9 10
  11 12 13 14 15  | 16 17 18 19 20 21
  22 23 24 25 26  | 27 28 29 30 31

              32 (thumb key)
"""

import operator
from typing import Generic, Iterable, Iterator, List, TypeVar

NUM_KEYS = 33

T = TypeVar('T')


def check_position(pos: int) -> int:
    """
    Validate a grid position.

    Args:
        pos: Grid position to check

    Returns:
        The position as a plain int

    Raises:
        TypeError: If pos is not an integer
        IndexError: If pos is outside 0..32
    """
    if isinstance(pos, bool):
        raise TypeError("Grid position must be an int, got bool")
    try:
        pos = operator.index(pos)
    except TypeError:
        raise TypeError(f"Grid position must be an int, got {type(pos).__name__}") from None
    if not 0 <= pos < NUM_KEYS:
        raise IndexError(f"Grid position {pos} out of range (0-{NUM_KEYS - 1})")
    return pos


class KeyGrid(Generic[T]):
    """
    Ordered container holding exactly one value per grid position.

    Values can be replaced by position but never inserted or removed.
    A frozen grid rejects all writes.
    """

    __slots__ = ('_values', '_frozen')

    def __init__(self, values: Iterable[T], frozen: bool = False):
        """
        Args:
            values: Exactly 33 values, in position order
            frozen: If True, the grid is read-only

        Raises:
            ValueError: If the number of values is not 33
        """
        items = list(values)
        if len(items) != NUM_KEYS:
            raise ValueError(f"KeyGrid needs exactly {NUM_KEYS} values, got {len(items)}")
        self._values: List[T] = items
        self._frozen = frozen

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __getitem__(self, pos: int) -> T:
        return self._values[check_position(pos)]

    def __setitem__(self, pos: int, value: T) -> None:
        pos = check_position(pos)
        if self._frozen:
            raise TypeError("KeyGrid is read-only")
        self._values[pos] = value

    def __len__(self) -> int:
        return NUM_KEYS

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyGrid):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        flag = ', frozen=True' if self._frozen else ''
        return f"KeyGrid({self._values!r}{flag})"

    def swap(self, i: int, j: int) -> None:
        """Exchange the values at positions i and j."""
        i = check_position(i)
        j = check_position(j)
        if self._frozen:
            raise TypeError("KeyGrid is read-only")
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def copy(self) -> 'KeyGrid[T]':
        """Return an independent, writable copy."""
        return KeyGrid(self._values)

    def frozen(self) -> 'KeyGrid[T]':
        """Return a read-only copy."""
        return KeyGrid(self._values, frozen=True)

    def to_list(self) -> List[T]:
        return list(self._values)
