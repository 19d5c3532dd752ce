#!/usr/bin/env python3
"""
Layers, layouts and position maps.

A Layout pairs an unshifted (lower) and shifted (upper) Layer. Both layers are
always permuted together, so the two characters at a position always belong
to the same physical key.
"""

import logging
import random
from typing import Dict, Iterable, Optional, Tuple, Union

import numpy as np

from keygrid.geometry import LAYOUT_MASK, NUM_SWAPPABLE, shuffle_position
from keygrid.key_grid import KeyGrid, check_position

logger = logging.getLogger(__name__)

ASCII_LIMIT = 128
NO_POSITION = -1

LAYOUT_TEMPLATE = (
    "{} {} {} {} {} | {} {} {} {} {} {}\n"
    "{} {} {} {} {} | {} {} {} {} {} {}\n"
    "{} {} {} {} {} | {} {} {} {} {}\n"
    "        {}"
)

# Fallback random source when no rng is passed to Layout.shuffle()
_shuffle_rng = random.Random()


def seed_shuffle_rng(seed: Optional[int] = None) -> None:
    """Reseed the fallback random source used by Layout.shuffle()."""
    _shuffle_rng.seed(seed)
    logger.debug(f"Shuffle rng seeded with {seed}")


def new_position_table() -> np.ndarray:
    """Create an empty 128-slot character -> position table."""
    return np.full(ASCII_LIMIT, NO_POSITION, dtype=np.int64)


class Layer:
    """One shift state's character at every grid position."""

    __slots__ = ('keys',)

    def __init__(self, keys: Union[KeyGrid, Iterable[str]]):
        if not isinstance(keys, KeyGrid):
            keys = KeyGrid(keys)
        for char in keys:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Layer keys must be single characters, got {char!r}")
        self.keys: KeyGrid[str] = keys

    def __getitem__(self, pos: int) -> str:
        return self.keys[pos]

    def __iter__(self):
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return self.keys == other.keys

    def __str__(self) -> str:
        return LAYOUT_TEMPLATE.format(*self.keys)

    def __repr__(self) -> str:
        return f"Layer({''.join(self.keys)!r})"

    @property
    def is_frozen(self) -> bool:
        return self.keys.is_frozen

    def swap(self, i: int, j: int) -> None:
        """Exchange the characters at positions i and j (i == j is a no-op)."""
        self.keys.swap(i, j)

    def fill_position_map(self, table: np.ndarray) -> None:
        """
        Record every ASCII character's position in table.

        Positions are visited in ascending order, so a later position
        overwrites an earlier one holding the same character.

        Args:
            table: 128-slot array indexed by code point (modified in place)
        """
        for pos, char in enumerate(self.keys):
            code = ord(char)
            if code < ASCII_LIMIT:
                table[code] = pos

    def copy(self) -> 'Layer':
        return Layer(self.keys.copy())

    def frozen(self) -> 'Layer':
        return Layer(self.keys.frozen())


class PositionMap:
    """
    Reverse index from character to grid position.

    Built from a Layout snapshot; later changes to the Layout are not seen.
    Only characters below code point 128 are indexed.
    """

    __slots__ = ('_table',)

    def __init__(self, table: np.ndarray):
        if table.shape != (ASCII_LIMIT,):
            raise ValueError(f"Position table must have {ASCII_LIMIT} entries, got {table.shape}")
        self._table = table.copy()
        self._table.setflags(write=False)

    def get_key_position(self, kc: str) -> Optional[int]:
        """
        Get the grid position of a character.

        Args:
            kc: Single character

        Returns:
            Grid position, or None if kc is not ASCII or not in the layout
        """
        if not isinstance(kc, str) or len(kc) != 1:
            return None
        code = ord(kc)
        if code >= ASCII_LIMIT:
            return None
        pos = int(self._table[code])
        return None if pos == NO_POSITION else pos

    def __contains__(self, kc: object) -> bool:
        return isinstance(kc, str) and self.get_key_position(kc) is not None

    @property
    def table(self) -> np.ndarray:
        """Read-only 128-entry array (-1 where no character is recorded)."""
        return self._table

    def to_dict(self) -> Dict[str, int]:
        return {chr(code): int(pos) for code, pos in enumerate(self._table)
                if pos != NO_POSITION}


def _owned_layer(keys: Union[Layer, KeyGrid, Iterable[str]]) -> Layer:
    """Wrap keys in a Layer no caller holds a writable reference to."""
    if isinstance(keys, Layer):
        return keys if keys.is_frozen else keys.copy()
    if isinstance(keys, KeyGrid):
        return Layer(keys if keys.is_frozen else keys.copy())
    return Layer(keys)


class Layout:
    """
    Lower and upper layers of a keyboard, always swapped in lockstep.

    Preset layouts are read-only; use copy() to get one that can be shuffled.
    """

    __slots__ = ('_lower', '_upper', 'name')

    def __init__(self, lower: Union[Layer, KeyGrid, Iterable[str]],
                 upper: Union[Layer, KeyGrid, Iterable[str]],
                 name: str = ""):
        self._lower = _owned_layer(lower)
        self._upper = _owned_layer(upper)
        if self._lower.is_frozen != self._upper.is_frozen:
            raise ValueError("Lower and upper layers must both be frozen or both writable")
        self.name = name

    # Layers are handed out read-only so they can only be swapped together
    @property
    def lower(self) -> Layer:
        return self._lower if self.is_frozen else self._lower.frozen()

    @property
    def upper(self) -> Layer:
        return self._upper if self.is_frozen else self._upper.frozen()

    @property
    def is_frozen(self) -> bool:
        return self._lower.is_frozen

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self._lower == other._lower and self._upper == other._upper

    def __str__(self) -> str:
        return str(self._lower)

    def __repr__(self) -> str:
        return f"Layout({''.join(self._lower)!r}, {''.join(self._upper)!r}, name={self.name!r})"

    def swap(self, i: int, j: int) -> None:
        """Swap positions i and j in both layers."""
        i = check_position(i)
        j = check_position(j)
        if self.is_frozen:
            raise TypeError(f"Layout {self.name!r} is read-only; copy() it first")
        self._lower.swap(i, j)
        self._upper.swap(i, j)

    @staticmethod
    def shuffle_position(rng=None) -> Tuple[int, int]:
        """Draw two distinct positions that the shuffle mask allows to move."""
        return shuffle_position(_shuffle_rng if rng is None else rng,
                                LAYOUT_MASK, NUM_SWAPPABLE)

    def shuffle(self, times: int, rng=None) -> None:
        """
        Apply random swaps to both layers.

        Args:
            times: Number of swaps to perform
            rng: Random source with randrange(); defaults to the module's rng

        Raises:
            ValueError: If times is negative
            TypeError: If the layout is read-only
        """
        if times < 0:
            raise ValueError(f"Shuffle count must be non-negative, got {times}")
        if self.is_frozen:
            raise TypeError(f"Layout {self.name!r} is read-only; copy() it first")

        for _ in range(times):
            i, j = Layout.shuffle_position(rng)
            self._lower.swap(i, j)
            self._upper.swap(i, j)

        logger.debug(f"Shuffled layout {self.name!r} with {times} swaps")

    def get_position_map(self) -> PositionMap:
        """
        Build a character -> position map from the current layers.

        The upper layer is recorded after the lower one, so it wins when a
        character appears in both.
        """
        table = new_position_table()
        self._lower.fill_position_map(table)
        self._upper.fill_position_map(table)
        return PositionMap(table)

    def copy(self, name: Optional[str] = None) -> 'Layout':
        """Return an independent, writable copy."""
        return Layout(self._lower.copy(), self._upper.copy(),
                      self.name if name is None else name)

    def frozen(self) -> 'Layout':
        """Return a read-only copy."""
        return Layout(self._lower.frozen(), self._upper.frozen(), self.name)
