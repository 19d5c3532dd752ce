#!/usr/bin/env python3
"""
Physical key geometry for the 33-key grid.

Every position has exactly one finger, hand and row. Finger and row numbers
follow the usual convention: fingers count outward from the index finger
(1 = index ... 4 = pinky, 0 = thumb) and rows count down from the top
letter row (1 = top, 2 = home, 3 = bottom, 4 = thumb).

Also holds the shuffle mask: the positions eligible for random swaps, and the
rank-to-position remapping used to draw a swap pair.
"""

import enum
import logging
from typing import Optional, Tuple

from keygrid.key_grid import KeyGrid, NUM_KEYS

logger = logging.getLogger(__name__)


class Finger(enum.IntEnum):
    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    PINKY = 4


class Hand(str, enum.Enum):
    LEFT = 'L'
    RIGHT = 'R'


class Row(enum.IntEnum):
    TOP = 1
    HOME = 2
    BOTTOM = 3
    THUMB = 4


_P, _R, _M, _I, _T = Finger.PINKY, Finger.RING, Finger.MIDDLE, Finger.INDEX, Finger.THUMB
_L, _Rt = Hand.LEFT, Hand.RIGHT

KEY_FINGERS: KeyGrid[Finger] = KeyGrid([
    _P, _R, _M, _I, _I,    _I, _I, _M, _R, _P, _P,
    _P, _R, _M, _I, _I,    _I, _I, _M, _R, _P, _P,
    _P, _R, _M, _I, _I,    _I, _I, _M, _R, _P,
    _T], frozen=True)

KEY_HANDS: KeyGrid[Hand] = KeyGrid(
    [_L] * 5 + [_Rt] * 6 +
    [_L] * 5 + [_Rt] * 6 +
    [_L] * 5 + [_Rt] * 5 +
    [_L], frozen=True)

KEY_ROWS: KeyGrid[Row] = KeyGrid(
    [Row.TOP] * 11 +
    [Row.HOME] * 11 +
    [Row.BOTTOM] * 10 +
    [Row.THUMB], frozen=True)

# Position 10 (last top-row key) and 32 (thumb) never move
LAYOUT_MASK: KeyGrid[bool] = KeyGrid(
    [True] * 10 + [False] +
    [True] * 11 +
    [True] * 10 +
    [False], frozen=True)
NUM_SWAPPABLE = 31

assert sum(LAYOUT_MASK) == NUM_SWAPPABLE, "LAYOUT_MASK and NUM_SWAPPABLE disagree"
assert len(KEY_FINGERS) == len(KEY_HANDS) == len(KEY_ROWS) == NUM_KEYS


def rank_to_position(rank: int, mask: KeyGrid[bool] = LAYOUT_MASK) -> int:
    """
    Map a rank among eligible positions to its grid position.

    Walks the grid from position 0, pushing the rank forward past each
    ineligible slot at or before the current walk point.

    Args:
        rank: Index among eligible positions (0-based)
        mask: Shuffle mask

    Returns:
        Grid position of the rank-th eligible key
    """
    pos = rank
    k = 0
    while k <= pos:
        if not mask[k]:
            pos += 1
        k += 1
    return pos


def shuffle_position(rng, mask: KeyGrid[bool] = LAYOUT_MASK,
                     num_swappable: Optional[int] = None) -> Tuple[int, int]:
    """
    Draw two distinct eligible grid positions uniformly at random.

    Args:
        rng: Random source with a randrange() method (e.g. random.Random)
        mask: Shuffle mask
        num_swappable: Number of True entries in mask (defaults to NUM_SWAPPABLE
            for the shared mask, otherwise counted)

    Returns:
        Tuple (i, j) of distinct eligible positions
    """
    if num_swappable is None:
        num_swappable = NUM_SWAPPABLE if mask is LAYOUT_MASK else sum(mask)

    i = rng.randrange(num_swappable)
    j = rng.randrange(num_swappable - 1)
    if j >= i:
        j += 1

    return rank_to_position(i, mask), rank_to_position(j, mask)


def classify(pos: int) -> Tuple[Finger, Hand, Row]:
    """Get (finger, hand, row) for a grid position."""
    return KEY_FINGERS[pos], KEY_HANDS[pos], KEY_ROWS[pos]


def positions_for_finger(finger: Finger, hand: Optional[Hand] = None) -> Tuple[int, ...]:
    """Get all grid positions struck by a finger, optionally restricted to one hand."""
    return tuple(pos for pos in range(NUM_KEYS)
                 if KEY_FINGERS[pos] == finger
                 and (hand is None or KEY_HANDS[pos] == hand))
