#!/usr/bin/env python3
"""
Classified key presses.

A KeyPress joins a character's grid position with the finger, hand and row
that strike that position. Characters the layout cannot type produce no
KeyPress at all.
"""

from dataclasses import dataclass
from typing import Optional

from keygrid.geometry import KEY_FINGERS, KEY_HANDS, KEY_ROWS, Finger, Hand, Row
from keygrid.layout import PositionMap


@dataclass(frozen=True)
class KeyPress:
    """A character typed at a specific position, with its physical classification."""

    kc: str
    pos: int
    finger: Finger
    hand: Hand
    row: Row

    @classmethod
    def new(cls, kc: str, pos_map: PositionMap) -> Optional['KeyPress']:
        """
        Look up kc in pos_map and classify its position.

        Args:
            kc: Character to look up
            pos_map: Position map taken from a layout

        Returns:
            KeyPress, or None if the character has no position
        """
        pos = pos_map.get_key_position(kc)
        if pos is None:
            return None
        return cls(kc=kc, pos=pos, finger=KEY_FINGERS[pos],
                   hand=KEY_HANDS[pos], row=KEY_ROWS[pos])

    def same_hand(self, other: 'KeyPress') -> bool:
        return self.hand == other.hand

    def same_finger(self, other: 'KeyPress') -> bool:
        return self.hand == other.hand and self.finger == other.finger
