#!/usr/bin/env python3
"""
Text utilities for turning a text sample into key presses.

The resulting sequences are what a scoring function consumes: one classified
KeyPress per character the layout can type.
"""

from collections import Counter
from typing import Dict, Iterator, List, Tuple

from keygrid.keypress import KeyPress
from keygrid.layout import PositionMap


def keypresses_for_text(text: str, pos_map: PositionMap) -> Iterator[KeyPress]:
    """
    Yield a KeyPress for each character of text that the layout can type.

    Characters without a position (non-ASCII, or absent from the layout)
    are skipped.

    Args:
        text: Text sample
        pos_map: Position map taken from a layout

    Yields:
        KeyPress values in text order
    """
    for char in text:
        press = KeyPress.new(char, pos_map)
        if press is not None:
            yield press


def keypress_pairs(text: str, pos_map: PositionMap) -> List[Tuple[KeyPress, KeyPress]]:
    """
    Extract consecutive key press pairs from text.

    A character without a position breaks the chain, so no pair spans it.

    Args:
        text: Text sample
        pos_map: Position map taken from a layout

    Returns:
        List of (first, second) KeyPress tuples
    """
    pairs = []
    previous = None

    for char in text:
        press = KeyPress.new(char, pos_map)
        if press is not None and previous is not None:
            pairs.append((previous, press))
        previous = press

    return pairs


def coverage(text: str, pos_map: PositionMap) -> float:
    """
    Fraction of characters in text that have a position.

    Returns:
        Value in [0, 1]; 0.0 for empty text
    """
    if not text:
        return 0.0
    typed = sum(1 for char in text if char in pos_map)
    return typed / len(text)


def get_missing_characters(text: str, pos_map: PositionMap) -> Dict[str, int]:
    """Count the characters in text that the layout cannot type."""
    return dict(Counter(char for char in text if char not in pos_map))
