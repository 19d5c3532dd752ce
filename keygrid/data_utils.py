#!/usr/bin/env python3
"""
Data utilities for tabular views of layouts and key presses.
"""

import numpy as np
import pandas as pd

from keygrid.geometry import KEY_FINGERS, KEY_HANDS, KEY_ROWS, LAYOUT_MASK, Finger
from keygrid.key_grid import NUM_KEYS
from keygrid.layout import Layout, PositionMap
from keygrid.text_utils import keypresses_for_text


def layout_table(layout: Layout) -> pd.DataFrame:
    """
    Build a per-position table of a layout.

    Args:
        layout: Layout to tabulate

    Returns:
        DataFrame indexed by position with columns
        lower, upper, finger, hand, row, swappable
    """
    df = pd.DataFrame({
        'lower': list(layout.lower),
        'upper': list(layout.upper),
        'finger': [finger.name.lower() for finger in KEY_FINGERS],
        'hand': [hand.value for hand in KEY_HANDS],
        'row': [int(row) for row in KEY_ROWS],
        'swappable': list(LAYOUT_MASK),
    }, index=pd.RangeIndex(NUM_KEYS, name='position'))
    return df


def position_table(pos_map: PositionMap) -> np.ndarray:
    """Get a writable copy of a position map's 128-entry table (-1 = absent)."""
    return np.array(pos_map.table, copy=True)


def finger_usage(text: str, pos_map: PositionMap, normalize: bool = False) -> pd.Series:
    """
    Count key presses per finger for a text sample.

    Args:
        text: Text sample
        pos_map: Position map taken from a layout
        normalize: If True, return proportions (sum to 1) instead of counts

    Returns:
        Series indexed by finger name, thumb through pinky
    """
    counts = pd.Series(0, index=[finger.name.lower() for finger in Finger], dtype='int64')
    for press in keypresses_for_text(text, pos_map):
        counts[press.finger.name.lower()] += 1

    if normalize:
        total = counts.sum()
        if total == 0:
            return counts.astype('float64')
        return counts / total
    return counts
