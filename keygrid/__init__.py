# keygrid/__init__.py
"""
Keyboard Layout Grid Core

Fixed-size layout grids, lockstep shuffling, position lookup and
finger/hand/row classification for layout search tools.
"""

__version__ = "1.0.0"

# Import main classes for easy access
from .key_grid import KeyGrid, NUM_KEYS
from .geometry import Finger, Hand, Row, LAYOUT_MASK, NUM_SWAPPABLE
from .layout import Layer, Layout, PositionMap, seed_shuffle_rng
from .keypress import KeyPress
from .presets import PRESETS, INIT_LAYOUT, get_preset, list_presets

__all__ = [
    'KeyGrid',
    'NUM_KEYS',
    'Finger',
    'Hand',
    'Row',
    'LAYOUT_MASK',
    'NUM_SWAPPABLE',
    'Layer',
    'Layout',
    'PositionMap',
    'seed_shuffle_rng',
    'KeyPress',
    'PRESETS',
    'INIT_LAYOUT',
    'get_preset',
    'list_presets',
]
