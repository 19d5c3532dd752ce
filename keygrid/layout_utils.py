#!/usr/bin/env python3
"""
Layout utilities for validating and comparing layouts.
"""

from collections import Counter
from typing import Any, Dict, List, Optional

from keygrid.geometry import LAYOUT_MASK
from keygrid.key_grid import NUM_KEYS
from keygrid.layout import Layer, Layout

PLACEHOLDER = '\0'


def _duplicates(layer: Layer) -> List[str]:
    counts = Counter(layer)
    return sorted(char for char, count in counts.items() if count > 1)


def validate_layout(layout: Layout, reference: Optional[Layout] = None) -> List[str]:
    """
    Validate a layout for correctness and consistency.

    Args:
        layout: Layout to check
        reference: If given, the layout must keep this layout's characters
            at every position the shuffle mask fixes, and hold the same
            characters overall

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    for label, layer in (('lower', layout.lower), ('upper', layout.upper)):
        duplicates = _duplicates(layer)
        if duplicates:
            issues.append(f"Duplicate characters in {label} layer: {duplicates}")

    if reference is not None:
        if not fixed_positions_unchanged(reference, layout):
            issues.append("Fixed positions differ from the reference layout")
        if Counter(layout.lower) != Counter(reference.lower):
            issues.append("Lower layer characters differ from the reference layout")
        if Counter(layout.upper) != Counter(reference.upper):
            issues.append("Upper layer characters differ from the reference layout")

    return issues


def fixed_positions_unchanged(before: Layout, after: Layout) -> bool:
    """Check that every position the shuffle mask fixes holds the same characters."""
    for pos in range(NUM_KEYS):
        if LAYOUT_MASK[pos]:
            continue
        if before.lower[pos] != after.lower[pos] or before.upper[pos] != after.upper[pos]:
            return False
    return True


def compare_layouts(layout1: Layout, layout2: Layout) -> Dict[str, Any]:
    """
    Compare the lower layers of two layouts position by position.

    Args:
        layout1: First layout
        layout2: Second layout

    Returns:
        Dictionary with differing positions as (pos, char1, char2) tuples,
        the number of identical positions and the similarity ratio
    """
    position_diffs = [(pos, layout1.lower[pos], layout2.lower[pos])
                      for pos in range(NUM_KEYS)
                      if layout1.lower[pos] != layout2.lower[pos]]

    return {
        'position_differences': position_diffs,
        'total_differences': len(position_diffs),
        'identical_positions': NUM_KEYS - len(position_diffs),
        'similarity_ratio': (NUM_KEYS - len(position_diffs)) / NUM_KEYS,
    }


def get_layout_statistics(layout: Layout) -> Dict[str, Any]:
    """
    Get statistics about a layout's lower layer.

    Returns:
        Dictionary with letter/punctuation counts and alphabet coverage
    """
    chars = [char for char in layout.lower if char != PLACEHOLDER]
    standard_letters = set('abcdefghijklmnopqrstuvwxyz')
    mapped_letters = set(char.lower() for char in chars if char.isalpha())

    return {
        'total_chars': len(chars),
        'letters': sum(1 for char in chars if char.isalpha()),
        'numbers': sum(1 for char in chars if char.isdigit()),
        'punctuation': sum(1 for char in chars if not char.isalnum()),
        'empty_positions': NUM_KEYS - len(chars),
        'alphabet_coverage': len(mapped_letters & standard_letters) / len(standard_letters),
    }
