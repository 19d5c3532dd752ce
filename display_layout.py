#!/usr/bin/env python3
"""
33-Key Layout Viewer

Prints a preset layout in its canonical four-line form, optionally after
shuffling it, and shows where each character of a text sample is typed.

Usage:
    python display_layout.py --preset qwerty
    python display_layout.py --preset init --shuffle 200 --seed 42
    python display_layout.py --preset dvorak --text "hello world" --upper
"""

import argparse
import logging
import random
import sys

from keygrid.config_loader import get_config_loader
from keygrid.layout_utils import compare_layouts, validate_layout
from keygrid.logging_utils import setup_logging
from keygrid.presets import get_preset, list_presets
from keygrid.text_utils import coverage, get_missing_characters, keypresses_for_text

logger = logging.getLogger(__name__)


def display_keypresses(layout, text):
    """Print the position and classification of each typed character."""
    pos_map = layout.get_position_map()
    print(f"\nKEY PRESSES FOR {text!r}")
    print("-" * 40)
    for press in keypresses_for_text(text, pos_map):
        print(f"  {press.kc!r:>5} pos {press.pos:2d}  {press.hand.value} "
              f"{press.finger.name.lower():<6} {press.row.name.lower()}")
    print(f"Coverage: {coverage(text, pos_map):.1%}")
    missing = get_missing_characters(text, pos_map)
    if missing:
        print("Not typeable:", ", ".join(repr(c) for c in sorted(missing)))


def main():
    parser = argparse.ArgumentParser(
        description='Display a 33-key keyboard layout',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Presets: {', '.join(list_presets())}

Examples:
  python display_layout.py --preset qwerty
  python display_layout.py --shuffle 200 --seed 42
        """
    )

    parser.add_argument('--preset',
                        help='Preset layout name (default from config)')
    parser.add_argument('--shuffle', type=int, nargs='?', const='default', default=None,
                        help='Shuffle the layout (optional swap count, default from config)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for shuffling (overrides config)')
    parser.add_argument('--upper', action='store_true',
                        help='Also show the shifted layer')
    parser.add_argument('--text',
                        help='Show key presses for this text')
    parser.add_argument('--config', default='config.yaml',
                        help='Path to configuration file (default: config.yaml)')

    args = parser.parse_args()
    if isinstance(args.shuffle, int) and args.shuffle < 0:
        parser.error(f"--shuffle count must be non-negative, got {args.shuffle}")

    loader = get_config_loader(args.config)
    try:
        issues = loader.validate_config()
        if issues:
            for issue in issues:
                print(f"Error: {issue}")
            sys.exit(1)
        common = loader.get_section('common')
        shuffle_config = loader.get_section('shuffle')
        setup_logging(loader.get_section('logging'))
        display_config = loader.get_section('display')
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        layout = get_preset(args.preset or common['default_preset'])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    original = layout.copy()

    if args.shuffle is not None:
        times = shuffle_config['default_times'] if args.shuffle == 'default' else args.shuffle
        seed = args.seed if args.seed is not None else shuffle_config['random_seed']
        layout.shuffle(times, random.Random(seed))
        logger.info(f"Applied {times} swaps (seed={seed})")

    print(f"\n{layout.name.upper()} LAYOUT")
    print("=" * 30)
    print(layout)

    if args.upper or display_config.get('show_upper'):
        print("\nSHIFTED")
        print("=" * 30)
        print(layout.upper)

    if args.shuffle is not None:
        diff = compare_layouts(original, layout)
        print(f"\nPositions changed: {diff['total_differences']}")
        for issue in validate_layout(layout, reference=original):
            logger.warning(issue)

    if args.text:
        display_keypresses(layout, args.text)


if __name__ == "__main__":
    main()
