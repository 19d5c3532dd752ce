#!/usr/bin/env python3
"""
Named preset layouts.

Each preset is a read-only Layout with both shift states filled in for all
33 positions. Layouts without a character on the thumb key use '\\0' there.
get_preset() returns a writable copy that can be shuffled.
"""

import logging
from typing import Dict, List

from keygrid.layout import Layout

logger = logging.getLogger(__name__)


def _preset(name: str, lower: str, upper: str) -> Layout:
    return Layout(lower, upper, name).frozen()


INIT_LAYOUT = _preset(
    'init',
    "qupg/" "zlwy-="
    "arnsd" "fhtio'"
    "jkvc;" "xmb,."
    "e",
    "QUPG?" "ZLWY_+"
    'ARNSD' 'FHTIO"'
    "JKVC:" "XMB<>"
    "E")

QWERTY_LAYOUT = _preset(
    'qwerty',
    "qwert" "yuiop-"
    "asdfg" "hjkl;'"
    "zxcvb" "nm,./"
    "\0",
    "QWERT" "YUIOP_"
    'ASDFG' 'HJKL:"'
    "ZXCVB" "NM<>?"
    "\0")

DVORAK_LAYOUT = _preset(
    'dvorak',
    "',.py" "fgcrl/"
    "aoeui" "dhtns-"
    ";qjkx" "bmwvz"
    "\0",
    '",.PY' "FGCRL?"
    "AOEUI" "DHTNS_"
    ":QJKX" "BMWVZ"
    "\0")

# Shifted layers below use the shifted punctuation glyphs (: _ " < > ?) and
# hold each character once. The data these were modelled on repeated "Z" in
# COLEMAK and the unshifted punctuation in QGMLWY and WORKMAN.
COLEMAK_LAYOUT = _preset(
    'colemak',
    "qwfpg" "jluy;-"
    "arstd" "hneio'"
    "zxcvb" "km,./"
    "\0",
    "QWFPG" "JLUY:_"
    'ARSTD' 'HNEIO"'
    "ZXCVB" "KM<>?"
    "\0")

QGMLWY_LAYOUT = _preset(
    'qgmlwy',
    "qgmlw" "yfub;-"
    "dstnr" "iaeoh'"
    "zxcvj" "kp,./"
    "\0",
    "QGMLW" "YFUB:_"
    'DSTNR' 'IAEOH"'
    "ZXCVJ" "KP<>?"
    "\0")

WORKMAN_LAYOUT = _preset(
    'workman',
    "qdrwb" "jfup;-"
    "ashtg" "yneoi'"
    "zxmcv" "kl,./"
    "\0",
    "QDRWB" "JFUP:_"
    'ASHTG' 'YNEOI"'
    "ZXMCV" "KL<>?"
    "\0")

PRESETS: Dict[str, Layout] = {
    layout.name: layout for layout in (
        INIT_LAYOUT,
        QWERTY_LAYOUT,
        DVORAK_LAYOUT,
        COLEMAK_LAYOUT,
        QGMLWY_LAYOUT,
        WORKMAN_LAYOUT,
    )
}


def list_presets() -> List[str]:
    """Get the names of all preset layouts."""
    return list(PRESETS.keys())


def get_preset(name: str) -> Layout:
    """
    Get a writable copy of a preset layout.

    Args:
        name: Preset name (case-insensitive), e.g. 'qwerty'

    Returns:
        Independent Layout copy

    Raises:
        ValueError: If no preset has that name
    """
    key = name.strip().lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {list_presets()}")
    logger.debug(f"Copying preset layout '{key}'")
    return PRESETS[key].copy()
