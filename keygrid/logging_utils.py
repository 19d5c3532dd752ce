#!/usr/bin/env python3
"""
Logging setup driven by the 'logging' configuration section.
"""

import logging
from typing import Any, Dict, Optional

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Configure root logging from a 'logging' config section.

    Args:
        config: Dictionary with optional 'level' and 'format' keys

    Returns:
        The keygrid package logger
    """
    config = config or {}
    level_name = str(config.get('level', 'INFO')).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.get('level')!r}")

    logging.basicConfig(level=level, format=config.get('format', DEFAULT_FORMAT), force=True)
    return logging.getLogger('keygrid')
