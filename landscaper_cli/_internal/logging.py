# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Simple logging configuration using Python's standard logging with Rich.

Usage:
    from landscaper_cli._internal.logging import setup_logging

    # In CLI setup
    setup_logging(level="verbose")

    # In application code
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Processing...")
"""

import logging

# CLI verbosity names plus plain level names
LEVEL_MAP = {
    'quiet': logging.ERROR,
    'normal': logging.WARNING,
    'verbose': logging.INFO,
    'error': logging.ERROR,
    'warning': logging.WARNING,
    'info': logging.INFO,
    'debug': logging.DEBUG,
}


def resolve_level(level: str) -> int:
    """Map a verbosity name to a logging constant (unknown names -> WARNING)."""
    return LEVEL_MAP.get(level.lower(), logging.WARNING)


def setup_logging(level: str = "normal") -> None:
    """Configure Python logging with Rich handler.

    Accepts CLI verbosity names ('quiet', 'normal', 'verbose', 'debug') as
    well as 'error', 'warning' and 'info'.
    """
    from rich.logging import RichHandler

    log_level = resolve_level(level)

    root = logging.getLogger()
    root.setLevel(log_level)

    rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]

    if not rich_handlers:
        handler = RichHandler(
            rich_tracebacks=(log_level == logging.DEBUG),
            show_path=False,
            markup=False,
            show_time=False
        )
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)
    else:
        for handler in rich_handlers:
            handler.setLevel(log_level)
