# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "momentum-rich"


def configure_logging(level: str = "WARNING") -> None:
    """Route the package loggers through a rich handler on stderr.

    Safe to call more than once; the level of the existing handler is updated.
    """
    package_logger = logging.getLogger("momentum")
    package_logger.setLevel(level.upper())
    package_logger.propagate = False

    for handler in package_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level.upper())
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level.upper())
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
