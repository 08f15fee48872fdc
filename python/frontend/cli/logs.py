"""Logging setup shared by the CLI frontends."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> None:
    """Route log records through Rich.

    DEBUG adds timestamps and logger names; other levels show the message only.
    """
    handler = RichHandler(
        show_time=level <= logging.DEBUG,
        show_path=False,
        markup=False,
    )
    fmt = "%(name)s: %(message)s" if level <= logging.DEBUG else "%(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
