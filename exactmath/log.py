"""structlog setup for applications embedding exactmath."""

from __future__ import annotations

import logging

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Install a console renderer filtered at INFO, or DEBUG when verbose.

    exactmath itself only emits debug events (division scale choice, float
    bridging, ratio lowering), so they are visible with verbose=True.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
