"""Run logging: the CSV iteration sink and the stdlib logger setup."""

import logging

from spso.logging.run_logger import RunLogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger for command-line runs."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


__all__ = ["RunLogger", "configure_logging", "LOG_FORMAT"]
