"""
Logging setup for the simulator.

Everything under the ``tunneling`` namespace goes through one logger: the
core modules only emit DEBUG (FFT tables, re-initializations), while the
CLI summary and the pygame window report at INFO and the driver warns about
unstable time steps.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Routes the ``tunneling`` loggers to stdout and, optionally, a file.

    Args:
        level: Logging level, or its name as typed on the command line
            ("DEBUG", "info", ...).
        log_file: Optional path; the file is overwritten on every run.

    Returns:
        The package logger.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")

    logger = logging.getLogger("tunneling")
    logger.setLevel(level)

    # re-running the CLI in one process (tests, the window) replaces handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging at %s%s", logging.getLevelName(level),
                 f", copy in {log_file}" if log_file else "")
    return logger
