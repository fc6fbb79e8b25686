"""
Logging configuration for the booking service.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger.  Every module logs through
``logging.getLogger(__name__)``, so admissions, rejections, resets and
mail delivery all end up in the same stream.  The SMTP client library is
chatty at DEBUG level; its logger is capped at WARNING unless the
service itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third‑party loggers that only matter when debugging delivery.
NOISY_LOGGERS = ("aiosmtplib",)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    noisy: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Empty or ``None`` means console only.
    noisy : Iterable[str]
        Logger names raised to WARNING unless ``level`` is DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app() runs repeatedly under the test suite.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in noisy:
            logging.getLogger(name).setLevel(logging.WARNING)
