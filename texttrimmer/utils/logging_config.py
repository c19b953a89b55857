"""Logging configuration for the texttrimmer command line."""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "texttrimmer"


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    return getattr(logging, str(name).upper(), default)


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    package_level: str | None = None,
) -> None:
    """Configure root logging for the CLI; library code never calls this.

    Log records go to stderr so they never mix with command output.
    ``package_level`` sets the ``texttrimmer`` logger on its own, so the
    per-call debug records from trim/highlight can be silenced (or turned
    on) independently of everything else. When omitted it follows
    ``log_level``.
    """
    level = _level(log_level, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(_level(package_level, level))
