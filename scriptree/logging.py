"""Logging configuration for scriptree.

Logs to stderr so the rendered tree on stdout stays clean. The level can
be raised with SCRIPTREE_LOG_LEVEL (default: WARNING).
"""

import logging
import os
import sys
import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

DEFAULT_LEVEL = logging.WARNING


def _level_from_env() -> int:
    """Read SCRIPTREE_LOG_LEVEL, falling back to WARNING for unknown names."""
    name = os.getenv("SCRIPTREE_LOG_LEVEL", "").strip().upper()
    return logging.getLevelNamesMapping().get(name, DEFAULT_LEVEL)


# Create logger that outputs to stderr
logger = logging.getLogger("scriptree")
logger.setLevel(_level_from_env())

# Only add handler if not already configured
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[scriptree] %(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def set_log_level(level: int | str) -> None:
    """Change the scriptree logger level at runtime.

    Args:
        level: A logging level number or name ("DEBUG", "INFO", ...).
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)


@dataclass
class Timer:
    """Elapsed wall time of a logged operation, filled in when it ends."""

    started: float = field(default_factory=time.perf_counter)
    elapsed_ms: float = 0.0

    def stop(self) -> float:
        self.elapsed_ms = (time.perf_counter() - self.started) * 1000
        return self.elapsed_ms


@contextmanager
def log_operation(
    operation: str,
    details: dict[str, Any] | None = None,
) -> Generator[Timer, None, None]:
    """Log the start and end of an operation.

    Failures are logged with their elapsed time and re-raised.

    Args:
        operation: Name of the operation.
        details: Optional key=value pairs for the start message.

    Yields:
        Timer whose elapsed_ms is set once the block exits.
    """
    details_str = "".join(f" {k}={v}" for k, v in (details or {}).items())
    logger.info("▶ Starting %s%s", operation, details_str)

    timer = Timer()
    try:
        yield timer
    except Exception as e:
        logger.error("✗ %s failed after %.1fms: %s", operation, timer.stop(), e)
        raise
    logger.info("✓ Completed %s in %.1fms", operation, timer.stop())
