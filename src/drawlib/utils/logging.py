"""Logging utilities for drawlib."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class LayoutStats:
    """Statistics from text layout requests."""

    labels_count: int = 0
    glyphs_placed: int = 0
    glyphs_truncated: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        """Number of labels that failed to lay out."""
        return len(self.errors)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging on top of the stdlib logging handlers.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("drawlib")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking text layout requests and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("drawlib")
        self._stats = LayoutStats()

    def log_label_placed(self, text: str, placed: int, total: int) -> None:
        """Log a laid out label, counting glyphs dropped by truncation."""
        truncated = total - placed
        self._logger.debug(
            "Label laid out",
            text=text,
            placed=placed,
            truncated=truncated,
        )
        self._stats.labels_count += 1
        self._stats.glyphs_placed += placed
        self._stats.glyphs_truncated += truncated

    def log_label_error(self, text: str, error: Exception) -> None:
        """Log a label that could not be laid out."""
        self._logger.error(
            "Label layout failed",
            text=text,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((text, str(error)))

    @property
    def stats(self) -> LayoutStats:
        """Get current layout statistics."""
        return self._stats
