"""Logging utilities for Pill Splitter."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed here so reconfiguring replaces them.
_HANDLER_TAG = "_pillsplitter_handler"


@dataclass
class EditorStats:
    """Statistics from an editing session."""

    pills_created: int = 0
    draws_rejected: int = 0
    pills_split: int = 0
    pieces_created: int = 0
    pills_shifted: int = 0
    drags: int = 0
    clicks_suppressed: int = 0
    outcomes: Counter = field(default_factory=Counter)

    def to_dict(self) -> dict[str, object]:
        return {
            "pills_created": self.pills_created,
            "draws_rejected": self.draws_rejected,
            "pills_split": self.pills_split,
            "pieces_created": self.pieces_created,
            "pills_shifted": self.pills_shifted,
            "drags": self.drags,
            "clicks_suppressed": self.clicks_suppressed,
            "outcomes": dict(self.outcomes),
        }


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, _HANDLER_TAG, True)
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

    logger = structlog.get_logger("pillsplitter")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EditorLogger:
    """Logger for editor events that also keeps session statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("pillsplitter")
        self._stats = EditorStats()

    def log_pill_created(self, pill_id: int, width: float, height: float) -> None:
        """Log a pill added by a draw gesture."""
        self._logger.info("Pill drawn", pill=pill_id, width=width, height=height)
        self._stats.pills_created += 1

    def log_draw_rejected(self, width: float, height: float, min_size: float) -> None:
        """Log a draw gesture too small to become a pill."""
        self._logger.debug(
            "Draw rejected", width=width, height=height, min_size=min_size
        )
        self._stats.draws_rejected += 1

    def log_split(
        self, pill_id: int, outcome: str, new_ids: list[int]
    ) -> None:
        """Log a pill replaced by pieces."""
        self._logger.info("Pill split", pill=pill_id, outcome=outcome, pieces=new_ids)
        self._stats.pills_split += 1
        self._stats.pieces_created += len(new_ids)
        self._stats.outcomes[outcome] += 1

    def log_shift(self, pill_id: int, patch: dict[str, float]) -> None:
        """Log a pill moved aside instead of split."""
        self._logger.debug("Pill shifted", pill=pill_id, **patch)
        self._stats.pills_shifted += 1
        self._stats.outcomes["shifted"] += 1

    def log_drag(self, pill_id: int, x: float, y: float) -> None:
        """Log the end position of a drag."""
        self._logger.debug("Pill dragged", pill=pill_id, x=x, y=y)
        self._stats.drags += 1

    def log_click_suppressed(self, x: float, y: float) -> None:
        """Log a click swallowed after a draw gesture."""
        self._logger.debug("Click suppressed", x=x, y=y)
        self._stats.clicks_suppressed += 1

    def log_ignored(self, pointer_event: str, reason: str) -> None:
        """Log an event that had no effect."""
        self._logger.debug("Event ignored", pointer_event=pointer_event, reason=reason)

    def log_stale_session(self, mode: str, session: dict[str, float]) -> None:
        """Log a gesture abandoned because its pointer-up never arrived."""
        self._logger.warning("Abandoned unfinished gesture", mode=mode, session=session)

    @property
    def stats(self) -> EditorStats:
        """Get current session statistics."""
        return self._stats
