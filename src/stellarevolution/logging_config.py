"""
Logging Configuration
Sets up the global logger for the application.

The clock logs one DEBUG record per tick, tagged with ``extra={"tick": True}``.
At ten ticks a second these drown the console, so the console handler drops
them unless ``show_ticks`` is set. A log file always receives them.
"""
import logging
import sys
from typing import Optional


class TickFilter(logging.Filter):
    """Drops per-tick records emitted by the simulation clock."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "tick", False)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    show_ticks: bool = False,
) -> None:
    """
    Configures the root logger for the 'stellarevolution' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        show_ticks: Print every clock tick on the console as well.
    """
    logger = logging.getLogger("stellarevolution")
    logger.setLevel(level)

    # Avoid duplicate output when the app is restarted in the same interpreter
    if logger.hasHandlers():
        logger.handlers.clear()

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    if not show_ticks:
        console_handler.addFilter(TickFilter())

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional), keeps the full tick trace
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
