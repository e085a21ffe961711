"""Colorful stderr log formatter."""

import logging
import re
from datetime import datetime

RESET = "\033[0m"
DIM = "\033[2m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
GREY = "\033[90m"
MAGENTA = "\033[95m"
CYAN = "\033[96m"

LEVEL_COLORS = {
    "DEBUG": GREY,
    "INFO": GREEN,
    "WARNING": YELLOW,
    "ERROR": RED,
    "CRITICAL": RED,
}

# First matching prefix wins
COMPONENT_COLORS = [
    ("uptime_scout.services", CYAN),
    ("uptime_scout.middleware", YELLOW),
]

HIGHLIGHTS = [
    (re.compile(r"\b\d+(?:\.\d+)?ms\b"), YELLOW),
    (re.compile(r"\b\w+@[\w.\-]+:\d+\b"), MAGENTA),
    (re.compile(r"\bOK\b"), GREEN),
    (re.compile(r"\bERROR\b"), RED),
    (re.compile(r"\bOFFLINE\b"), YELLOW),
]

PACKAGE_PREFIX = "uptime_scout."


class ColorfulFormatter(logging.Formatter):
    """``time | LEVEL | component | message`` lines, optionally colored."""

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone()
        timestamp = f"{stamp:%H:%M:%S}.{int(record.msecs):03d}"

        component = record.name.removeprefix(PACKAGE_PREFIX)
        component_color = next(
            (color for prefix, color in COMPONENT_COLORS if record.name.startswith(prefix)),
            "",
        )

        message = record.getMessage()
        if self.use_colors:
            for pattern, color in HIGHLIGHTS:
                message = pattern.sub(lambda m, c=color: f"{c}{m.group(0)}{RESET}", message)

        sep = self._paint("|", DIM)
        line = " ".join(
            [
                self._paint(timestamp, DIM),
                sep,
                self._paint(f"{record.levelname:<8}", LEVEL_COLORS.get(record.levelname, "")),
                sep,
                self._paint(f"{component:<20}", component_color),
                sep,
                message,
            ]
        )

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
