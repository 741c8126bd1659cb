"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .progress import (
    MockProgress,
    NullProgress,
    ProgressReporter,
    RichProgress,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "MockProgress",
    "NullProgress",
    "ProgressReporter",
    "RichProgress",
]
