"""
Colored logging utility with pipeline stage prefixes.

All output goes to stderr: stdout is reserved for the envelope.
"""

import sys
from colorama import Fore, Style


class StageLogger:
    """Logger that prefixes all output with a colored stage name."""

    COLORS = [
        Fore.BLUE,
        Fore.MAGENTA,
        Fore.CYAN,
        Fore.GREEN,
    ]

    def __init__(self, stage: str, verbose: bool = False, color: bool = True, stream=None):
        self.stage = stage
        self.verbose = verbose
        self.color = color
        self.stream = stream
        if color:
            tint = self.COLORS[sum(map(ord, stage)) % len(self.COLORS)]
            self.prefix = f"{tint}[{stage}]{Style.RESET_ALL} "
        else:
            self.prefix = f"[{stage}] "

    def child(self, stage: str) -> "StageLogger":
        """Logger for another stage sharing this one's settings."""
        return StageLogger(stage, verbose=self.verbose, color=self.color, stream=self.stream)

    def _paint(self, tint: str, text: str) -> str:
        return f"{tint}{text}{Style.RESET_ALL}" if self.color else text

    def log(self, message: str):
        """Log a message with the stage prefix."""
        out = self.stream or sys.stderr
        for line in message.splitlines() or [""]:
            print(f"{self.prefix}{line}", file=out)

    def info(self, message: str):
        """Log an info message (verbose only)."""
        if self.verbose:
            self.log(message)

    def error(self, message: str):
        self.log(f"{self._paint(Fore.RED, 'ERROR:')} {message}")

    def success(self, message: str):
        """Log a success message (verbose only)."""
        if self.verbose:
            self.log(f"{self._paint(Fore.GREEN, '✓')} {message}")
