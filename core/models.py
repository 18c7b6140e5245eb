# core/models.py
from dataclasses import dataclass

# Reserved identifier meaning "read standard input here"
STDIN = "-"


@dataclass(frozen=True)
class ResolvedInput:
    """One loaded input: the label shown in its header line and its text."""
    label: str
    content: str
    lossy: bool = False  # ← set when invalid UTF-8 was replaced
