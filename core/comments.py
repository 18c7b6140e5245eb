# core/comments.py
from typing import Optional

DEFAULT_MARKER = "//"

# file suffix -> line-comment marker
COMMENT_MARKERS = {
    "py":  "#",
    "rb":  "#",
    "sql": "--",
}


def file_suffix(label: str) -> str:
    """Text after the last '.', or '' when there is none."""
    if '.' not in label:
        return ""
    return label.rsplit('.', 1)[1]


def comment_marker(label: str, override: Optional[str] = None) -> str:
    """Pick the comment marker for an input's header line."""
    if override is not None:
        return override
    return COMMENT_MARKERS.get(file_suffix(label), DEFAULT_MARKER)
