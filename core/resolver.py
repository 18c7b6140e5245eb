"""
Input resolution: turn the requested identifiers into the ordered,
deduplicated list of inputs to load.
"""

from typing import Iterable, List

from .models import STDIN


def resolve_inputs(requested: Iterable[str]) -> List[str]:
    """
    Resolve requested identifiers into the identifiers to load.

    An empty request means standard input. The stdin sentinel contributes a
    single entry at the position of its first occurrence. Repeated
    identifiers are dropped silently, first occurrence wins.

    Args:
        requested: File paths and/or the STDIN sentinel, in command-line order

    Returns:
        Identifiers to load, in output order
    """
    requested = list(requested)
    if not requested:
        return [STDIN]

    seen = set()
    resolved = []
    for identifier in requested:
        if identifier in seen:
            continue
        seen.add(identifier)
        resolved.append(identifier)
    return resolved
