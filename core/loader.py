"""
Content loading for resolved inputs.

Files are read whole and passed through verbatim; stdin gets a trailing
newline if it lacks one. Bytes that are not valid UTF-8 are decoded lossily
instead of failing the run. An input that cannot be read at all aborts the
run before anything is written.
"""

import sys
from typing import BinaryIO, Iterable, List, Optional, Tuple

from .exceptions import InputReadError
from .logger import StageLogger
from .models import STDIN, ResolvedInput


def decode_text(data: bytes) -> Tuple[str, bool]:
    """
    Decode bytes as UTF-8, falling back to a lossy decode.

    Returns:
        Tuple of (text, lossy) where lossy is True if invalid sequences
        were replaced with U+FFFD
    """
    try:
        return data.decode('utf-8'), False
    except UnicodeDecodeError:
        return data.decode('utf-8', errors='replace'), True


def read_stdin(stream: BinaryIO) -> ResolvedInput:
    """Read a byte stream to EOF as the stdin input (empty label)."""
    text, lossy = decode_text(stream.read())
    if text and not text.endswith('\n'):
        text += '\n'
    return ResolvedInput(label='', content=text, lossy=lossy)


def load_file(path: str) -> ResolvedInput:
    """
    Load a file's full contents.

    Raises:
        InputReadError: If the file cannot be opened or read
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise InputReadError(path, e) from e
    text, lossy = decode_text(data)
    return ResolvedInput(label=path, content=text, lossy=lossy)


def load_inputs(identifiers: Iterable[str],
                stdin: Optional[BinaryIO] = None,
                logger: Optional[StageLogger] = None) -> List[ResolvedInput]:
    """
    Load every identifier, returning them in the given order.

    Stdin is read first, before any file, and placed back at the
    sentinel's position.

    Args:
        identifiers: Output of resolve_inputs()
        stdin: Byte stream to use for the STDIN sentinel (defaults to sys.stdin)
        logger: Optional stage logger

    Raises:
        InputReadError: On the first file that cannot be read
    """
    logger = logger or StageLogger('load')
    identifiers = list(identifiers)

    piped = None
    if STDIN in identifiers:
        piped = read_stdin(stdin if stdin is not None else sys.stdin.buffer)
        logger.info(f"stdin: {len(piped.content)} chars")
        if piped.lossy:
            logger.info("stdin: invalid UTF-8 replaced")

    loaded = []
    for identifier in identifiers:
        if identifier == STDIN:
            loaded.append(piped)
            continue
        item = load_file(identifier)
        logger.info(f"{identifier}: {len(item.content)} chars")
        if item.lossy:
            logger.info(f"{identifier}: invalid UTF-8 replaced")
        loaded.append(item)
    return loaded
