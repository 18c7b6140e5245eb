"""
Envelope writer.

Layout:

    <tag>
    MARKER LABEL
    content
    (blank line between inputs)
    MARKER LABEL
    content
    </tag>

Content is written exactly as loaded. Writing is streamed: a failing sink
leaves whatever was already written in place.
"""

import io
from typing import Iterator, Sequence, TextIO

from .exceptions import OutputWriteError
from .models import ResolvedInput


def envelope_pieces(tag: str,
                    inputs: Sequence[ResolvedInput],
                    markers: Sequence[str]) -> Iterator[str]:
    """Yield the envelope in write order."""
    if len(inputs) != len(markers):
        raise ValueError(f"Got {len(inputs)} inputs but {len(markers)} markers")

    yield f"<{tag}>\n"
    last = len(inputs) - 1
    for index, (item, marker) in enumerate(zip(inputs, markers)):
        yield f"{marker} {item.label}\n"
        yield item.content
        if index != last:
            yield "\n"
    yield f"</{tag}>\n"


def write_envelope(sink: TextIO,
                   tag: str,
                   inputs: Sequence[ResolvedInput],
                   markers: Sequence[str]) -> None:
    """
    Stream the envelope to a text sink and flush it.

    Raises:
        OutputWriteError: If the sink rejects a write
    """
    try:
        for piece in envelope_pieces(tag, inputs, markers):
            sink.write(piece)
        sink.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputWriteError(e) from e


def render_envelope(tag: str,
                    inputs: Sequence[ResolvedInput],
                    markers: Sequence[str]) -> str:
    """Build the envelope in memory."""
    buf = io.StringIO()
    write_envelope(buf, tag, inputs, markers)
    return buf.getvalue()
