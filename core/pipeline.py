"""
One ctxcat run: resolve -> load -> select markers -> write.

Every input is loaded before the first byte of the envelope is written, so
a missing file produces no output at all.
"""

from typing import BinaryIO, Iterable, List, Optional, TextIO

from .comments import comment_marker
from .loader import load_inputs
from .logger import StageLogger
from .models import ResolvedInput
from .resolver import resolve_inputs
from .validation import OutputOptions
from .writer import write_envelope


def run(requested: Iterable[str],
        options: OutputOptions,
        sink: TextIO,
        stdin: Optional[BinaryIO] = None,
        logger: Optional[StageLogger] = None) -> List[ResolvedInput]:
    """
    Run the pipeline once.

    Args:
        requested: Identifiers from the command line
        options: Validated output options
        sink: Text stream receiving the envelope
        stdin: Byte stream for the '-' sentinel (defaults to sys.stdin)
        logger: Base logger; per-stage loggers are derived from it

    Returns:
        The inputs that were written, in order

    Raises:
        InputReadError: Before any output is written
        OutputWriteError: Partway through writing
    """
    logger = logger or StageLogger('ctxcat')

    identifiers = resolve_inputs(requested)
    logger.child('resolve').info(f"{len(identifiers)} input(s): {', '.join(identifiers)}")

    inputs = load_inputs(identifiers, stdin=stdin, logger=logger.child('load'))
    markers = [comment_marker(item.label, options.comment_override) for item in inputs]

    write_log = logger.child('write')
    write_envelope(sink, options.container_tag, inputs, markers)
    write_log.success(f"wrote {len(inputs)} input(s) in <{options.container_tag}>")
    return inputs
