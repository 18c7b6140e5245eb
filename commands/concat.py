#!/usr/bin/env python3
"""
Concatenate inputs into one tagged envelope on stdout.
"""

import sys

from core.exceptions import CtxcatError
from core.logger import StageLogger
from core import pipeline
from core.validation import build_options


def _report(err: CtxcatError, logger: StageLogger):
    logger.error(str(err))

    if err.context:
        if 'errors' in err.context:
            for i, error in enumerate(err.context['errors'], 1):
                logger.log(f"  {i}. {error}")
        elif 'cause' in err.context:
            logger.log(f"  - cause: {err.context['cause']}")


def concat_main(files, container: str = "code", comment_prefix: str = None,
                verbose: bool = False, color: bool = True,
                out=None, stdin=None):
    """
    Write the envelope for the given files.

    Args:
        files: File paths; '-' reads stdin, an empty list reads only stdin
        container: Container tag name
        comment_prefix: Comment marker for every input, overriding suffix detection
        verbose: Log progress on stderr
        color: Colorize stderr output
        out: Text sink (defaults to sys.stdout)
        stdin: Byte stream for '-' (defaults to sys.stdin.buffer)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logger = StageLogger('ctxcat', verbose=verbose, color=color)

    try:
        options = build_options(container, comment_prefix)
        pipeline.run(files, options,
                     sink=out if out is not None else sys.stdout,
                     stdin=stdin, logger=logger)
        return 0

    except CtxcatError as e:
        _report(e, logger)
        return 1
