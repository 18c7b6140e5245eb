#!/usr/bin/env python3
import io
import sys
import argparse
import traceback
from colorama import just_fix_windows_console, Fore

from commands.concat import concat_main

__version__ = "0.1.0"


def create_parser():
    p = argparse.ArgumentParser(
        prog="ctxcat",
        description="ctxcat: concatenate files into one tagged block for an LLM context window"
    )
    p.add_argument('files', nargs='*', metavar='FILE',
                   help='Input files to process ("-" reads standard input; none reads only stdin)')
    p.add_argument('-c', '--container', default='code',
                   help='Container tag to use (default: code)')
    p.add_argument('-p', '--comment-prefix', dest='comment_prefix', default=None,
                   help='Comment marker for every file, instead of detecting it from the suffix')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Log progress to stderr')
    p.add_argument('--no-color', dest='color', action='store_false',
                   help='Disable colored stderr output')
    p.add_argument('-V', '--version', action='version',
                   version=f"%(prog)s {__version__}")
    return p


def main(argv=None):
    parser = create_parser()
    args   = parser.parse_args(argv)

    # init() would wrap stdout too and rewrite escape codes inside file content
    just_fix_windows_console()

    # envelope is UTF-8 with content newlines untouched, whatever the console locale
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", newline="")

    try:
        code = concat_main(
            files          = args.files,
            container      = args.container,
            comment_prefix = args.comment_prefix,
            verbose        = args.verbose,
            color          = args.color,
        )
    except Exception:
        print((Fore.RED if args.color else "") + "[ERROR] Unhandled exception:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == '__main__':
    main()
