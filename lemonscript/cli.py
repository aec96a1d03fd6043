# Author:   LemonScript developers
# Date:     10/19/2026

"""Command line entry point. With a file, evaluates each of its lines; without
one, starts the interactive shell.
"""

import argparse
import sys

from lemonscript.grammar import STDIN
from lemonscript.session import Session
from lemonscript.shell import Shell


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="lemonscript",
        description="LemonScript integer calculator",
    )
    parser.add_argument("file", help="file to evaluate line by line (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("--debug", action="store_true", help="print parse trees and result types to stderr")
    args = parser.parse_args(argv)

    if args.file is not None:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as e:
            print(f"lemonscript: error: '{args.file}' could not be opened: {e.strerror}", file=sys.stderr)
            return 1

    sess = Session(source=args.file or STDIN, debug=args.debug)
    shell = Shell(sess)
    try:
        if args.file is not None:
            shell.run_lines(lines)
        else:
            shell.cmdloop()
    except KeyboardInterrupt:
        print()
    finally:
        sess.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
