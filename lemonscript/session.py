# Author:   LemonScript developers
# Date:     10/19/2026

"""One LemonScript session: a single variable environment shared by every line it runs."""

import sys

from lemonscript.environment import Env
from lemonscript.evaluator import evaluate
from lemonscript.grammar import STDIN, parse
from lemonscript.values import Value


class Session:
    def __init__(self, env=None, source=STDIN, debug=False):
        self.env = env if env is not None else Env()
        self.source = source  # used for syntax error locations
        self.debug = debug    # trace parse trees and results on stderr

    def log(self, msg):
        if self.debug:
            print(f"[lemons] {msg}", file=sys.stderr)

    def run(self, line: str, lineno: int = 1) -> Value:
        """Parses and evaluates one line. Raises LemonSyntaxError before touching the environment."""
        tree = parse(line, source=self.source, lineno=lineno)
        if self.debug:
            self.log(tree.pretty().rstrip())

        value = evaluate(tree, self.env)
        self.log(f"{value.type_name()}: {value}")
        return value

    def close(self) -> None:
        self.log(f"releasing {len(self.env)} binding(s): " + ", ".join(self.env.names()))
        self.env.clear()
