# Author:   LemonScript developers
# Date:     10/19/2026

"""LemonScript surface syntax and the parser built from it.

Operators have no precedence: `expr` is a flat chain of `equation` links
(operand followed by operator) ended by a final operand, resolved left to
right by the evaluator. Parentheses only group.
"""

from dataclasses import dataclass, field

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

STDIN = "<stdin>"

grammar = r"""
  language: assign
          | expr
          | listexpr

  assign: identifier "=" (expr | listexpr)

  expr: equation* _operand

  equation: _operand operator

  _operand: number
          | identifier
          | bracexpr

  bracexpr: "(" expr ")"

  listexpr: "[" expr (separator expr)* "]"

  !separator: ","

  !operator: "+" | "-" | "*" | "/" | "%" | "^"

  number: NUMBER
  identifier: IDENTIFIER

  NUMBER: /-?[0-9]+/
  IDENTIFIER: /[a-zA-Z_][a-zA-Z0-9_]*/

  %import common.WS
  %ignore WS
"""

# the contextual lexer reads '-' as an operator after an operand and as the
# sign of a literal where an operand is expected
parser = Lark(grammar, start="language", parser="lalr")


@dataclass
class LemonSyntaxError(Exception):
    text: str
    column: int
    expected: list = field(default_factory=list)
    found: str = "end of input"
    source: str = STDIN
    lineno: int = 1

    def __str__(self) -> str:
        return "\n".join(
            [
                f"{self.source}:{self.lineno}:{self.column}: error: {self.message}",
                self.text,
                " " * (self.column - 1) + "^",
            ]
        )

    @property
    def message(self) -> str:
        if not self.expected:
            return f"unexpected {self.found}"
        return f"expected {_join(self.expected)} at {self.found}"


def _join(names):
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


def describe_terminal(name: str) -> str:
    if name == "$END":
        return "end of input"
    try:
        pattern = parser.get_terminal(name).pattern
    except KeyError:
        return name
    if pattern.type == "str":
        return repr(pattern.value)
    return name.lower()


def _syntax_error(e, text, source, lineno):
    at_end = isinstance(e, UnexpectedEOF) or (isinstance(e, UnexpectedToken) and e.token.type == "$END")

    if isinstance(e, UnexpectedCharacters):
        expected = e.allowed or set()
    else:
        expected = getattr(e, "expected", None) or set()

    if at_end:
        found = "end of input"
        column = len(text) + 1
    elif isinstance(e, UnexpectedCharacters):
        found = repr(e.char)
        column = e.column
    else:
        found = repr(str(e.token))
        column = e.column

    return LemonSyntaxError(
        text=text,
        column=max(column, 1),
        expected=sorted({describe_terminal(name) for name in expected}),
        found=found,
        source=source,
        lineno=lineno,
    )


def parse(text: str, source: str = STDIN, lineno: int = 1) -> Tree:
    """Parses one whole line; partial matches are rejected."""
    try:
        return parser.parse(text)
    except UnexpectedInput as e:
        raise _syntax_error(e, text, source, lineno) from None
