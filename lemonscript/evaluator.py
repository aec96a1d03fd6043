# Author:   LemonScript developers
# Date:     10/19/2026

from lark import Tree, v_args
from lark.visitors import Interpreter

from lemonscript.arithmetic import fold_chain, literal_value
from lemonscript.environment import Env
from lemonscript.values import Error, ErrorKind, ListValue, Number, OpCode, OperatorCode, Value, VariableRef


# Interpreter
#
# Walks one parse tree against an environment. Every node yields exactly one
# value; failures come back as Error values rather than exceptions.
@v_args(inline=True)
class Evaluator(Interpreter):
    def __init__(self, env: Env):
        self.env = env
        # names whose bindings are being evaluated right now
        self._resolving = set()

    # the whole line
    def language(self, construct):
        return self.visit(construct)

    # represents an integer literal
    def number(self, literal):
        value = literal_value(str(literal))
        if value is None:
            return Error(ErrorKind.INVALID_NUMBER)
        return Number(value)

    # represents one of + - * / % ^
    def operator(self, symbol):
        return OperatorCode(OpCode(str(symbol)))

    # represents the value of the expression bound to a name
    def identifier(self, name):
        name = str(name)
        binding = self.env.lookup(name)
        if binding is None:
            return Error(ErrorKind.UNDEFINED_VARIABLE)
        if name in self._resolving:
            return Error(ErrorKind.CIRCULAR_REFERENCE)

        self._resolving.add(name)
        try:
            return self.visit(binding.expr)
        finally:
            self._resolving.discard(name)

    # variable assignment, the right hand side is stored unevaluated
    def assign(self, target, expr):
        name = str(target.children[0])
        self.env.bind(name, expr)
        return VariableRef(name)

    # one link of a chain: an operand and the operator after it
    def equation(self, operand, operator):
        return self.visit(operand), self.visit(operator)

    # a chain of links, folded left to right
    def expr(self, *children):
        *equations, last = children
        return fold_chain((self.visit(eq) for eq in equations), lambda: self.visit(last))

    # parentheses only group
    def bracexpr(self, expr):
        return self.visit(expr)

    # list of expressions, the first error wins
    def listexpr(self, *children):
        items = []
        for child in children:
            if child.data == "separator":
                continue
            value = self.visit(child)
            if isinstance(value, Error):
                return value
            items.append(value)
        return ListValue(tuple(items))

    # any node without a rule of its own
    def __default__(self, tree):
        return Error(ErrorKind.BAD_OPERATOR)


def evaluate(node: Tree, env: Env) -> Value:
    return Evaluator(env).visit(node)
