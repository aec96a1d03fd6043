from typing import Optional

import pytest
from lark import Token, Tree

from lemonscript.arithmetic import INT_MAX, INT_MIN
from lemonscript.environment import Env
from lemonscript.evaluator import evaluate
from lemonscript.grammar import parse
from lemonscript.values import Error, ErrorKind, ListValue, Number, Value, VariableRef


def run(code: str, env: Optional[Env] = None) -> Value:
    return evaluate(parse(code), env if env is not None else Env())


def run_all(*lines: str) -> Value:
    env = Env()
    results = [run(line, env) for line in lines]
    return results[-1]


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("1", 1),
        pytest.param("-1", -1),
        pytest.param("1 + 2", 3),
        pytest.param("(1 + 2)", 3),
        pytest.param("(((1)))", 1),
        pytest.param("2 - 3 + 1", 0),
        pytest.param("(2 - 3 + 1)", 0),
        pytest.param("2 + 3 * 2", 10),
        pytest.param("1 + 4 * 5", 25),
        pytest.param("((2 + 3) * 2)", 10),
        pytest.param("2 * (3 + 4)", 14),
        pytest.param("2 * (3 + 4) - 1", 13),
        pytest.param("1 + (2 * (3 + (4 - 1)))", 13),
        pytest.param("10 / 5 / 2", 1),
        pytest.param("7 / 2", 3),
        pytest.param("-7 / 2", -3),
        pytest.param("7 % 4", 3),
        pytest.param("2 ^ 3 ^ 2", 64),
        pytest.param("2 ^ 0", 1),
        pytest.param("2 -3", -1),
        pytest.param("2 - -3", 5),
        pytest.param("9223372036854775807", INT_MAX),
        pytest.param("-9223372036854775808", INT_MIN),
        pytest.param("9223372036854775807 + 1", INT_MIN),
        pytest.param("-0", 0),
        pytest.param("0" * 5000 + "1", 1),
        pytest.param("-" + "0" * 30 + "42 + 1", -41),
    ],
)
def test_eval_arithmetic(code: str, expected: int) -> None:
    assert run(code) == Number(expected)


@pytest.mark.parametrize(
    "code, kind",
    [
        pytest.param("5 / 0", ErrorKind.DIVIDE_BY_ZERO),
        pytest.param("-5 / 0", ErrorKind.DIVIDE_BY_ZERO),
        pytest.param("5 % 0", ErrorKind.MODULO_BY_ZERO),
        pytest.param("(1 + 1) % (2 - 2)", ErrorKind.MODULO_BY_ZERO),
        pytest.param("x", ErrorKind.UNDEFINED_VARIABLE),
        pytest.param("(x + 1)", ErrorKind.UNDEFINED_VARIABLE),
        pytest.param("1 + x", ErrorKind.UNDEFINED_VARIABLE),
        pytest.param("9223372036854775808", ErrorKind.INVALID_NUMBER),
        pytest.param("-9223372036854775809", ErrorKind.INVALID_NUMBER),
        pytest.param("9" * 5000, ErrorKind.INVALID_NUMBER),
        pytest.param("-" + "1" * 20, ErrorKind.INVALID_NUMBER),
        pytest.param("1 + " + "0" * 4400 + "9" * 4400, ErrorKind.INVALID_NUMBER),
        pytest.param("1 + 99999999999999999999 / 0", ErrorKind.INVALID_NUMBER),
        pytest.param("1 / 0 + x", ErrorKind.DIVIDE_BY_ZERO),
        pytest.param("x + 1 / 0", ErrorKind.UNDEFINED_VARIABLE),
        pytest.param("2 * (1 / 0)", ErrorKind.DIVIDE_BY_ZERO),
    ],
)
def test_eval_error(code: str, kind: ErrorKind) -> None:
    assert run(code) == Error(kind)


def test_assign_then_reference() -> None:
    env = Env()
    assert run("x = 5", env) == VariableRef("x")
    assert run("x", env) == Number(5)
    assert run("x * 2", env) == Number(10)


def test_reassign_replaces_binding() -> None:
    env = Env()
    run("x = 5", env)
    old = env.lookup("x")
    run("x = 7", env)
    assert run("x", env) == Number(7)
    assert env.lookup("x") is not old
    assert len(env) == 1


def test_assign_stores_a_copy() -> None:
    env = Env()
    tree = parse("x = 1 + 2")
    evaluate(tree, env)
    rhs = tree.children[0].children[1]
    stored = env.lookup("x").expr
    assert stored == rhs
    assert stored is not rhs
    rhs.children.clear()
    assert run("x", env) == Number(3)


def test_assign_is_lazy() -> None:
    env = Env()
    assert run("y = 1 / 0", env) == VariableRef("y")
    assert run("y", env) == Error(ErrorKind.DIVIDE_BY_ZERO)
    assert run("z = w + 1", env) == VariableRef("z")
    assert run("z", env) == Error(ErrorKind.UNDEFINED_VARIABLE)
    run("w = 41", env)
    assert run("z", env) == Number(42)


def test_reference_follows_later_reassignment() -> None:
    env = Env()
    run("a = 1", env)
    run("b = a + 1", env)
    assert run("b", env) == Number(2)
    run("a = 10", env)
    assert run("b", env) == Number(11)


def test_repeated_reference_is_not_circular() -> None:
    assert run_all("x = 3", "y = x * x + x", "y") == Number(12)


@pytest.mark.parametrize(
    "lines",
    [
        pytest.param(["x = x + 1", "x"]),
        pytest.param(["a = b", "b = a", "a"]),
        pytest.param(["a = b", "b = (1 + a)", "b * 2"]),
    ],
)
def test_circular_reference(lines: list) -> None:
    assert run_all(*lines) == Error(ErrorKind.CIRCULAR_REFERENCE)


def test_list() -> None:
    value = run("[1, 2 + 3, (4)]")
    assert value == ListValue((Number(1), Number(5), Number(4)))
    assert str(value) == "[1, 5, 4]"


def test_list_first_error_wins() -> None:
    assert run("[1, x, 1 / 0]") == Error(ErrorKind.UNDEFINED_VARIABLE)


def test_list_variable() -> None:
    env = Env()
    assert run("xs = [1, 2]", env) == VariableRef("xs")
    assert str(run("xs", env)) == "[1, 2]"
    assert str(run("[xs, 3]", env)) == "[[1, 2], 3]"
    assert run("xs + 1", env) == Error(ErrorKind.INVALID_OPERAND)


@pytest.mark.parametrize(
    "node",
    [
        pytest.param(Tree("mystery", [Token("NUMBER", "1")])),
        pytest.param(Tree("separator", [Token("COMMA", ",")])),
    ],
)
def test_unknown_node(node: Tree) -> None:
    assert evaluate(node, Env()) == Error(ErrorKind.BAD_OPERATOR)


@pytest.mark.parametrize(
    "value, printed",
    [
        pytest.param(Number(-12), "-12"),
        pytest.param(VariableRef("x"), "x"),
        pytest.param(Error(ErrorKind.DIVIDE_BY_ZERO), "Error: Division By Zero!"),
        pytest.param(Error(ErrorKind.MODULO_BY_ZERO), "Error: Modulus By Zero!"),
        pytest.param(Error(ErrorKind.INVALID_NUMBER), "Error: Invalid Number!"),
        pytest.param(Error(ErrorKind.UNDEFINED_VARIABLE), "Error: Undefined Variable!"),
        pytest.param(Error(ErrorKind.BAD_OPERATOR), "Error: Invalid Operator!"),
    ],
)
def test_printed_value(value: Value, printed: str) -> None:
    assert str(value) == printed
