import pytest

from lumen.errors import (
    LumenDivideByZero,
    LumenTypeError,
    LumenUndefinedVariable,
)
from lumen.evaluation.evaluator import evaluate
from lumen.types.closure import Closure
from lumen.types.nodes import Assign, Num, Str, Var

# -----------------------------------------------------
# Arithmetic, precedence and associativity
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 + 2 * 3", 7),
        ("2 * 3 + 4 * 5", 26),
        ("(1 + 2) * 3", 9),
        ("10 - 2 - 3", 5),
        ("100 / 10 / 5", 2),
        ("5 / 2", 2.5),
        ("7 % 3", 1),
        ("(0 - 7) % 3", -1),
        ("7 % (0 - 3)", 1),
        ("1.5 + 1.5", 3.0),
        ("2 * 3 % 4", 2),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 < 2", True),
        ("2 < 1", False),
        ("2 <= 2", True),
        ("3 >= 4", False),
        ("1 + 1 == 2", True),
        ('"a" == "a"', True),
        ('"1" == 1', False),
        ("true == 1", False),
        ("false == 0", False),
        ("1 == 1.0", True),
        ("1 != 2", True),
        ("true != false", True),
    ]
)
def test_comparison_and_equality(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("source", ['"a" + 1', "true + 1", "1 < false", "2 * lambda () 1"])
def test_arithmetic_requires_numbers(run, source):
    with pytest.raises(LumenTypeError, match="Expected number"):
        run(source)


@pytest.mark.parametrize("source", ["5 / 0", "5 % 0", "5 / 0.0", "1 / (2 - 2)"])
def test_divide_by_zero(run, source):
    with pytest.raises(LumenDivideByZero):
        run(source)


# -----------------------------------------------------
# Truthiness and short-circuiting
# -----------------------------------------------------


def test_short_circuit_and(run):
    assert run("false && (1 / 0)") is False


def test_short_circuit_or(run):
    assert run("true || (1 / 0)") is True


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 && 2", 2),
        ("0 && 2", 2),
        ('"" || 5', ""),
        ("false || 5", 5),
        ("false || false", False),
        ("true && false", False),
    ]
)
def test_logic_returns_operands(run, source, expected):
    assert run(source) == expected


def test_and_does_not_evaluate_right_side_on_false(run):
    run("count = 0")
    run("false && (count = count + 1)")
    run("true || (count = count + 1)")
    assert run("count") == 0
    run("true && (count = count + 1)")
    assert run("count") == 1


@pytest.mark.parametrize(
    "source,expected",
    [
        ("if 0 then 1 else 2", 1),
        ('if "" then 1 else 2', 1),
        ("if false then 1 else 2", 2),
        ("if false then 1", False),
        ("if 1 < 2 { 10 } else { 20 }", 10),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


# -----------------------------------------------------
# Blocks and sequences
# -----------------------------------------------------


def test_empty_block_is_false(run):
    assert run("{}") is False


def test_single_expression_block(run):
    assert run("{ 42 }") == 42


def test_sequence_returns_last_value(run):
    assert run("{ a = 1; b = a + 1; b * 10 }") == 20
    assert run("a; b") == 2


def test_empty_program_is_false(run):
    assert run("") is False


# -----------------------------------------------------
# Variables and assignment
# -----------------------------------------------------


def test_undefined_variable(run):
    with pytest.raises(LumenUndefinedVariable, match="Undefined variable nope"):
        run("nope")


def test_assignment_at_toplevel_creates_global(run, env):
    assert run("x = 5") == 5
    assert env.vars["x"] == 5
    assert run("x = x + 1; x") == 6


def test_assignment_in_local_scope_requires_binding(run):
    with pytest.raises(LumenUndefinedVariable):
        run("let (a = 1) b = 2")
    with pytest.raises(LumenUndefinedVariable):
        run("(lambda () fresh = 1)()")


def test_assignment_in_local_scope_updates_global(run, env):
    run("total = 0")
    run("(lambda (n) total = total + n)(5)")
    assert env.vars["total"] == 5


def test_assignment_evaluates_right_side_first(run):
    with pytest.raises(LumenUndefinedVariable):
        run("x = y")
    with pytest.raises(LumenUndefinedVariable):
        run("x")


def test_assignment_target_rechecked_at_runtime(env):
    with pytest.raises(LumenTypeError, match="Cannot assign"):
        evaluate(Assign(Num(1), Num(2)), env)


def test_literals_evaluate_to_themselves(env):
    assert evaluate(Str("hi"), env) == "hi"
    env.define("v", 3)
    assert evaluate(Var("v"), env) == 3


# -----------------------------------------------------
# let
# -----------------------------------------------------


def test_let_sees_earlier_bindings(run):
    assert run("let (a = 1, b = a + 1) b") == 2


def test_let_initializer_does_not_see_itself(run):
    with pytest.raises(LumenUndefinedVariable):
        run("let (a = a) a")


def test_let_initializer_sees_outer_binding_of_same_name(run):
    run("a = 10")
    assert run("let (a = a + 1) a") == 11
    assert run("a") == 10


def test_let_without_initializer_is_false(run):
    assert run("let (a) a") is False


def test_let_bindings_are_local(run):
    run("let (tmp = 1) tmp")
    with pytest.raises(LumenUndefinedVariable):
        run("tmp")


def test_let_body_can_assign_its_bindings(run):
    assert run("let (a = 1) { a = a + 41; a }") == 42


# -----------------------------------------------------
# Calls
# -----------------------------------------------------


def test_call_non_callable(run):
    with pytest.raises(LumenTypeError, match="not a function"):
        run("5(1)")


def test_call_host_function(run, env):
    seen = []

    def record(*args):
        seen.append(args)
        return len(args)

    env.define("record", record)
    assert run("record(1 + 1, \"b\", true)") == 3
    assert seen == [(2, "b", True)]


def test_arguments_evaluated_left_to_right(run, env):
    order = []
    env.define("mark", lambda x: order.append(x) or x)
    env.define("add", lambda a, b: a + b)
    assert run("add(mark(1), mark(2))") == 3
    assert order == [1, 2]


def test_lambda_produces_closure(run):
    fn = run("lambda add(a, b) a + b")
    assert isinstance(fn, Closure)
    assert fn.params == ("a", "b")
    assert fn(2, 3) == 5
