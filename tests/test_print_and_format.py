import pytest

from lumen.debug_utils.pprint import format_node, format_value
from lumen.reader.parser import parse
from lumen.types.nodes import Num


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
        (1e-07, "0.0000001"),
        (float("inf"), "inf"),
        ("text", "text"),
    ]
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_closure(run):
    assert format_value(run("lambda fact(n, acc) n")) == "<lambda fact(n, acc)>"
    assert format_value(run("lambda () 1")) == "<lambda()>"


@pytest.mark.parametrize(
    "source",
    [
        "1 + 2 * 3",
        "(1 + 2) * 3",
        "10 - (2 - 3)",
        "x = y || z && w",
        'f(1, "a \\" b")(g)',
        "(lambda (x) x + 1)(2)",
        "if a then b else c",
        "lambda fact(n) if n < 2 then 1 else n * fact(n - 1)",
        "let (a = 1, b) { a; b }",
        "(if a then 1 else 2) + 3",
        "x * 0.0000001",
        "1" + "0" * 300 + ".0",
    ]
)
def test_format_node_reparses_to_same_tree(source):
    node = parse(source).prog[0]
    assert parse(format_node(node)).prog[0] == node


def test_format_node_text():
    node = parse("a+b*c").prog[0]
    assert format_node(node) == "a + b * c"


@pytest.mark.parametrize(
    "value,expected",
    [
        (7, "7"),
        (2.0, "2.0"),
        (1e-07, "0.0000001"),
        (1e300, "1" + "0" * 300 + ".0"),
    ]
)
def test_number_literals_have_no_exponent(value, expected):
    assert format_node(Num(value)) == expected


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_number_has_no_literal(value):
    with pytest.raises(ValueError):
        format_node(Num(value))
