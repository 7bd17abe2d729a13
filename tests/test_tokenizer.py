import math

import pytest

from mathexpr.errors import BadInitError, ErrorKind, ExpressionSyntaxError
from mathexpr.tokenizer import LexicalUnit, UnitKind, tokenize, untokenize

N = UnitKind.NUMBER
O = UnitKind.OPERATOR
F = UnitKind.FUNCTION
V = UnitKind.VARIABLE
L = UnitKind.LEFT_PAREN
R = UnitKind.RIGHT_PAREN


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("1", [("1", N)]),
        pytest.param("12.75", [("12.75", N)]),
        pytest.param("-5 + 3", [("-5", N), ("+", O), ("3", N)]),
        pytest.param("3 - -5", [("3", N), ("-", O), ("-5", N)]),
        pytest.param("3-5", [("3", N), ("-", O), ("5", N)]),
        pytest.param("(-5)", [("(", L), ("-5", N), (")", R)]),
        pytest.param("--5", [("--5", N)]),
        pytest.param("2^-1", [("2", N), ("^", O), ("-1", N)]),
        pytest.param("(2)-1", [("(", L), ("2", N), (")", R), ("-", O), ("1", N)]),
        pytest.param("4 % 3", [("4", N), ("%", O), ("3", N)]),
        pytest.param("2 * 'x'", [("2", N), ("*", O), ("x", V)]),
        pytest.param("'x'-1", [("x", V), ("-", O), ("1", N)]),
        pytest.param("sin(2)", [("sin", F), ("(", L), ("2", N), (")", R)]),
        pytest.param("LOG10(100)", [("LOG10", F), ("(", L), ("100", N), (")", R)]),
        pytest.param("sin)2(", [("sin", F), (")", R), ("2", N), ("(", L)]),
        pytest.param(" 1 \t+\n 2 ", [("1", N), ("+", O), ("2", N)]),
    ],
)
def test_tokenize(code: str, expected: list[tuple[str, UnitKind]]) -> None:
    assert [(u.text, u.kind) for u in tokenize(code)] == expected


@pytest.mark.parametrize("code", ["'pi'", "'PI'", "'Pi'"])
def test_pi_becomes_number(code: str) -> None:
    (unit,) = tokenize(code)
    assert unit.kind is UnitKind.NUMBER
    assert float(unit.text) == math.pi


def test_positions_refer_to_stripped_code() -> None:
    units = tokenize(" 1 +  sin( 'x' )")
    assert [u.position for u in units] == [0, 1, 2, 5, 6, 9]


@pytest.mark.parametrize("code", ["", " ", "\t\n"])
def test_empty_expression(code: str) -> None:
    with pytest.raises(BadInitError) as exc_info:
        tokenize(code)
    assert exc_info.value.kind is ErrorKind.BAD_INIT


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("1 # 2", 1),
        pytest.param("2, 3", 1),
        pytest.param("1 + 'x", 2, id="unterminated-variable"),
        pytest.param("1 + ''", 2, id="empty-variable"),
    ],
)
def test_tokenize_errors(code: str, error_char_idx: int) -> None:
    with pytest.raises(ExpressionSyntaxError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_char_idx


def test_error_points_at_character() -> None:
    with pytest.raises(ExpressionSyntaxError) as exc_info:
        tokenize("1 # 2")
    assert str(exc_info.value).splitlines() == ["[SYNTAX_ERROR] Unexpected character: '#'", "1#2", " ^"]


def test_units_are_immutable() -> None:
    unit = LexicalUnit("1", UnitKind.NUMBER)
    with pytest.raises(AttributeError):
        unit.text = "2"  # type: ignore


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("(1+2)*sin('x')", "(1 + 2) * sin('x')"),
        pytest.param("4^5", "4^5"),
        pytest.param("-5 - -5", "-5 - -5"),
    ],
)
def test_untokenize(code: str, expected: str) -> None:
    assert untokenize(tokenize(code)) == expected
