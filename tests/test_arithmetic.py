import math

import pytest

from mathexpr.parser import convert
from mathexpr.program import VariableTable
from mathexpr.runtime import evaluate
from mathexpr.tokenizer import tokenize


def _eval(code: str) -> float:
    return evaluate(convert(tokenize(code), VariableTable(), code=code))


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("(2 + 3) * 4", 20.0),
        # unary minus
        pytest.param("-5 + 3", -2.0),
        pytest.param("3 - -5", 8.0),
        pytest.param("(-5)", -5.0),
        pytest.param("2*-3", -6.0),
        pytest.param("--5", 5.0),
        pytest.param("3---5", -2.0),
        # powers and remainders
        pytest.param("2 ^ 3", 8.0),
        pytest.param("2 ^ 3 ^ 2", 64.0, id="pow-is-left-associative"),
        pytest.param("2 * 3 ^ 2", 18.0),
        pytest.param("2^-1", 0.5),
        pytest.param("7 % 3", 1.0),
        pytest.param("-7 % 3", -1.0),
        pytest.param("7.5 % 2", 1.5),
        # literals
        pytest.param("1.5 * 4", 6.0),
        pytest.param(".5 + .5", 1.0),
        pytest.param("5.", 5.0),
        pytest.param("1 2 + 3", 15.0, id="whitespace-is-not-significant"),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert _eval(code) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("1 + 2 * 3 - 4 / 5"),
        pytest.param("((1.25 - 3) * (2 + 0.5)) / 7"),
        pytest.param("100 / 3 / 3 * 9 - 1"),
        pytest.param("-0.5 * 12 + 3 * (4 - 10)"),
        pytest.param("8 - (3 - (2 - (1 - 0.125)))"),
        pytest.param("123.456 * 0.001 + 99 / 11"),
        pytest.param("2 * (3 + 4) * (5 - 6) / (7 + 8)"),
        pytest.param("1 - -1 - -1"),
    ],
)
def test_eval_arithmetic_matches_python(code: str) -> None:
    assert math.isclose(_eval(code), eval(code), rel_tol=1e-9)
