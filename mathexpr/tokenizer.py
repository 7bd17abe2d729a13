import enum
import math
import re
from dataclasses import dataclass

from mathexpr.errors import BadInitError, ExpressionSyntaxError
from mathexpr.utils import PrintableEnum, strip_whitespace

VARIABLE_DELIMITER = "'"
OPERATOR_CHARS = "+-*/%^"
PI_NAMES = {"pi"}


class UnitKind(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    FUNCTION = enum.auto()
    VARIABLE = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()


@dataclass(frozen=True)
class LexicalUnit:
    text: str
    kind: UnitKind
    position: int = 0

    def __str__(self) -> str:
        return f"<{self.kind}>{self.text}"


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


def _is_identifier_start(s: str) -> bool:
    return s.isalpha() or s == "_"


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalnum() or s == "_"


def _is_sign(code: str, i: int) -> bool:
    """Whether the ``-`` at ``i`` belongs to a number literal rather than being a binary minus.

    A minus is a sign when it opens the expression, follows ``(`` or follows an
    operator character. The preceding character is then itself either a binary
    operator or another sign, so chains like ``--5`` resolve to one literal.
    """
    if code[i] != "-":
        return False
    return i == 0 or code[i - 1] == "(" or code[i - 1] in OPERATOR_CHARS


def tokenize(expr: str) -> list[LexicalUnit]:
    code = strip_whitespace(expr)
    if not code:
        raise BadInitError("Input expression was not set")

    i = 0
    units: list[LexicalUnit] = []
    while i < len(code):
        if _is_valid_in_number(code[i]) or _is_sign(code, i):
            number_end_idx = i
            while number_end_idx < len(code) and _is_sign(code, number_end_idx):
                number_end_idx += 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            units.append(LexicalUnit(code[i:number_end_idx], UnitKind.NUMBER, position=i))
            i = number_end_idx
        elif code[i] in OPERATOR_CHARS:
            units.append(LexicalUnit(code[i], UnitKind.OPERATOR, position=i))
            i += 1
        elif code[i] == "(":
            units.append(LexicalUnit(code[i], UnitKind.LEFT_PAREN, position=i))
            i += 1
        elif code[i] == ")":
            units.append(LexicalUnit(code[i], UnitKind.RIGHT_PAREN, position=i))
            i += 1
        elif code[i] == VARIABLE_DELIMITER:
            name_end_idx = code.find(VARIABLE_DELIMITER, i + 1)
            if name_end_idx == -1:
                raise ExpressionSyntaxError("Unterminated variable name", code=code, error_char_idx=i)
            name = code[i + 1 : name_end_idx]
            if not name:
                raise ExpressionSyntaxError("Empty variable name", code=code, error_char_idx=i)
            if name.lower() in PI_NAMES:
                units.append(LexicalUnit(repr(math.pi), UnitKind.NUMBER, position=i))
            else:
                units.append(LexicalUnit(name, UnitKind.VARIABLE, position=i))
            i = name_end_idx + 1
        elif _is_identifier_start(code[i]):
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and _is_valid_in_identifier(code[ident_end_idx]):
                ident_end_idx += 1
            units.append(LexicalUnit(code[i:ident_end_idx], UnitKind.FUNCTION, position=i))
            i = ident_end_idx
        else:
            raise ExpressionSyntaxError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)

    return units


def untokenize(units: list[LexicalUnit]) -> str:
    result = " ".join(
        f"{VARIABLE_DELIMITER}{u.text}{VARIABLE_DELIMITER}" if u.kind is UnitKind.VARIABLE else u.text for u in units
    )

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # sin (1) => sin(1)
    result = re.sub(r"(\w)\s+\(", r"\1(", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
