import enum
from dataclasses import dataclass
from typing import Optional

from mathexpr.utils import PrintableEnum, point_at


class ErrorKind(PrintableEnum):
    BAD_INIT = enum.auto()
    UNCLOSED_LEFT_PARENTHESIS = enum.auto()
    UNCLOSED_RIGHT_PARENTHESIS = enum.auto()
    SYNTAX_ERROR = enum.auto()
    UNKNOWN_VARIABLE = enum.auto()
    UNKNOWN_EXPRESSION = enum.auto()
    VARIABLE_COUNT_MISMATCH = enum.auto()
    BAD_RPN = enum.auto()


@dataclass
class CalcError(Exception):
    errmsg: str
    code: str = ""
    error_char_idx: Optional[int] = None

    kind = ErrorKind.SYNTAX_ERROR

    def __str__(self) -> str:
        lines = [f"[{self.kind}] {self.errmsg}"]
        if self.code and self.error_char_idx is not None:
            lines.extend(point_at(self.code, self.error_char_idx))
        return "\n".join(lines)


class BadInitError(CalcError):
    kind = ErrorKind.BAD_INIT


class UnclosedLeftParenthesisError(CalcError):
    kind = ErrorKind.UNCLOSED_LEFT_PARENTHESIS


class UnclosedRightParenthesisError(CalcError):
    kind = ErrorKind.UNCLOSED_RIGHT_PARENTHESIS


class ExpressionSyntaxError(CalcError):
    kind = ErrorKind.SYNTAX_ERROR


@dataclass
class UnknownVariableError(CalcError):
    name: str = ""

    kind = ErrorKind.UNKNOWN_VARIABLE


@dataclass
class UnknownExpressionError(CalcError):
    name: str = ""

    kind = ErrorKind.UNKNOWN_EXPRESSION


class VariableCountMismatchError(CalcError):
    kind = ErrorKind.VARIABLE_COUNT_MISMATCH


class BadRPNError(CalcError):
    kind = ErrorKind.BAD_RPN
