from mathexpr.errors import (
    BadInitError,
    BadRPNError,
    CalcError,
    ErrorKind,
    ExpressionSyntaxError,
    UnclosedLeftParenthesisError,
    UnclosedRightParenthesisError,
    UnknownExpressionError,
    UnknownVariableError,
    VariableCountMismatchError,
)
from mathexpr.interpreter import CompiledExpression, compile_expression, evaluate, set_value

__all__ = [
    "BadInitError",
    "BadRPNError",
    "CalcError",
    "CompiledExpression",
    "ErrorKind",
    "ExpressionSyntaxError",
    "UnclosedLeftParenthesisError",
    "UnclosedRightParenthesisError",
    "UnknownExpressionError",
    "UnknownVariableError",
    "VariableCountMismatchError",
    "compile_expression",
    "evaluate",
    "set_value",
]
