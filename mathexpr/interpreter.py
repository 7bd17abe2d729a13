"""Compile-once / evaluate-many interface over the tokenizer, parser and runtime.

Without variables::

    evaluate("-12.4 + exp(sin(rad(68))) * log10(96)")

With variables, mark each variable in the expression with ``'`` and register
its name (without the quotes) when compiling::

    expr = compile_expression("sin(rad('theta')) * 'len'", ["theta", "len"])
    expr.set_value("len", 2)
    for theta in range(0, 91):
        expr.set_value("theta", theta)
        expr.evaluate()

``'pi'`` (any case) is always the constant and needs no registration.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Union

from mathexpr import runtime
from mathexpr.errors import BadInitError, UnknownVariableError
from mathexpr.parser import convert
from mathexpr.program import CompiledProgram, VariableTable
from mathexpr.tokenizer import VARIABLE_DELIMITER, tokenize
from mathexpr.utils import strip_whitespace

logger = logging.getLogger(__name__)

Bindings = Union[Mapping[str, float], Iterable[tuple[str, float]]]


@dataclass
class CompiledExpression:
    source: str
    program: CompiledProgram
    variables: VariableTable

    @property
    def rpn(self) -> str:
        return str(self.program)

    def set_value(self, name: str, value: float) -> None:
        self.variables.set_value(name, value)

    def evaluate(self, values: Optional[Sequence[float]] = None) -> float:
        """Evaluate with the current bindings, or with ``values`` bound positionally in registration order"""
        if values is not None:
            self.variables.set_values(values)
        return runtime.evaluate(self.program, self.variables)


def compile_expression(expression: str, variable_names: Iterable[str] = ()) -> CompiledExpression:
    units = tokenize(expression)
    code = strip_whitespace(expression)

    variable_names = list(variable_names)
    for name in variable_names:
        if f"{VARIABLE_DELIMITER}{name}{VARIABLE_DELIMITER}" not in code:
            raise UnknownVariableError(f"Variable not found in the input expression: {name}", code=code, name=name)
    variables = VariableTable.from_names(variable_names)

    program = convert(units, variables, code=code)
    logger.debug("Variables of %r: %s", code, variables.names)
    return CompiledExpression(source=expression, program=program, variables=variables)


def _as_pairs(variables: Union[Bindings, Sequence[float], None]) -> list[tuple[str, float]]:
    if isinstance(variables, Mapping):
        return list(variables.items())
    pairs = list(variables or ())
    for item in pairs:
        if not (isinstance(item, (tuple, list)) and len(item) == 2 and isinstance(item[0], str)):
            raise BadInitError(
                f"Variables of an uncompiled expression must be given by name, got {item!r}; "
                "compile the expression to bind values by position"
            )
    return pairs


def set_value(expression: CompiledExpression, name: str, value: float) -> None:
    expression.set_value(name, value)


def evaluate(
    expression: Union[str, CompiledExpression],
    variables: Union[Bindings, Sequence[float], None] = None,
) -> float:
    """Evaluate a compiled expression, or compile and evaluate an expression string in one go.

    For a compiled expression ``variables`` is either a name -> value mapping or a
    sequence of values in registration order. For a string it is a mapping or an
    iterable of ``(name, value)`` pairs, and every name is registered.
    """
    if isinstance(expression, CompiledExpression):
        if isinstance(variables, Mapping):
            for name, value in variables.items():
                expression.set_value(name, value)
            return expression.evaluate()
        return expression.evaluate(variables)

    pairs = _as_pairs(variables)
    compiled = compile_expression(expression, [name for name, _ in pairs])
    for name, value in pairs:
        compiled.set_value(name, value)
    return compiled.evaluate()
