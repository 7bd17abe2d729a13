from typing import Callable, Sequence, Union

import numpy as np

from mathexpr.builtins import BUILTIN_FUNCS
from mathexpr.errors import BadRPNError, ExpressionSyntaxError
from mathexpr.program import BinaryOperator, CompiledProgram, Function, Number, Operator, Variable, VariableTable

BinaryOperationImpl = Callable[[float, float], float]

BINARY_OPERATIONS: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: np.add,
    BinaryOperator.SUB: np.subtract,
    BinaryOperator.MUL: np.multiply,
    BinaryOperator.DIV: np.divide,
    BinaryOperator.MOD: np.fmod,
    BinaryOperator.POW: np.power,
}


def evaluate(program: CompiledProgram, bindings: Union[VariableTable, Sequence[float]] = ()) -> float:
    """Run the compiled program on a fresh number stack and return the single value left on it.

    Domain errors follow IEEE-754: log of a negative number, division by zero and
    the like produce nan or inf rather than an exception.
    """
    if not program.instructions:
        raise BadRPNError("The compiled program is empty")

    values = bindings.values if isinstance(bindings, VariableTable) else bindings
    stack: list[float] = []
    with np.errstate(all="ignore"):
        for instr in program.instructions:
            if isinstance(instr, Number):
                stack.append(instr.value)
            elif isinstance(instr, Variable):
                stack.append(values[instr.index])
            elif isinstance(instr, Operator):
                if len(stack) < 2:
                    raise ExpressionSyntaxError(f"Not enough operands for {instr.raw_text!r}")
                right = stack.pop()
                left = stack.pop()
                stack.append(BINARY_OPERATIONS[instr.operator](left, right))
            elif isinstance(instr, Function):
                if not stack:
                    raise ExpressionSyntaxError(f"No argument for {instr.raw_text!r}")
                impl = BUILTIN_FUNCS.get(instr.function)
                if impl is None:
                    raise ExpressionSyntaxError(f"Function {instr.function} is not implemented")
                stack.append(impl(stack.pop()))
            else:
                raise ExpressionSyntaxError(f"Unexpected instruction: {instr}")

    if len(stack) != 1:
        raise ExpressionSyntaxError(f"Evaluation left {len(stack)} values on the stack, expected 1")
    return float(stack[0])
