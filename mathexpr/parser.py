import logging
import re
from typing import Union

from mathexpr.builtins import lookup_function
from mathexpr.errors import (
    ExpressionSyntaxError,
    UnclosedLeftParenthesisError,
    UnclosedRightParenthesisError,
    UnknownExpressionError,
    UnknownVariableError,
)
from mathexpr.program import (
    BinaryOperator,
    CompiledProgram,
    Function,
    Instruction,
    Number,
    Operator,
    Variable,
    VariableTable,
)
from mathexpr.tokenizer import LexicalUnit, UnitKind

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"(?P<signs>-*)(?P<digits>\d+\.?\d*|\.\d+)")

PRECEDENCE = {
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
    "%": 3,
    "^": 4,
}
PAREN_PRECEDENCE = 1
FUNCTION_PRECEDENCE = 5

PendingSlot = Union[LexicalUnit, Instruction]


def get_precedence(unit: LexicalUnit) -> int:
    if unit.kind is UnitKind.FUNCTION:
        return FUNCTION_PRECEDENCE
    if unit.kind is UnitKind.OPERATOR:
        return PRECEDENCE[unit.text]
    return PAREN_PRECEDENCE


def convert(units: list[LexicalUnit], known_variables: VariableTable, code: str = "") -> CompiledProgram:
    """Shunting-yard conversion of infix lexical units into a compiled postfix program.

    Variables are resolved to their table index while scanning. Everything else
    is resolved after the scan, once parenthesis balance has been checked, so a
    missing ``)`` is reported as such and not as whatever it breaks downstream.
    """
    operator_stack: list[LexicalUnit] = []
    output: list[PendingSlot] = []

    for unit in units:
        if unit.kind is UnitKind.NUMBER:
            output.append(unit)
        elif unit.kind is UnitKind.VARIABLE:
            if unit.text not in known_variables:
                raise UnknownVariableError(
                    f"Variable {unit.text!r} was not registered",
                    code=code,
                    error_char_idx=unit.position,
                    name=unit.text,
                )
            output.append(Variable(index=known_variables.index_of(unit.text), raw_text=unit.text))
        elif unit.kind is UnitKind.OPERATOR:
            while operator_stack and get_precedence(operator_stack[-1]) >= get_precedence(unit):
                output.append(operator_stack.pop())
            operator_stack.append(unit)
        elif unit.kind in (UnitKind.LEFT_PAREN, UnitKind.FUNCTION):
            operator_stack.append(unit)
        elif unit.kind is UnitKind.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].kind is not UnitKind.LEFT_PAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise UnclosedLeftParenthesisError(
                    "Right parenthesis without a matching left one", code=code, error_char_idx=unit.position
                )
            operator_stack.pop()
        else:
            raise ExpressionSyntaxError(f"Unexpected unit: {unit}", code=code, error_char_idx=unit.position)

    while operator_stack:
        output.append(operator_stack.pop())

    for slot in output:
        if isinstance(slot, LexicalUnit) and slot.kind is UnitKind.LEFT_PAREN:
            raise UnclosedRightParenthesisError(
                "Left parenthesis is never closed", code=code, error_char_idx=slot.position
            )

    program = CompiledProgram(tuple(_resolve(slot, code) for slot in output))
    _check_stack_depth(program, code)
    logger.debug("Compiled %r into RPN %s", code, program)
    return program


def _resolve(slot: PendingSlot, code: str) -> Instruction:
    if not isinstance(slot, LexicalUnit):
        return slot
    if slot.kind is UnitKind.NUMBER:
        return Number(value=_parse_number(slot, code), raw_text=slot.text)
    if slot.kind is UnitKind.OPERATOR:
        return Operator(operator=BinaryOperator(slot.text), raw_text=slot.text)
    if slot.kind is UnitKind.FUNCTION:
        func_id = lookup_function(slot.text)
        if func_id is None:
            raise UnknownExpressionError(
                f"Unknown expression: {slot.text!r}", code=code, error_char_idx=slot.position, name=slot.text
            )
        return Function(function=func_id, raw_text=slot.text)
    raise ExpressionSyntaxError(f"Unexpected unit in output: {slot}", code=code, error_char_idx=slot.position)


def _parse_number(unit: LexicalUnit, code: str) -> float:
    match = NUMBER_RE.fullmatch(unit.text)
    if match is None:
        raise ExpressionSyntaxError(f"Malformed number: {unit.text!r}", code=code, error_char_idx=unit.position)
    value = float(match.group("digits"))
    return -value if len(match.group("signs")) % 2 else value


def _check_stack_depth(program: CompiledProgram, code: str) -> None:
    if not program.instructions:
        return
    depth = 0
    for instr in program:
        if isinstance(instr, Operator):
            if depth < 2:
                raise ExpressionSyntaxError(f"Operator {instr.raw_text!r} is missing an operand", code=code)
            depth -= 1
        elif isinstance(instr, Function):
            if depth < 1:
                raise ExpressionSyntaxError(f"Function {instr.raw_text!r} is missing its argument", code=code)
        else:
            depth += 1
    if depth != 1:
        raise ExpressionSyntaxError(f"Expression leaves {depth} values instead of one", code=code)
