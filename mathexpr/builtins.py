import enum
import math
from typing import Callable, Optional

import numpy as np

from mathexpr.utils import PrintableEnum

UnaryFunctionImpl = Callable[[float], float]


class FunctionId(PrintableEnum):
    LOG = enum.auto()
    LOG10 = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    TAN = enum.auto()
    COT = enum.auto()
    ASIN = enum.auto()
    ACOS = enum.auto()
    ATAN = enum.auto()
    ATAN2 = enum.auto()  # reserved, never dispatched
    ACOT = enum.auto()
    DEG = enum.auto()
    RAD = enum.auto()
    SQRT = enum.auto()
    EXP = enum.auto()
    ABS = enum.auto()


BUILTIN_FUNCS: dict[FunctionId, UnaryFunctionImpl] = dict()
FUNCTION_NAMES: dict[str, FunctionId] = dict()


def register_builtin_func(func_id: FunctionId):
    def decorator(fn: UnaryFunctionImpl) -> UnaryFunctionImpl:
        BUILTIN_FUNCS[func_id] = fn
        FUNCTION_NAMES[func_id.name.lower()] = func_id
        return fn

    return decorator


def lookup_function(name: str) -> Optional[FunctionId]:
    """Case-insensitive lookup of a function name, None for anything not dispatchable"""
    return FUNCTION_NAMES.get(name.lower())


# All implementations expect to run under np.errstate(all="ignore") and return
# nan/inf for arguments outside the domain instead of raising.


@register_builtin_func(FunctionId.LOG)
def log_(arg: float) -> float:
    return np.log(arg)


@register_builtin_func(FunctionId.LOG10)
def log10_(arg: float) -> float:
    return np.log10(arg)


@register_builtin_func(FunctionId.SIN)
def sin_(arg: float) -> float:
    return np.sin(arg)


@register_builtin_func(FunctionId.COS)
def cos_(arg: float) -> float:
    return np.cos(arg)


@register_builtin_func(FunctionId.TAN)
def tan_(arg: float) -> float:
    return np.tan(arg)


@register_builtin_func(FunctionId.COT)
def cot_(arg: float) -> float:
    return np.divide(1.0, np.tan(arg))


@register_builtin_func(FunctionId.ASIN)
def asin_(arg: float) -> float:
    return np.arcsin(arg)


@register_builtin_func(FunctionId.ACOS)
def acos_(arg: float) -> float:
    return np.arccos(arg)


@register_builtin_func(FunctionId.ATAN)
def atan_(arg: float) -> float:
    return np.arctan(arg)


@register_builtin_func(FunctionId.ACOT)
def acot_(arg: float) -> float:
    return np.arctan(np.divide(1.0, arg))


@register_builtin_func(FunctionId.DEG)
def deg_(arg: float) -> float:
    return np.multiply(np.divide(arg, 2 * math.pi), 360.0)


@register_builtin_func(FunctionId.RAD)
def rad_(arg: float) -> float:
    return np.multiply(np.divide(arg, 360.0), 2 * math.pi)


@register_builtin_func(FunctionId.SQRT)
def sqrt_(arg: float) -> float:
    return np.sqrt(arg)


@register_builtin_func(FunctionId.EXP)
def exp_(arg: float) -> float:
    return np.exp(arg)


@register_builtin_func(FunctionId.ABS)
def abs_(arg: float) -> float:
    return np.abs(arg)
