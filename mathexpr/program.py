import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from mathexpr.builtins import FunctionId
from mathexpr.errors import UnknownVariableError, VariableCountMismatchError
from mathexpr.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


@dataclass(frozen=True)
class Number:
    value: float
    raw_text: str


@dataclass(frozen=True)
class Operator:
    operator: BinaryOperator
    raw_text: str


@dataclass(frozen=True)
class Function:
    function: FunctionId
    raw_text: str


@dataclass(frozen=True)
class Variable:
    index: int
    raw_text: str


Instruction = Union[Number, Operator, Function, Variable]


@dataclass(frozen=True)
class CompiledProgram:
    """Postfix instruction sequence with every slot already resolved to its tag"""

    instructions: tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __str__(self) -> str:
        return " ".join(instr.raw_text for instr in self.instructions)


class VariableTable:
    """Variable names in registration order and their current values.

    The position of a name in the table is the index carried by `Variable`
    instructions. Names are fixed when the table is built; afterwards only
    values change.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._indices: dict[str, int] = dict()
        self._values: list[float] = []
        for name in names:
            self._register(name)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "VariableTable":
        return cls(names)

    def _register(self, name: str) -> int:
        if name not in self._indices:
            self._indices[name] = len(self._values)
            self._values.append(0.0)
        return self._indices[name]

    @property
    def names(self) -> list[str]:
        return list(self._indices)

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(self._values)

    def index_of(self, name: str) -> int:
        try:
            return self._indices[name]
        except KeyError:
            raise UnknownVariableError(f"Unknown variable: {name}", name=name) from None

    def set_value(self, name: str, value: float) -> None:
        self._values[self.index_of(name)] = float(value)

    def set_values(self, values: Iterable[float]) -> None:
        values = [float(v) for v in values]
        if len(values) != len(self._values):
            raise VariableCountMismatchError(
                f"{len(self._values)} variables registered, {len(values)} values given"
            )
        self._values[:] = values

    def __getitem__(self, name: str) -> float:
        return self._values[self.index_of(name)]

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"VariableTable({dict(self.items())!r})"

    def items(self) -> list[tuple[str, float]]:
        return list(zip(self._indices, self._values))
