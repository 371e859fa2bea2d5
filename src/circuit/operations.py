# operations.py
"""
Operation Model
Operands and the closed set of gate operations that drive a wire

Every wire in a circuit is fed by exactly one operation. Operands are
either 16-bit literals or references to other wires.
"""

from typing import Dict, Tuple, Type, Union
from dataclasses import dataclass

from configs.circuit_paths import WORD_MASK


@dataclass(frozen=True)
class Literal:
    """Fixed 16-bit unsigned value"""
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Literal expects int, got {type(self.value).__name__}")
        if not 0 <= self.value <= WORD_MASK:
            raise ValueError(f"Literal {self.value} outside 16-bit range 0-{WORD_MASK}")

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Reference:
    """Value of another wire"""
    name: str

    def __str__(self):
        return self.name


Operand = Union[Literal, Reference]


@dataclass(frozen=True)
class Direct:
    """Passes the operand through unchanged"""
    source: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.source,)

    def __str__(self):
        return f"{self.source}"


@dataclass(frozen=True)
class Not:
    """Bitwise complement, masked to 16 bits"""
    source: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.source,)

    def __str__(self):
        return f"NOT {self.source}"


@dataclass(frozen=True)
class And:
    left: Operand
    right: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.left, self.right)

    def __str__(self):
        return f"{self.left} AND {self.right}"


@dataclass(frozen=True)
class Or:
    left: Operand
    right: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.left, self.right)

    def __str__(self):
        return f"{self.left} OR {self.right}"


@dataclass(frozen=True)
class ShiftLeft:
    """Shift ``source`` left by the value of ``amount``"""
    source: Operand
    amount: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.source, self.amount)

    def __str__(self):
        return f"{self.source} LSHIFT {self.amount}"


@dataclass(frozen=True)
class ShiftRight:
    """Shift ``source`` right by the value of ``amount``"""
    source: Operand
    amount: Operand

    @property
    def operands(self) -> Tuple[Operand, ...]:
        return (self.source, self.amount)

    def __str__(self):
        return f"{self.source} RSHIFT {self.amount}"


Operation = Union[Direct, Not, And, Or, ShiftLeft, ShiftRight]

# Keyword used in instruction text / JSON -> operation class
OPERATION_KEYWORDS: Dict[str, Type] = {
    'VALUE': Direct,
    'NOT': Not,
    'AND': And,
    'OR': Or,
    'LSHIFT': ShiftLeft,
    'RSHIFT': ShiftRight,
}

BINARY_KEYWORDS = ('AND', 'OR', 'LSHIFT', 'RSHIFT')


def operation_keyword(operation: Operation) -> str:
    """Get the instruction keyword for an operation"""
    for keyword, op_class in OPERATION_KEYWORDS.items():
        if type(operation) is op_class:
            return keyword
    raise TypeError(f"Not a circuit operation: {operation!r}")


def operand_from_token(token: Union[str, int]) -> Operand:
    """
    Build an operand from an instruction token

    Decimal tokens (or ints) become Literals, anything else names a wire.
    """
    if isinstance(token, int):
        return Literal(token)
    if token.isdigit():
        return Literal(int(token))
    return Reference(token)


def wire_references(operation: Operation) -> Tuple[str, ...]:
    """Names of the wires an operation reads from"""
    return tuple(op.name for op in operation.operands if isinstance(op, Reference))


__all__ = [
    'Literal',
    'Reference',
    'Operand',
    'Direct',
    'Not',
    'And',
    'Or',
    'ShiftLeft',
    'ShiftRight',
    'Operation',
    'OPERATION_KEYWORDS',
    'BINARY_KEYWORDS',
    'operation_keyword',
    'operand_from_token',
    'wire_references',
]
