import pytest

from src.circuit.errors import InstructionSyntaxError
from src.circuit.operations import (
    And,
    Direct,
    Literal,
    Not,
    Or,
    Reference,
    ShiftLeft,
    ShiftRight,
)
from src.parser.instruction_lexer import InstructionLexer, parse_instruction


@pytest.mark.parametrize("line, expected", [
    ("123 -> x", ('x', Direct(Literal(123)))),
    ("lx -> a", ('a', Direct(Reference('lx')))),
    ("NOT y -> i", ('i', Not(Reference('y')))),
    ("NOT 7 -> i", ('i', Not(Literal(7)))),
    ("x AND y -> d", ('d', And(Reference('x'), Reference('y')))),
    ("1 AND cx -> cy", ('cy', And(Literal(1), Reference('cx')))),
    ("x OR y -> e", ('e', Or(Reference('x'), Reference('y')))),
    ("x LSHIFT 2 -> f", ('f', ShiftLeft(Reference('x'), Literal(2)))),
    ("y RSHIFT 2 -> g", ('g', ShiftRight(Reference('y'), Literal(2)))),
    ("   x   OR   y   ->   e  ", ('e', Or(Reference('x'), Reference('y')))),
])
def test_parse_instruction(line, expected):
    assert parse_instruction(line) == expected


def test_lexer_tokens():
    tokens = InstructionLexer("x LSHIFT 2 -> f").lexer()
    assert [t.kind for t in tokens] == ['WIRE', 'KEYWORD', 'NUMBER', 'ARROW', 'WIRE']
    assert [t.column for t in tokens] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("line", [
    "",
    "x ->",
    "123 -> 456",
    "-> x",
    "AND x -> y",
    "x XOR y -> z",
    "x y -> z",
    "NOT x y -> z",
    "x NOT y -> z",
    "x AND -> z",
    "x -> y z",
    "X -> y",
    "x => y",
    "70000 -> x",
])
def test_malformed_lines_are_rejected(line):
    with pytest.raises(InstructionSyntaxError):
        parse_instruction(line)


def test_syntax_error_carries_location():
    with pytest.raises(InstructionSyntaxError) as excinfo:
        parse_instruction("x XOR y -> z", line_number=12)

    error = excinfo.value
    assert error.line_number == 12
    assert error.line == "x XOR y -> z"
    assert "line 12" in str(error)
    assert "XOR" in str(error)
    assert isinstance(error, ValueError)
