import pytest

from src.circuit.operations import (
    And,
    Direct,
    Literal,
    Not,
    Or,
    Reference,
    ShiftLeft,
    ShiftRight,
    operand_from_token,
    operation_keyword,
    wire_references,
)


def test_literal_accepts_16_bit_range():
    assert Literal(0).value == 0
    assert Literal(65535).value == 65535


@pytest.mark.parametrize("value", [-1, 65536, 1 << 20])
def test_literal_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Literal(value)


def test_literal_rejects_non_int():
    with pytest.raises(TypeError):
        Literal("12")
    with pytest.raises(TypeError):
        Literal(True)


def test_operand_from_token():
    assert operand_from_token("123") == Literal(123)
    assert operand_from_token(7) == Literal(7)
    assert operand_from_token("ab") == Reference("ab")


def test_operations_are_hashable_values():
    assert Direct(Literal(1)) == Direct(Literal(1))
    assert len({And(Reference("x"), Reference("y")), And(Reference("x"), Reference("y"))}) == 1
    with pytest.raises(AttributeError):
        Direct(Literal(1)).source = Literal(2)


def test_operation_text_matches_instruction_syntax():
    assert str(Direct(Literal(123))) == "123"
    assert str(Not(Reference("x"))) == "NOT x"
    assert str(And(Reference("x"), Reference("y"))) == "x AND y"
    assert str(Or(Literal(1), Reference("y"))) == "1 OR y"
    assert str(ShiftLeft(Reference("x"), Literal(2))) == "x LSHIFT 2"
    assert str(ShiftRight(Reference("y"), Literal(2))) == "y RSHIFT 2"


def test_operation_keyword():
    assert operation_keyword(Direct(Literal(1))) == "VALUE"
    assert operation_keyword(ShiftRight(Literal(1), Literal(1))) == "RSHIFT"
    with pytest.raises(TypeError):
        operation_keyword(Literal(1))


def test_wire_references_skip_literals():
    assert wire_references(Direct(Literal(3))) == ()
    assert wire_references(ShiftLeft(Reference("x"), Literal(2))) == ("x",)
    assert wire_references(Or(Reference("a"), Reference("b"))) == ("a", "b")
