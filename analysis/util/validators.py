#Model Validators

from typing import Annotated, List, Union
from pydantic import BaseModel, Field, RootModel, field_validator, model_validator

from configs.circuit_paths import WORD_MASK
from src.circuit.definition_store import DefinitionStore
from src.circuit.operations import OPERATION_KEYWORDS, Operation, operand_from_token

WireName = Annotated[str, Field(pattern=r"^[a-z]+$")]
Word = Annotated[int, Field(ge=0, le=WORD_MASK)]

OPERATION_ARITY = {
    'VALUE': 1,
    'NOT': 1,
    'AND': 2,
    'OR': 2,
    'LSHIFT': 2,
    'RSHIFT': 2,
}


class WireDefinition(BaseModel):
    """
    Model of Wire definition
    """
    name:   WireName
    op:     str = 'VALUE'
    operands:   List[Union[Word, WireName]]

    @field_validator('op')
    @classmethod
    def known_operation(cls, value: str) -> str:
        value = value.upper()
        if value not in OPERATION_KEYWORDS:
            raise ValueError(f"unknown operation {value}, expected one of {', '.join(OPERATION_KEYWORDS)}")
        return value

    @model_validator(mode='after')
    def operand_count_matches(self) -> 'WireDefinition':
        expected = OPERATION_ARITY[self.op]
        if len(self.operands) != expected:
            raise ValueError(f"{self.op} takes {expected} operand(s), got {len(self.operands)}")
        return self

    def to_operation(self) -> Operation:
        """
        return the circuit operation feeding this wire
        """
        operands = [operand_from_token(x) for x in self.operands]
        return OPERATION_KEYWORDS[self.op](*operands)


class ListWireDefinitions(RootModel[List[WireDefinition]]):
    """
    List of Wire definitions
    """

    def __len__(self):
        return len(self.root)

    @field_validator('root')
    @classmethod
    def unique_names(cls, value: List[WireDefinition]) -> List[WireDefinition]:
        seen = set()
        for wire in value:
            if wire.name in seen:
                raise ValueError(f"wire {wire.name} defined more than once")
            seen.add(wire.name)
        return value

    def get_all_wires(self) -> List[WireDefinition]:
        """
        return all wire definitions
        """
        return self.root

    def get_wire(self,name:str) -> WireDefinition | None:
        """
        return a wire definition by name
        """
        return next((wire for wire in self.root if wire.name == name),None)

    def list_wires_by_op(self,op:str) -> List[WireDefinition]:
        """
        return all wires fed by the same operation
        """
        return [wire for wire in self.root if wire.op == op.upper()]


class CircuitDocument(BaseModel):
    """Model of a JSON circuit description"""
    name:   str = 'circuit'
    wires:  ListWireDefinitions

    def to_store(self) -> DefinitionStore:
        """
        return the circuit as a DefinitionStore
        """
        return DefinitionStore(
            {wire.name: wire.to_operation() for wire in self.wires.get_all_wires()},
            name=self.name,
        )
