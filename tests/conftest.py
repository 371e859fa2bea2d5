import pytest

from configs.circuit_paths import DATA_DIR
from src.circuit.definition_store import DefinitionStore
from src.parser.file_loader import parse_circuit

EXAMPLE_CIRCUIT = """
123 -> x
456 -> y
x AND y -> d
x OR y -> e
x LSHIFT 2 -> f
y RSHIFT 2 -> g
NOT x -> h
NOT y -> i
d OR i -> b
b RSHIFT 1 -> a
"""

EXAMPLE_VALUES = {
    'x': 123,
    'y': 456,
    'd': 72,
    'e': 507,
    'f': 492,
    'g': 114,
    'h': 65412,
    'i': 65079,
    'b': 65151,
    'a': 32575,
}


@pytest.fixture
def example_store() -> DefinitionStore:
    return parse_circuit(EXAMPLE_CIRCUIT, name="example")


@pytest.fixture
def example_txt_path():
    return DATA_DIR / "example.txt"


@pytest.fixture
def example_json_path():
    return DATA_DIR / "example.json"


@pytest.fixture
def example_values():
    return dict(EXAMPLE_VALUES)
