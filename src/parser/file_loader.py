# here is the code of the circuit loader (.txt instruction files and .json)

from pathlib import Path
from typing import List, Tuple

from analysis.util.json_loader import JsonLoader
from configs.circuit_paths import VERBOSE_DEFAULT
from src.circuit.definition_store import DefinitionStore
from src.circuit.errors import InstructionSyntaxError
from src.circuit.operations import Operation
from src.parser.instruction_lexer import parse_instruction


def parse_lines(raw_input:str) -> List[Tuple[str , Operation]]:
    """
    Line Pattern : <operand> [OP <operand>] -> <wire>
    """
    instructions = []
    for line_number , line in enumerate(raw_input.splitlines() , start=1):
        line = line.strip()
        if not line:
            continue
        instructions.append(parse_instruction(line , line_number))
    return instructions


class CircuitLoader:
    def __init__(self, src , verbose:bool = VERBOSE_DEFAULT):
        self.src = Path(src)
        self.verbose = verbose
        self.instructions :List[Tuple[str , Operation]] = []

    def __repr__(self):
        return f"CircuitLoader(Src:[{self.src}] , Instructions:[{len(self.instructions)}])"

    def readBinaryFile(self) -> bytes:
        with open(self.src , 'rb') as f:
            return f.read()

    def readTextFile(self) -> str:
        data = self.readBinaryFile()
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            line_start = data.rfind(b"\n" , 0 , e.start) + 1
            line_end = data.find(b"\n" , e.start)
            line = data[line_start:line_end if line_end != -1 else len(data)]
            raise InstructionSyntaxError(
                line.decode('utf-8' , errors='replace') ,
                data.count(b"\n" , 0 , e.start) + 1 ,
                f"{self.src.name} is not valid UTF-8 (byte 0x{data[e.start]:02X} at offset {e.start})" ,
            ) from e

    def parse_text(self , raw_input:str) -> List[Tuple[str , Operation]]:
        self.instructions = parse_lines(raw_input)
        return self.instructions

    def load(self) -> DefinitionStore:
        if self.src.suffix.lower() == '.json':
            store = JsonLoader.load_circuit(str(self.src))
        else:
            self.parse_text(self.readTextFile())
            store = DefinitionStore.from_pairs(self.instructions , name=self.src.stem)

        if self.verbose:
            stats = store.get_statistics()
            print(f"Loaded {stats['total_wires']} wires from {self.src.name}")
            for keyword , count in stats['operation_counts'].items():
                print(f"  {keyword:7} {count}")
        return store


def load_circuit(path , verbose:bool = VERBOSE_DEFAULT) -> DefinitionStore:
    return CircuitLoader(path , verbose=verbose).load()


def parse_circuit(raw_input:str , name:str = "circuit") -> DefinitionStore:
    return DefinitionStore.from_pairs(parse_lines(raw_input) , name=name)
