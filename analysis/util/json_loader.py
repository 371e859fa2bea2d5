#Load json circuit files

from analysis.util.validators import CircuitDocument
from src.circuit.definition_store import DefinitionStore

class JsonLoader:
    """
    Load Json Files
    """
    @staticmethod
    def load_document(path:str) -> CircuitDocument:
        """
        Load Circuit Document
        """
        with open(path, 'rb') as f:
            return CircuitDocument.model_validate_json(f.read())

    @staticmethod
    def load_circuit(path:str) -> DefinitionStore:
        """
        Load Circuit as a DefinitionStore
        """
        return JsonLoader.load_document(path).to_store()
