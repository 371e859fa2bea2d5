"""
Circuit Errors

Exceptions raised while parsing or resolving a wire circuit.
All of them are ValueError subclasses.
"""

from typing import List, Optional


class CircuitError(ValueError):
    """Base class for every circuit failure"""


class MissingDefinitionError(CircuitError, KeyError):
    """
    A wire is referenced but never defined

    Attributes:
        wire: Name of the undefined wire
        referenced_by: Wire whose operation referenced it (None for the
            top-level target)
    """

    def __init__(self, wire: str, referenced_by: Optional[str] = None):
        self.wire = wire
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"No definition for wire '{wire}'"
        else:
            message = f"No definition for wire '{wire}' (referenced by '{referenced_by}')"
        super().__init__(message)

    def __str__(self):
        # KeyError.__str__ would wrap the message in quotes
        return self.args[0]


class CyclicDependencyError(CircuitError):
    """
    A wire depends on itself through a chain of references

    Attributes:
        cycle: Wire names forming the loop, first name repeated at the end
    """

    def __init__(self, cycle: List[str]):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency: {' -> '.join(self.cycle)}")


class InstructionSyntaxError(CircuitError):
    """A circuit instruction line could not be parsed"""

    def __init__(self, line: str, line_number: Optional[int] = None, reason: str = "bad format"):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        where = f"line {line_number}" if line_number is not None else "instruction"
        super().__init__(f"{where}: {reason} // {line}")
