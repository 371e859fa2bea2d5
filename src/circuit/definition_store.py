# definition_store.py
"""
Definition Store
Read-only mapping from wire name to the operation feeding it

Built once from parsed input. Overrides never touch the original store;
they produce a new, independent store.
"""

from typing import Dict, Iterable, Iterator, Optional, Set, Tuple
from collections.abc import Mapping
from collections import Counter
from types import MappingProxyType

from src.circuit.operations import (
    Direct,
    Literal,
    Operation,
    operation_keyword,
    wire_references,
)


class DefinitionStore(Mapping):
    """
    Immutable wire -> operation mapping

    Usage:
        store = DefinitionStore({'x': Direct(Literal(123))})
        patched = store.with_value('x', 7)   # store is unchanged
    """

    def __init__(self, definitions: Optional[Mapping[str, Operation]] = None,
                 name: str = "circuit"):
        """
        Initialize the store

        Args:
            definitions: Wire name -> Operation (copied)
            name: Label used in reports
        """
        self.name = name
        self._definitions: Mapping[str, Operation] = MappingProxyType(dict(definitions or {}))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Operation]],
                   name: str = "circuit") -> "DefinitionStore":
        """Build a store from (wire, operation) pairs, later pairs win"""
        definitions: Dict[str, Operation] = {}
        for wire, operation in pairs:
            definitions[wire] = operation
        return cls(definitions, name=name)

    def __getitem__(self, wire: str) -> Operation:
        return self._definitions[wire]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self):
        return f"DefinitionStore(Name:[{self.name}] , Wires:[{len(self)}])"

    def with_override(self, wire: str, operation: Operation) -> "DefinitionStore":
        """
        Copy of this store with one wire's operation replaced

        Args:
            wire: Wire to redefine (added if absent)
            operation: New operation feeding the wire

        Returns:
            New DefinitionStore; self is left untouched
        """
        definitions = dict(self._definitions)
        definitions[wire] = operation
        return DefinitionStore(definitions, name=f"{self.name}[{wire}={operation}]")

    def with_value(self, wire: str, value: int) -> "DefinitionStore":
        """Copy of this store with ``wire`` tied to a fixed value"""
        return self.with_override(wire, Direct(Literal(value)))

    def missing_references(self) -> Set[str]:
        """Wire names referenced somewhere but never defined"""
        missing = set()
        for operation in self._definitions.values():
            for ref in wire_references(operation):
                if ref not in self._definitions:
                    missing.add(ref)
        return missing

    def fan_in(self) -> Counter:
        """How many operations read each wire"""
        counts: Counter = Counter()
        for operation in self._definitions.values():
            counts.update(wire_references(operation))
        return counts

    def get_statistics(self) -> Dict:
        """Get circuit statistics"""
        kinds = Counter(operation_keyword(op) for op in self._definitions.values())
        fan_in = self.fan_in()
        busiest = fan_in.most_common(1)

        return {
            'total_wires': len(self),
            'operation_counts': dict(sorted(kinds.items())),
            'constant_wires': sum(
                1 for op in self._definitions.values()
                if isinstance(op, Direct) and isinstance(op.source, Literal)
            ),
            'max_fan_in': busiest[0][1] if busiest else 0,
            'busiest_wire': busiest[0][0] if busiest else None,
            'missing_references': sorted(self.missing_references()),
        }
