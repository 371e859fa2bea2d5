# resolver.py
"""
Wire Resolver
Computes the 16-bit signal delivered to a wire

Evaluation is depth-first over the wire dependency graph with a
resolution cache, so every wire is evaluated at most once per resolver.
An explicit work stack replaces native recursion so long dependency
chains cannot overflow the interpreter stack.
"""

from typing import Dict, List, Optional, Set
from dataclasses import dataclass

from configs.circuit_paths import (
    DEFAULT_OVERRIDE_WIRE,
    DEFAULT_TARGET_WIRE,
    VERBOSE_DEFAULT,
    WORD_MASK,
)
from src.circuit.definition_store import DefinitionStore
from src.circuit.errors import CyclicDependencyError, MissingDefinitionError
from src.circuit.operations import (
    And,
    Direct,
    Literal,
    Not,
    Operand,
    Operation,
    Or,
    Reference,
    ShiftLeft,
    ShiftRight,
)


class WireResolver:
    """
    Memoised wire evaluation engine

    One resolver is one resolution pass: it owns a single resolution
    cache and never mutates the store it reads from. Use a separate
    resolver per store (and per thread).

    Usage:
        resolver = WireResolver(store)
        value = resolver.resolve('a')
        print(f"a = {value} after {resolver.evaluations} evaluations")
    """

    def __init__(self, store: DefinitionStore,
                 cache: Optional[Dict[str, int]] = None,
                 verbose: bool = VERBOSE_DEFAULT):
        """
        Initialize resolver

        Args:
            store: Circuit definitions to evaluate
            cache: Optional pre-computed wire values to seed the pass with
            verbose: Print progress messages
        """
        self.store = store
        self.cache: Dict[str, int] = dict(cache or {})
        for wire, value in self.cache.items():
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= WORD_MASK:
                raise ValueError(f"Seeded value {value!r} for wire '{wire}' "
                                 f"outside 16-bit range 0-{WORD_MASK}")
        self.verbose = verbose

        # Statistics
        self.evaluations = 0
        self.cache_hits = 0
        self.max_depth = 0

    def resolve(self, target: str) -> int:
        """
        Resolve the value delivered to a wire

        Args:
            target: Wire name

        Returns:
            Wire value in [0, 65535]

        Raises:
            MissingDefinitionError: target or a wire it depends on is undefined
            CyclicDependencyError: target depends on itself
        """
        if target in self.cache:
            self.cache_hits += 1
            return self.cache[target]
        if target not in self.store:
            raise MissingDefinitionError(target)

        if self.verbose:
            print(f"Resolving wire '{target}' in {self.store.name}")

        evaluated_before = self.evaluations
        stack: List[str] = [target]
        # operands of each stack frame already scanned
        scanned: List[int] = [0]
        on_path: Set[str] = {target}

        while stack:
            wire = stack[-1]
            operation = self.store[wire]

            pending = self._next_unresolved(wire, operation, stack, scanned, on_path)
            if pending is not None:
                stack.append(pending)
                scanned.append(0)
                on_path.add(pending)
                self.max_depth = max(self.max_depth, len(stack))
                continue

            self.cache[wire] = self._evaluate(operation)
            self.evaluations += 1
            stack.pop()
            scanned.pop()
            on_path.discard(wire)

        if self.verbose:
            print(f"  {target} = {self.cache[target]} "
                  f"({self.evaluations - evaluated_before} wires evaluated)")

        return self.cache[target]

    def resolve_all(self) -> Dict[str, int]:
        """Resolve every wire in the store, sorted by name"""
        return {wire: self.resolve(wire) for wire in sorted(self.store)}

    def _next_unresolved(self, wire: str, operation: Operation,
                         stack: List[str], scanned: List[int],
                         on_path: Set[str]) -> Optional[str]:
        """
        First referenced wire of ``operation`` that still needs evaluating

        Returns:
            Wire name, or None when every operand is available
        """
        operands = operation.operands
        for index in range(scanned[-1], len(operands)):
            operand = operands[index]
            if not isinstance(operand, Reference):
                continue
            name = operand.name
            if name in self.cache:
                self.cache_hits += 1
                continue
            if name not in self.store:
                raise MissingDefinitionError(name, referenced_by=wire)
            if name in on_path:
                raise CyclicDependencyError(stack[stack.index(name):] + [name])
            # resume after this operand once it is evaluated
            scanned[-1] = index + 1
            return name
        scanned[-1] = len(operands)
        return None

    def _operand_value(self, operand: Operand) -> int:
        if isinstance(operand, Literal):
            return operand.value
        return self.cache[operand.name]

    def _evaluate(self, operation: Operation) -> int:
        """Apply one operation to already-resolved operands"""
        value = self._operand_value

        match operation:
            case Direct(source):
                return value(source)
            case Not(source):
                return ~value(source) & WORD_MASK
            case And(left, right):
                return value(left) & value(right)
            case Or(left, right):
                return value(left) | value(right)
            case ShiftLeft(source, amount):
                return (value(source) << value(amount)) & WORD_MASK
            case ShiftRight(source, amount):
                return value(source) >> value(amount)
            case _:
                raise TypeError(f"Unknown operation: {operation!r}")

    def get_statistics(self) -> Dict:
        """Get resolver statistics"""
        return {
            'evaluations': self.evaluations,
            'cache_hits': self.cache_hits,
            'cached_wires': len(self.cache),
            'max_depth': self.max_depth,
        }


# ============================================================================
# Convenience Functions
# ============================================================================

def resolve(store: DefinitionStore, target: str) -> int:
    """
    Resolve one wire with a fresh resolution cache

    Args:
        store: Circuit definitions
        target: Wire name

    Returns:
        Wire value in [0, 65535]
    """
    return WireResolver(store).resolve(target)


@dataclass
class OverridePassResult:
    """Outcome of the two-pass override workflow"""

    target: str
    override: str
    first_value: int
    second_value: int
    overridden_store: DefinitionStore


def run_override_pass(store: DefinitionStore,
                      target: str = DEFAULT_TARGET_WIRE,
                      override: str = DEFAULT_OVERRIDE_WIRE,
                      verbose: bool = VERBOSE_DEFAULT) -> OverridePassResult:
    """
    Resolve ``target``, tie ``override`` to that value, resolve ``target`` again

    The second pass runs on a new store with its own resolver, so nothing
    cached in the first pass carries over.
    """
    first_value = WireResolver(store, verbose=verbose).resolve(target)
    overridden = store.with_value(override, first_value)
    second_value = WireResolver(overridden, verbose=verbose).resolve(target)

    return OverridePassResult(
        target=target,
        override=override,
        first_value=first_value,
        second_value=second_value,
        overridden_store=overridden,
    )
