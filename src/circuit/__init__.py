"""
Wire Circuit Core

Operation model, definition store and memoised resolver.
"""

from .errors import (
    CircuitError,
    MissingDefinitionError,
    CyclicDependencyError,
    InstructionSyntaxError
)

from .operations import (
    Literal,
    Reference,
    Direct,
    Not,
    And,
    Or,
    ShiftLeft,
    ShiftRight
)

from .definition_store import DefinitionStore

from .resolver import (
    WireResolver,
    OverridePassResult,
    resolve,
    run_override_pass
)

__all__ = [
    # Errors
    'CircuitError',
    'MissingDefinitionError',
    'CyclicDependencyError',
    'InstructionSyntaxError',

    # Operation model
    'Literal',
    'Reference',
    'Direct',
    'Not',
    'And',
    'Or',
    'ShiftLeft',
    'ShiftRight',

    # Store and resolver
    'DefinitionStore',
    'WireResolver',
    'OverridePassResult',
    'resolve',
    'run_override_pass',
]
