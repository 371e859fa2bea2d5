"""
Resolution Report Data Structures

Collects what a circuit run produced: the resolved wires, the
override pass, timings and resolver statistics.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class StageTiming:
    """Wall-clock time spent in one stage of a run"""
    stage: str
    seconds: float

    def __str__(self):
        return f"{self.stage}: {format_duration(self.seconds)}"


@dataclass
class ResolutionReport:
    """
    Complete result of resolving a circuit

    Core data structure handed to the report generator.
    """
    circuit_name: str
    source_path: Optional[str]
    target: str
    override: Optional[str] = None

    # Results
    part1_value: Optional[int] = None
    part2_value: Optional[int] = None
    wire_values: Dict[str, int] = field(default_factory=dict)

    # Diagnostics
    circuit_statistics: Dict = field(default_factory=dict)
    resolver_statistics: Dict = field(default_factory=dict)
    timings: List[StageTiming] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def add_timing(self, stage: str, seconds: float) -> None:
        self.timings.append(StageTiming(stage, seconds))

    @property
    def total_seconds(self) -> float:
        return sum(t.seconds for t in self.timings)

    def to_json(self) -> Dict:
        """Convert to JSON-serializable dict"""
        return {
            'circuit': self.circuit_name,
            'source': self.source_path,
            'target': self.target,
            'override': self.override,
            'part1': self.part1_value,
            'part2': self.part2_value,
            'wire_values': dict(self.wire_values),
            'circuit_statistics': dict(self.circuit_statistics),
            'resolver_statistics': dict(self.resolver_statistics),
            'timings': {t.stage: t.seconds for t in self.timings},
            'total_seconds': self.total_seconds,
            'created_at': self.created_at.isoformat(),
        }


def format_duration(seconds: float) -> str:
    """Human readable duration (µs / ms / s)"""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"
