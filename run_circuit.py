#!/usr/bin/env python3
"""Wire circuit workflows and command line entry point."""

from __future__ import annotations

import argparse
import os
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from configs.circuit_paths import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OVERRIDE_WIRE,
    DEFAULT_TARGET_WIRE,
    REPORTS_DIR,
    VERBOSE_DEFAULT,
)
from src.circuit.definition_store import DefinitionStore
from src.circuit.errors import CircuitError
from src.circuit.resolver import WireResolver
from src.parser.file_loader import load_circuit
from src.report.resolution_report import ResolutionReport, format_duration
from src.report.simple_report_generator import (
    REPORT_FORMATS,
    Colors,
    Icons,
    SimpleReportGenerator,
    colorize,
)


@dataclass
class CircuitRunResult:
    """Everything a run produced."""

    report: ResolutionReport
    store: DefinitionStore
    saved_files: Dict[str, Path]


def create_unique_output_dir(parent: Path, prefix: str) -> Path:
    parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    safe_prefix = prefix.replace(os.sep, "_").replace(" ", "_") or "artifact"
    candidate = parent / f"{safe_prefix}_{timestamp}"
    counter = 1
    while candidate.exists():
        candidate = parent / f"{safe_prefix}_{timestamp}_{counter:02d}"
        counter += 1
    candidate.mkdir(parents=True, exist_ok=False)
    return candidate


def solve_part1(store: DefinitionStore, target: str = DEFAULT_TARGET_WIRE) -> int:
    """Value delivered to ``target``."""
    return WireResolver(store).resolve(target)


def solve_part2(
    store: DefinitionStore,
    target: str = DEFAULT_TARGET_WIRE,
    override: str = DEFAULT_OVERRIDE_WIRE,
    part1_value: Optional[int] = None,
) -> int:
    """Value of ``target`` after tying ``override`` to the part 1 value."""
    if part1_value is None:
        part1_value = solve_part1(store, target)
    return WireResolver(store.with_value(override, part1_value)).resolve(target)


def run_circuit(
    input_path: str,
    *,
    target: str = DEFAULT_TARGET_WIRE,
    override: Optional[str] = DEFAULT_OVERRIDE_WIRE,
    all_wires: bool = False,
    report_dir: Optional[str] = None,
    formats: Optional[list] = None,
    verbose: bool = VERBOSE_DEFAULT,
) -> CircuitRunResult:
    start = time.perf_counter()
    store = load_circuit(input_path, verbose=verbose)
    loaded = time.perf_counter()

    report = ResolutionReport(
        circuit_name=store.name,
        source_path=str(input_path),
        target=target,
        override=override,
        circuit_statistics=store.get_statistics(),
    )
    report.add_timing("Input", loaded - start)

    resolver = WireResolver(store, verbose=verbose)
    report.part1_value = resolver.resolve(target)
    part1_done = time.perf_counter()
    report.add_timing("Part 1", part1_done - loaded)

    if override:
        report.part2_value = solve_part2(store, target, override, report.part1_value)
        report.add_timing("Part 2", time.perf_counter() - part1_done)

    if all_wires:
        report.wire_values = resolver.resolve_all()
    report.resolver_statistics = resolver.get_statistics()

    saved: Dict[str, Path] = {}
    if report_dir:
        output_dir = create_unique_output_dir(Path(report_dir), prefix=f"report_{store.name}")
        generated = SimpleReportGenerator().generate_all_formats(
            report, output_dir=str(output_dir), formats=formats
        )
        saved = {fmt: Path(path) for fmt, path in generated.items()}

    return CircuitRunResult(report=report, store=store, saved_files=saved)


__all__ = [
    "solve_part1",
    "solve_part2",
    "run_circuit",
]


def _print_run_summary(report: ResolutionReport):
    print("=" * 50)
    print(f'Wire circuit - "{report.circuit_name}"')
    print(f"[+] Part 1: {report.part1_value}")
    if report.part2_value is not None:
        print(f"[+] Part 2: {report.part2_value}")
    print("~" * 50)
    print("Execution times:")
    for timing in report.timings:
        print(f"[+] {timing.stage + ':':8}{format_duration(timing.seconds)}")
    print(f"[*] {'TOTAL:':8}{format_duration(report.total_seconds)}")
    print("=" * 50)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Resolve the signal delivered to a wire of a 16-bit circuit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_circuit.py --input data/circuits/example.txt
  python run_circuit.py --input circuit.json --target a --override b
  python run_circuit.py --all --report-dir circuit_reports --format markdown
        """,
    )

    parser.add_argument("--input", metavar="PATH", default=str(DEFAULT_INPUT_PATH),
                        help="Circuit instruction file (.txt) or JSON description (.json)")
    parser.add_argument("--target", metavar="WIRE", default=DEFAULT_TARGET_WIRE,
                        help="Wire to resolve")
    parser.add_argument("--override", metavar="WIRE", default=DEFAULT_OVERRIDE_WIRE,
                        help="Wire that receives the part 1 value in part 2")
    parser.add_argument("--part1-only", action="store_true", help="Skip the override pass")
    parser.add_argument("--all", action="store_true", help="Print the value of every wire")
    parser.add_argument("--report-dir", metavar="DIR", nargs="?", const=str(REPORTS_DIR),
                        help="Save reports under DIR")
    parser.add_argument("--format", choices=REPORT_FORMATS, action="append",
                        help="Report format to save (repeatable, default: all)")
    parser.add_argument("--verbose", action="store_true", default=VERBOSE_DEFAULT,
                        help="Print progress messages")

    args = parser.parse_args(argv)

    try:
        result = run_circuit(
            args.input,
            target=args.target,
            override=None if args.part1_only else args.override,
            all_wires=args.all,
            report_dir=args.report_dir,
            formats=args.format,
            verbose=args.verbose,
        )
    except (CircuitError, ValidationError, OSError) as e:
        print(colorize(f"{Icons.CROSS} {e}", Colors.ERROR), file=sys.stderr)
        return 1

    _print_run_summary(result.report)
    if args.all:
        for wire, value in result.report.wire_values.items():
            print(f"  {wire:10} {value}")
    for fmt, path in result.saved_files.items():
        print(f"Saved {fmt:9}: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
