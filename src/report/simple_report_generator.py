"""
╔═══════════════════════════════════════════════════════════════════════════╗
║                    Wire Circuit Resolution Report                         ║
║                  Text, JSON and Markdown summaries                        ║
╚═══════════════════════════════════════════════════════════════════════════╝

Turns a ResolutionReport into human-readable console output (with
colorama colours), JSON for machines, or Markdown for archival.
"""

from __future__ import annotations

import re
import sys
import json
import unicodedata
from typing import Dict, List, Optional
from pathlib import Path
from datetime import datetime

from colorama import Fore, Style, init as colorama_init

from src.report.resolution_report import ResolutionReport, format_duration

colorama_init(autoreset=True)


# ============================================================================
# Constants & Configuration
# ============================================================================

class Colors:
    """Color palette for consistent theming"""
    PRIMARY = Fore.CYAN
    SUCCESS = Fore.GREEN
    ERROR = Fore.RED
    DIM = Style.DIM
    BRIGHT = Style.BRIGHT


class Icons:
    """Unicode icons for visual enhancement"""
    CHECKMARK = "✓"
    CROSS = "✗"
    ARROW_RIGHT = "→"
    BULLET = "•"
    CHART = "📊"
    CLOCK = "🕐"
    GEAR = "⚙"
    TARGET = "🎯"


class BoxChars:
    """Box-drawing characters for borders"""
    H_LINE = "─"
    TL_CORNER = "╭"

    # Double lines
    H_DOUBLE = "═"
    V_DOUBLE = "║"
    TL_DOUBLE = "╔"
    TR_DOUBLE = "╗"
    BL_DOUBLE = "╚"
    BR_DOUBLE = "╝"


REPORT_FORMATS = ("text", "json", "markdown")


# ============================================================================
# Formatting Utilities
# ============================================================================

def colorize(text: str, color: str = "", enabled: bool = True) -> str:
    """Apply color to text if terminal supports it"""
    if enabled and sys.stdout.isatty():
        return f"{color}{text}{Style.RESET_ALL}"
    return text


def visible_width(text: str) -> int:
    """Calculate printable width accounting for ANSI codes"""
    if not text:
        return 0
    ansi_clean = re.sub(r"\x1b\[[0-9;]*m", "", text)
    width = 0
    for char in ansi_clean:
        width += 2 if unicodedata.east_asian_width(char) in {"W", "F"} else 1
    return width


def pad_text(text: str, width: int, *, align: str = "left") -> str:
    """Pad text using visual width awareness"""
    current = visible_width(text)
    padding = max(0, width - current)
    if align == "right":
        return " " * padding + text
    if align == "center":
        left = padding // 2
        right = padding - left
        return (" " * left) + text + (" " * right)
    return text + (" " * padding)


def draw_header(title: str, width: int = 60) -> str:
    """Draw double-line boxed header"""
    top = BoxChars.TL_DOUBLE + BoxChars.H_DOUBLE * (width - 2) + BoxChars.TR_DOUBLE
    bottom = BoxChars.BL_DOUBLE + BoxChars.H_DOUBLE * (width - 2) + BoxChars.BR_DOUBLE
    middle = f"{BoxChars.V_DOUBLE} {pad_text(title, width - 4, align='center')} {BoxChars.V_DOUBLE}"
    return f"{top}\n{middle}\n{bottom}"


def draw_section(title: str, icon: str = "") -> str:
    """Draw section header"""
    if icon:
        title = f"{icon} {title}"
    return f"\n{BoxChars.TL_CORNER}{BoxChars.H_LINE} {title}"


def format_metric(label: str, value: str, label_width: int = 24) -> str:
    """Format a key-value metric line"""
    return f"  {pad_text(label, label_width)}  {value}"


def format_table(headers: List[str], rows: List[List[str]]) -> List[str]:
    """Format data as a boxed table"""
    col_widths = []
    for i, header in enumerate(headers):
        max_len = visible_width(str(header))
        for row in rows:
            max_len = max(max_len, visible_width(str(row[i])))
        col_widths.append(max_len + 2)

    lines = ["┌" + "┬".join("─" * w for w in col_widths) + "┐"]
    lines.append("│" + "│".join(
        pad_text(str(h), w, align="center") for h, w in zip(headers, col_widths)) + "│")
    lines.append("├" + "┼".join("─" * w for w in col_widths) + "┤")
    for row in rows:
        lines.append("│" + "│".join(
            pad_text(f" {cell}", w) for cell, w in zip(row, col_widths)) + "│")
    lines.append("└" + "┴".join("─" * w for w in col_widths) + "┘")
    return lines


# ============================================================================
# Simple Report Generator
# ============================================================================

class SimpleReportGenerator:
    """
    Report Generator for circuit resolution runs

    Usage:
        generator = SimpleReportGenerator()
        print(generator.generate_text_report(report))
        files = generator.generate_all_formats(report, "output_dir")
    """

    def __init__(self, use_colors: bool = True):
        """
        Initialize the report generator

        Args:
            use_colors: Enable terminal colors in text reports
        """
        self.use_colors = use_colors
        self.reports_generated = 0

    def _c(self, text: str, color: str) -> str:
        return colorize(text, color, enabled=self.use_colors)

    # ========================================================================
    # Text Report Generation
    # ========================================================================

    def generate_text_report(self, report: ResolutionReport,
                             detail_level: str = "summary",
                             width: int = 60) -> str:
        """
        Generate text report

        Args:
            report: ResolutionReport to format
            detail_level: "summary" or "detailed" (adds every wire value)
            width: Report width in characters

        Returns:
            Formatted text report
        """
        lines = [self._c(draw_header(f"CIRCUIT REPORT: {report.circuit_name}", width),
                         Colors.PRIMARY + Colors.BRIGHT)]

        lines.append(draw_section("Results", Icons.TARGET))
        if report.part1_value is not None:
            lines.append(format_metric(f"Part 1 (wire {report.target})",
                                       self._c(str(report.part1_value), Colors.SUCCESS + Colors.BRIGHT)))
        if report.part2_value is not None:
            label = f"Part 2 ({report.override} {Icons.ARROW_RIGHT} {report.target})"
            lines.append(format_metric(label,
                                       self._c(str(report.part2_value), Colors.SUCCESS + Colors.BRIGHT)))

        if report.circuit_statistics:
            stats = report.circuit_statistics
            lines.append(draw_section("Circuit", Icons.CHART))
            lines.append(format_metric("Wires", str(stats.get('total_wires', 0))))
            for keyword, count in stats.get('operation_counts', {}).items():
                lines.append(format_metric(f"  {keyword}", str(count)))
            if stats.get('busiest_wire'):
                lines.append(format_metric("Highest fan-in",
                                           f"{stats['busiest_wire']} ({stats['max_fan_in']} readers)"))

        if report.resolver_statistics:
            lines.append(draw_section("Resolver", Icons.GEAR))
            for key, value in report.resolver_statistics.items():
                lines.append(format_metric(key.replace('_', ' ').capitalize(), str(value)))

        if report.timings:
            lines.append(draw_section("Execution times", Icons.CLOCK))
            for timing in report.timings:
                lines.append(format_metric(timing.stage, format_duration(timing.seconds)))
            lines.append(format_metric(self._c("TOTAL", Colors.BRIGHT),
                                       format_duration(report.total_seconds)))

        if detail_level == "detailed" and report.wire_values:
            lines.append(draw_section("Wire values", Icons.BULLET))
            rows = [[wire, str(value), f"0x{value:04X}"]
                    for wire, value in sorted(report.wire_values.items())]
            lines.extend(format_table(["Wire", "Value", "Hex"], rows))

        lines.append("")
        lines.append(self._c("═" * width, Colors.DIM))
        self.reports_generated += 1
        return "\n".join(lines)

    # ========================================================================
    # JSON / Markdown Report Generation
    # ========================================================================

    def generate_json_report(self, report: ResolutionReport) -> str:
        """Generate pretty-printed JSON report"""
        return json.dumps(report.to_json(), indent=2, sort_keys=True)

    def generate_markdown_report(self, report: ResolutionReport) -> str:
        """Generate Markdown report for documentation"""
        lines = [f"# Circuit Report: {report.circuit_name}", ""]
        if report.source_path:
            lines.append(f"**Source:** `{report.source_path}`")
            lines.append("")

        lines.append("## Results")
        lines.append("")
        lines.append("| Part | Wire | Value |")
        lines.append("|------|------|-------|")
        if report.part1_value is not None:
            lines.append(f"| 1 | `{report.target}` | {report.part1_value} |")
        if report.part2_value is not None:
            lines.append(f"| 2 | `{report.target}` (`{report.override}` overridden) | {report.part2_value} |")
        lines.append("")

        if report.timings:
            lines.append("## Execution Times")
            lines.append("")
            for timing in report.timings:
                lines.append(f"- **{timing.stage}:** {format_duration(timing.seconds)}")
            lines.append(f"- **Total:** {format_duration(report.total_seconds)}")
            lines.append("")

        if report.wire_values:
            lines.append("## Wire Values")
            lines.append("")
            lines.append("| Wire | Value |")
            lines.append("|------|-------|")
            for wire, value in sorted(report.wire_values.items()):
                lines.append(f"| `{wire}` | {value} |")
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append(f"*Report generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}*")
        lines.append("")
        return "\n".join(lines)

    # ========================================================================
    # File Operations
    # ========================================================================

    def render(self, report: ResolutionReport, format: str = "text") -> str:
        """
        Render report in the requested format

        Raises:
            ValueError: If format is unknown
        """
        if format == "text":
            return self.generate_text_report(report, detail_level="detailed")
        elif format == "json":
            return self.generate_json_report(report)
        elif format == "markdown":
            return self.generate_markdown_report(report)
        else:
            raise ValueError(f"Unknown format: {format}. Use 'text', 'json', or 'markdown'")

    def save_report(self, report: ResolutionReport, filepath: str,
                    format: str = "text") -> bool:
        """
        Save report to file

        Returns:
            True on success, False on error
        """
        try:
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            text = self.render(report, format)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
            return True
        except OSError as e:
            print(self._c(f"{Icons.CROSS} Error saving {format} report: {e}", Colors.ERROR))
            return False

    def generate_all_formats(self, report: ResolutionReport, output_dir: str,
                             base_name: str = "circuit_report",
                             formats: Optional[List[str]] = None) -> Dict[str, str]:
        """
        Generate report in several formats

        Returns:
            Dictionary mapping format to filepath
        """
        extensions = {"text": "txt", "json": "json", "markdown": "md"}
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        results = {}
        for fmt in formats or REPORT_FORMATS:
            path = output_path / f"{base_name}.{extensions[fmt]}"
            if self.save_report(report, str(path), fmt):
                results[fmt] = str(path)
                print(self._c(f"  {Icons.CHECKMARK} Saved {fmt} report: {path.name}", Colors.SUCCESS))
        return results


# ============================================================================
# Convenience Functions
# ============================================================================

def quick_report(report: ResolutionReport, format: str = "text") -> str:
    """Quick report generation helper"""
    return SimpleReportGenerator(use_colors=False).render(report, format)


__all__ = [
    'SimpleReportGenerator',
    'quick_report',
    'colorize',
    'Colors',
    'Icons',
    'REPORT_FORMATS',
]
