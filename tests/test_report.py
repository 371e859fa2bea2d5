import json

import pytest

from src.report.resolution_report import ResolutionReport, format_duration
from src.report.simple_report_generator import SimpleReportGenerator, quick_report, visible_width


@pytest.fixture
def report():
    report = ResolutionReport(
        circuit_name="example",
        source_path="data/circuits/example.txt",
        target="a",
        override="b",
        part1_value=32575,
        part2_value=16287,
        wire_values={'a': 32575, 'b': 65151},
        circuit_statistics={
            'total_wires': 2,
            'operation_counts': {'OR': 1, 'RSHIFT': 1},
            'busiest_wire': 'b',
            'max_fan_in': 1,
        },
        resolver_statistics={'evaluations': 2},
    )
    report.add_timing("Input", 0.0005)
    report.add_timing("Part 1", 0.002)
    return report


def test_format_duration():
    assert format_duration(0.0000025) == "2.50µs"
    assert format_duration(0.0125) == "12.50ms"
    assert format_duration(3.0) == "3.00s"


def test_visible_width_ignores_ansi():
    assert visible_width("\x1b[31mabc\x1b[0m") == 3


def test_total_seconds(report):
    assert report.total_seconds == pytest.approx(0.0025)


def test_text_report(report):
    text = SimpleReportGenerator(use_colors=False).generate_text_report(report, detail_level="detailed")

    assert "CIRCUIT REPORT: example" in text
    assert "Part 1 (wire a)" in text
    assert "32575" in text
    assert "16287" in text
    assert "0xFE7F" in text
    assert "\x1b[" not in text


def test_summary_text_report_omits_wire_table(report):
    text = SimpleReportGenerator(use_colors=False).generate_text_report(report)
    assert "0xFE7F" not in text


def test_json_report(report):
    data = json.loads(quick_report(report, "json"))

    assert data['part1'] == 32575
    assert data['part2'] == 16287
    assert data['wire_values'] == {'a': 32575, 'b': 65151}
    assert data['timings'] == {'Input': 0.0005, 'Part 1': 0.002}


def test_markdown_report(report):
    text = quick_report(report, "markdown")

    assert text.startswith("# Circuit Report: example")
    assert "| 1 | `a` | 32575 |" in text
    assert "| `b` | 65151 |" in text


def test_unknown_format(report):
    with pytest.raises(ValueError):
        quick_report(report, "pdf")


def test_generate_all_formats(report, tmp_path):
    generator = SimpleReportGenerator(use_colors=False)
    saved = generator.generate_all_formats(report, str(tmp_path), base_name="run")

    assert set(saved) == {"text", "json", "markdown"}
    assert (tmp_path / "run.txt").exists()
    assert json.loads((tmp_path / "run.json").read_text())['circuit'] == "example"
    assert (tmp_path / "run.md").read_text(encoding="utf-8").startswith("# Circuit Report")
    assert generator.reports_generated == 1


def test_save_report_failure_returns_false(report, tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    ok = SimpleReportGenerator(use_colors=False).save_report(report, str(blocker / "out.txt"))

    assert ok is False
    assert "Error saving text report" in capsys.readouterr().out
