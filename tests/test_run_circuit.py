import json

from run_circuit import main, run_circuit, solve_part1, solve_part2


def test_solve_parts(example_store):
    assert solve_part1(example_store) == 32575
    assert solve_part2(example_store) == 16287
    assert solve_part2(example_store, part1_value=0) == 0


def test_run_circuit_collects_report(example_txt_path, example_values):
    result = run_circuit(str(example_txt_path), all_wires=True)
    report = result.report

    assert report.part1_value == 32575
    assert report.part2_value == 16287
    assert report.wire_values == example_values
    assert [t.stage for t in report.timings] == ["Input", "Part 1", "Part 2"]
    assert report.circuit_statistics['total_wires'] == 10
    assert result.saved_files == {}


def test_run_circuit_without_override(example_txt_path):
    report = run_circuit(str(example_txt_path), override=None).report
    assert report.part2_value is None
    assert [t.stage for t in report.timings] == ["Input", "Part 1"]


def test_main_prints_both_parts(example_txt_path, capsys):
    assert main(["--input", str(example_txt_path)]) == 0

    out = capsys.readouterr().out
    assert "[+] Part 1: 32575" in out
    assert "[+] Part 2: 16287" in out
    assert "Execution times:" in out


def test_main_other_target(example_json_path, capsys):
    assert main(["--input", str(example_json_path), "--target", "d", "--part1-only", "--all"]) == 0

    out = capsys.readouterr().out
    assert "[+] Part 1: 72" in out
    assert "Part 2" not in out
    assert "65412" in out


def test_main_saves_reports(example_txt_path, tmp_path, capsys):
    assert main(["--input", str(example_txt_path), "--report-dir", str(tmp_path),
                 "--format", "json"]) == 0

    saved = list(tmp_path.glob("report_example_*/circuit_report.json"))
    assert len(saved) == 1
    assert json.loads(saved[0].read_text())['part2'] == 16287


def test_main_missing_wire(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_text("x AND y -> a\n1 -> x\n")

    assert main(["--input", str(path), "--part1-only"]) == 1
    assert "No definition for wire 'y'" in capsys.readouterr().err


def test_main_cycle(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_text("b -> a\nNOT a -> b\n")

    assert main(["--input", str(path)]) == 1
    assert "Cyclic dependency" in capsys.readouterr().err


def test_main_syntax_error(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_text("1 -> a\n1 XOR 2 -> b\n")

    assert main(["--input", str(path)]) == 1
    assert "line 2" in capsys.readouterr().err


def test_main_invalid_json(tmp_path, capsys):
    path = tmp_path / "c.json"
    path.write_text('{"wires": [{"name": "a", "op": "AND", "operands": [1]}]}')

    assert main(["--input", str(path)]) == 1
    assert "AND takes 2 operand(s)" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "none.txt")]) == 1
    assert capsys.readouterr().err


def test_main_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_bytes(b"1 -> a\n\xff\xfe -> b\n")

    assert main(["--input", str(path), "--part1-only"]) == 1
    err = capsys.readouterr().err
    assert "line 2" in err
    assert "not valid UTF-8" in err


def test_main_invalid_utf8_json(tmp_path, capsys):
    path = tmp_path / "c.json"
    path.write_bytes(b'{"wires": [{"name": "\xff", "operands": [1]}]}')

    assert main(["--input", str(path)]) == 1
    assert capsys.readouterr().err
