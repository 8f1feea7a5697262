from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2024.cli import main, run_day
from aoc2024.solvers import SOLVER_REGISTRY, get_solver


def write_inputs(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "day01.txt").write_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n", encoding="utf-8")
    (directory / "day02.txt").write_text("7 6 4 2 1\n1 2 7 8 9\n1 3 2 4 5\n", encoding="utf-8")
    (directory / "day03.txt").write_text("mul(2,4)don't()mul(5,5)do()mul(8,5)", encoding="utf-8")
    (directory / "day04.txt").write_text("M.S\n.A.\nM.S\n", encoding="utf-8")


def test_registry_lists_four_days():
    assert sorted(SOLVER_REGISTRY) == [1, 2, 3, 4]
    assert get_solver(3).TITLE == "Mull It Over"
    with pytest.raises(KeyError, match="Available days"):
        get_solver(25)


def test_single_day_prints_two_lines(tmp_path: Path, capsys):
    write_inputs(tmp_path)
    assert main(["1", "--inputs-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Part 1 - Total Distance: 11", "Part 2 - Similarity Score: 31"]


def test_explicit_input_file(tmp_path: Path, capsys):
    path = tmp_path / "memory.txt"
    path.write_text("mul(2,4)don't()mul(5,5)do()mul(8,5)", encoding="utf-8")
    assert main(["3", "--input", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Part 1 - Total of all multiplications: 73",
        "Part 2 - Total of enabled multiplications: 48",
    ]


def test_all_days(tmp_path: Path, capsys):
    write_inputs(tmp_path)
    assert main(["--all", "--inputs-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Day 4: Ceres Search" in out
    assert "Part 2 - Safe Sequences with Dampener: 2" in out
    assert "Part 2 - X-MAS patterns: 1" in out


def test_reruns_are_identical(tmp_path: Path, capsys):
    write_inputs(tmp_path)
    main(["4", "--inputs-dir", str(tmp_path)])
    first = capsys.readouterr().out
    main(["4", "--inputs-dir", str(tmp_path)])
    assert capsys.readouterr().out == first


def test_missing_input_logs_and_fails(tmp_path: Path, capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["2", "--inputs-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""
    assert "day 2 failed" in caplog.text
    assert "day02.txt" in caplog.text


def test_parse_failure_logs_and_fails(tmp_path: Path, capsys, caplog):
    path = tmp_path / "bad.txt"
    path.write_text("1 2\nthree 4\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main(["1", "--input", str(path)]) == 1
    assert "line 2" in caplog.text
    assert capsys.readouterr().out == ""


def test_all_keeps_going_after_a_failure(tmp_path: Path, capsys, caplog):
    write_inputs(tmp_path)
    (tmp_path / "day01.txt").unlink()
    with caplog.at_level(logging.ERROR):
        assert main(["--all", "--inputs-dir", str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "Day 1" not in out
    assert "Day 2: Red-Nosed Reports" in out


@pytest.mark.parametrize("argv", [[], ["1", "--all"], ["--all", "--input", "x.txt"], ["9"]])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2


def test_run_day_returns_answers(tmp_path: Path):
    write_inputs(tmp_path)
    part1, part2 = run_day(2, tmp_path / "day02.txt")
    assert (part1.value, part2.value) == (1, 2)


def test_out_of_range_level_logs_and_fails(tmp_path: Path, capsys, caplog):
    path = tmp_path / "reports.txt"
    path.write_text("1 2 3\n4 99999999999999999999\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main(["2", "--input", str(path)]) == 1
    assert "line 2: integer out of range" in caplog.text
    assert capsys.readouterr().out == ""


def test_directory_as_input_logs_and_fails(tmp_path: Path, capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["4", "--input", str(tmp_path)]) == 1
    assert "cannot read input file" in caplog.text
    assert capsys.readouterr().out == ""
