import pytest

from advent2025.day05 import run, solve1, solve2

SAMPLE = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"


def test_part_one_sample():
    assert solve1(SAMPLE) == 3


def test_part_two_sample():
    assert solve2(SAMPLE) == 14


def test_bounds_are_inclusive():
    assert solve1("2-4\n\n1\n2\n4\n5\n") == 2


def test_same_lower_bound_keeps_widest_range():
    assert solve1("1-2\n1-9\n\n9\n") == 1


def test_adjacent_ranges_are_counted_separately():
    assert solve2("1-3\n4-6\n\n") == 6


def test_duplicate_and_nested_ranges():
    assert solve2("1-5\n1-5\n2-3\n\n") == 5


def test_range_bridging_two_others():
    assert solve2("1-2\n8-9\n2-8\n\n") == 9


def test_missing_blank_line_raises():
    with pytest.raises(ValueError):
        solve1("3-5\n10-14\n")
    with pytest.raises(ValueError):
        solve2("3-5\n10-14\n")


def test_malformed_range_raises():
    with pytest.raises(ValueError):
        solve2("35\n\n1\n")


def test_run_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert run(path) == (3, 14)
    out = capsys.readouterr().out
    assert "Day 5 solution 1 is 3" in out
    assert "Day 5 solution 2 is 14" in out