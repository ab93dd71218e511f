import pytest

from advent2025.day03 import run, solve

SAMPLE = (
    "987654321111111\n"
    "811111111111119\n"
    "234234234234278\n"
    "818181911112111\n"
)


def test_part_one_sample():
    assert solve(SAMPLE, 2) == 357


def test_part_two_sample():
    assert solve(SAMPLE, 12) == 3121910778619


def test_picks_last_two_when_increasing():
    assert solve("12345", 2) == 45


def test_picks_first_two_when_decreasing():
    assert solve("54321", 2) == 54


def test_keeps_order_of_digits():
    assert solve("19", 2) == 19
    assert solve("91", 2) == 91


def test_single_digit():
    assert solve("9", 1) == 9


def test_lines_are_summed():
    assert solve("12\n34", 2) == 12 + 34


def test_invalid_character_is_rejected():
    with pytest.raises(ValueError):
        solve("12a4", 2)


def test_run_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert run(path) == (357, 3121910778619)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Day 3 solution 1 is 357",
        "Day 3 solution 2 is 3121910778619",
    ]