import pytest

from advent2025.day01 import run, solve1, solve2

SAMPLE = "\n".join(
    ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
) + "\n"


def test_part_one_sample():
    assert solve1(SAMPLE) == 3


def test_part_two_sample():
    assert solve2(SAMPLE) == 6


def test_part_one_lands_on_zero():
    assert solve1("R50") == 1
    assert solve1("L50\nR100") == 2


def test_part_one_no_hits():
    assert solve1("R1\nL2") == 0


def test_part_two_counts_full_turns():
    assert solve2("R1000") == 10


def test_part_two_left_past_zero():
    assert solve2("L51") == 1


def test_part_one_rejects_unknown_direction():
    with pytest.raises(ValueError, match="direction"):
        solve1("X5")


def test_part_two_rejects_unknown_direction():
    with pytest.raises(ValueError, match="direction"):
        solve2("X5")


def test_part_two_accepts_zero_rotation_of_any_direction():
    assert solve2("X0") == 0


def test_rejects_bad_number():
    with pytest.raises(ValueError, match="Invalid value"):
        solve1("Rabc")


def test_run_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert run(path) == (3, 6)
    out = capsys.readouterr().out.splitlines()
    assert out == ["Day 1 solution 1 is 3", "Day 1 solution 2 is 6"]