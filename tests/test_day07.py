from advent2025.day07 import run, solve1, solve2

SAMPLE = (
    ".......S.......\n"
    "...............\n"
    ".......^.......\n"
    "...............\n"
    "......^.^......\n"
    "...............\n"
    ".....^.^.^.....\n"
    "...............\n"
    "....^.^...^....\n"
    "...............\n"
    "...^.^...^.^...\n"
    "...............\n"
    "..^...^.....^..\n"
    "...............\n"
    ".^.^.^.^.^...^.\n"
    "...............\n"
)


def test_part_one_sample():
    assert solve1(SAMPLE) == 21


def test_part_two_sample():
    assert solve2(SAMPLE) == 40


def test_no_splitters():
    assert solve1("S\n.\n.\n") == 0
    assert solve2("S\n.\n.\n") == 1


def test_single_split():
    text = "..S..\n..^..\n.....\n"
    assert solve1(text) == 1
    assert solve2(text) == 2


def test_split_at_left_edge_loses_one_side():
    text = "S.\n^.\n"
    assert solve1(text) == 1
    assert solve2(text) == 1


def test_merging_beams_counted_once_in_part_one():
    text = "..S..\n..^..\n.....\n.^.^.\n"
    assert solve1(text) == 3
    assert solve2(text) == 4


def test_run_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert run(path) == (21, 40)
    out = capsys.readouterr().out
    assert "Day 7 solution 1 is 21" in out
    assert "Day 7 solution 2 is 40" in out