import pytest

from algodrills import patterns


def lines(text):
    assert text == "" or text.endswith("\n")
    return text.split("\n")[:-1]


@pytest.mark.parametrize("size", [1, 3, 5])
def test_square_is_size_by_size(size):
    rows = lines(patterns.square(size))
    assert rows == ["* " * size] * size


def test_square_pinned():
    assert patterns.square(2) == "* * \n* * \n"


@pytest.mark.parametrize("n", [0, -2])
def test_non_positive_sizes_give_nothing(n):
    assert patterns.star_triangle(n) == ""
    assert patterns.pyramid(n) == ""
    assert patterns.concentric_square(n) == ""
    assert patterns.number_crown(n) == ""


def test_star_triangle_and_reverse_mirror_each_other():
    up = lines(patterns.star_triangle(4))
    down = lines(patterns.reverse_star_triangle(4))
    assert up == list(reversed(down))
    assert [row.count("*") for row in up] == [1, 2, 3, 4]


def test_number_triangle_rows_count_up():
    rows = lines(patterns.number_triangle(4))
    assert [row.split() for row in rows] == [
        [str(j) for j in range(1, i + 1)] for i in range(1, 5)
    ]
    assert lines(patterns.reverse_number_triangle(4)) == list(reversed(rows))


def test_pyramid_star_counts_and_padding():
    rows = lines(patterns.pyramid(3))
    assert [row.count("*") for row in rows] == [2, 4, 6]
    for i, row in enumerate(rows):
        pad = 3 - i - 1
        assert row.startswith(" " * pad + "*")


def test_inverted_pyramid_odd_counts():
    rows = lines(patterns.inverted_pyramid(3))
    assert [row.count("*") for row in rows] == [5, 3, 1]
    assert all(row.startswith(" *") and row.endswith(" ") for row in rows)


def test_diamond_is_pyramid_then_inverted():
    assert patterns.diamond(4) == patterns.pyramid(4) + patterns.inverted_pyramid(4)


def test_half_diamond_grows_then_shrinks_to_empty():
    rows = lines(patterns.half_diamond(3))
    assert [row.count("*") for row in rows] == [1, 2, 3, 2, 1, 0]
    assert rows[-1] == ""


def test_binary_triangle_alternates():
    rows = lines(patterns.binary_triangle(5))
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert row[0] == ("1" if i % 2 == 0 else "0")
        assert all(a != b for a, b in zip(row, row[1:]))


def test_number_crown_rows_have_constant_width():
    n = 4
    rows = lines(patterns.number_crown(n))
    assert len(rows) == n
    assert all(len(row) == 2 * n for row in rows)
    assert all(row == row[::-1] for row in rows)
    assert rows[-1] == "12344321"


def test_floyd_triangle_is_consecutive():
    rows = lines(patterns.floyd_triangle(4))
    numbers = [int(x) for row in rows for x in row.split()]
    assert numbers == list(range(1, 11))
    assert [len(row.split()) for row in rows] == [1, 2, 3, 4]


def test_letter_triangles():
    rows = lines(patterns.letter_triangle(3))
    assert [row.split() for row in rows] == [["A"], ["A", "B"], ["A", "B", "C"]]
    rev = lines(patterns.reverse_letter_triangle(3))
    assert rev == list(reversed(rows))


def test_repeated_letter_triangle():
    rows = lines(patterns.repeated_letter_triangle(4))
    for i, row in enumerate(rows):
        letter = chr(ord("A") + i)
        assert row.split() == [letter] * (i + 1)


def test_letter_palindrome_triangle():
    rows = lines(patterns.letter_palindrome_triangle(5))
    for i, row in enumerate(rows):
        assert row == row[::-1]
        assert len(row) == 2 * i + 1
        assert row[i] == chr(ord("A") + i)


def test_letter_tail():
    rows = lines(patterns.letter_tail())
    assert rows[:2] == ["E", "DA"]
    assert len(rows) == 5
    assert all(row.endswith("E") for row in rows[2:])
    assert [len(row) for row in rows[2:]] == [3, 4, 5]


def test_star_void_structure():
    n = 5
    rows = lines(patterns.star_void(n))
    assert len(rows) == 2 * n
    assert [row.count("*") for row in rows[:n]] == [10, 8, 6, 4, 2]
    assert [row.count("*") for row in rows[n:]] == [2, 4, 6, 8, 10]
    assert all(len(row) == 2 * n for row in rows)


def test_star_void_lower_gap_starts_fixed():
    rows = lines(patterns.star_void(2))
    lower = rows[2:]
    assert [row.count(" ") for row in lower] == [8, 6]


def test_butterfly_symmetric():
    n = 4
    rows = lines(patterns.butterfly(n))
    assert len(rows) == 2 * n - 1
    assert rows == list(reversed(rows))
    assert all(len(row) == 2 * n for row in rows)
    assert rows[n - 1] == "*" * (2 * n)


def test_hollow_rectangle():
    rows = lines(patterns.hollow_rectangle(4, 6))
    assert len(rows) == 4
    assert rows[0] == rows[-1] == "*" * 6
    for row in rows[1:-1]:
        assert row == "*" + " " * 4 + "*"


def test_concentric_square():
    n = 3
    rows = lines(patterns.concentric_square(n))
    size = 2 * n - 1
    assert len(rows) == size
    assert rows[0] == "3" * size
    assert rows[n - 1][n - 1] == "1"
    assert rows == list(reversed(rows))
    assert all(row == row[::-1] for row in rows)


def test_main_prints_pattern(capsys):
    assert patterns.main(["hollow-rectangle", "3", "5"]) == 0
    assert capsys.readouterr().out == patterns.hollow_rectangle(3, 5)


def test_main_without_sizes_reads_input(monkeypatch, capsys):
    answers = iter(["3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert patterns.main(["diamond"]) == 0
    assert capsys.readouterr().out == patterns.diamond(3)


def test_main_letter_tail_takes_no_sizes(capsys):
    assert patterns.main(["letter-tail"]) == 0
    assert capsys.readouterr().out == patterns.letter_tail()


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit) as exc:
        patterns.main(["hexagon", "3"])
    assert exc.value.code == 2


def test_main_rejects_extra_sizes():
    with pytest.raises(SystemExit) as exc:
        patterns.main(["square", "2", "3"])
    assert exc.value.code == 2