from advent.y2024d04 import count_x_mas, count_xmas, is_x_mas

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def test_example_xmas_count():
    assert count_xmas(EXAMPLE) == 18


def test_example_x_mas_count():
    assert count_x_mas(EXAMPLE) == 9


def test_reversed_word_counts_the_same():
    assert count_xmas(["SAMX"]) == count_xmas(["XMAS"])


def test_vertical_word_counts_like_horizontal():
    assert count_xmas(list("XMAS")) == count_xmas(["XMAS"])


def test_mirrored_grid_keeps_counts():
    mirrored = [row[::-1] for row in EXAMPLE]
    assert count_xmas(mirrored) == count_xmas(EXAMPLE)
    assert count_x_mas(mirrored) == count_x_mas(EXAMPLE)


def test_is_x_mas_true():
    assert is_x_mas(["M.S", ".A.", "M.S"], 1, 1) is True


def test_is_x_mas_false_when_same_letters_face():
    assert is_x_mas(["M.M", ".A.", "M.M"], 1, 1) is False


def test_is_x_mas_needs_a_in_middle():
    assert is_x_mas(["M.S", ".X.", "M.S"], 1, 1) is False