import pytest

from toybox.leetcode import generate, is_palindrome, main, remove_duplicates


@pytest.mark.parametrize(
    "x, expected",
    [(123, False), (121, True), (-121, False), (10, False), (-101, False)],
)
def test_is_palindrome(x, expected):
    assert is_palindrome(x) is expected


def test_zero_is_palindrome():
    assert is_palindrome(0) is True


def test_generate():
    assert generate(5) == [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1]]


def test_generate_one_row():
    assert generate(1) == [[1]]


def test_generate_non_positive_still_has_first_row():
    assert generate(0) == [[1]]


def test_generate_row_sums_are_powers_of_two():
    for index, row in enumerate(generate(10)):
        assert sum(row) == 2**index
        assert row == row[::-1]


def test_remove_duplicates():
    nums = [1, 1, 2]
    result = remove_duplicates(nums)
    assert result == 2
    assert nums == [1, 2, 2]


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0
    assert nums == []


def test_remove_duplicates_prefix_is_unique_sorted():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    count = remove_duplicates(nums)
    assert nums[:count] == sorted(set(original))
    assert len(nums) == len(original)


def test_main_greets(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, world!\n"