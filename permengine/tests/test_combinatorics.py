import pytest

from permengine import (
    INT64_FACTORIAL_CEILING, InvalidArgument, estimate_unique_permutations,
    factorial, frequency_table
)


def test_factorial():
    assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]


def test_factorial_ceiling():
    assert factorial(INT64_FACTORIAL_CEILING) < 2 ** 63
    assert factorial(INT64_FACTORIAL_CEILING + 1) >= 2 ** 63
    # no wraparound past the ceiling
    assert factorial(25) == 15511210043330985984000000


def test_factorial_negative():
    with pytest.raises(InvalidArgument, match="negative"):
        factorial(-1)


def test_factorial_non_integral():
    with pytest.raises(TypeError):
        factorial(2.5)


def test_frequency_table():
    assert frequency_table("banana") == {"b": 1, "a": 3, "n": 2}
    assert frequency_table("") == {}
    assert frequency_table((1, 1, 2)) == {1: 2, 2: 1}
    with pytest.raises(InvalidArgument):
        frequency_table(None)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", 1),
        ("a", 1),
        ("aab", 3),
        ("abc", 6),
        ("aaaa", 1),
        ("aabb", 6),
        ("banana", 60),
        ("mississippi", 34650),
    ]
)
def test_estimate(word, expected):
    assert estimate_unique_permutations(word) == expected


def test_estimate_none():
    assert estimate_unique_permutations(None) == 1


def test_estimate_wide_symbols():
    # symbols outside the single-byte range count like any other
    assert estimate_unique_permutations("ééa") == 3
    assert estimate_unique_permutations("日本日本") == 6
    assert estimate_unique_permutations(("x", 1, 1, None)) == 12
