import pytest

from puzzlekit.numbers import check_record, is_palindrome, pivot_integer, reverse_integer


@pytest.mark.parametrize("x", [123, 1, 987654, 10203, 5, 1463847412])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [123, 4567, 89])
def test_reverse_integer_matches_reversed_text(x):
    assert reverse_integer(x) == int(str(x)[::-1])
    assert reverse_integer(-x) == -int(str(x)[::-1])


def test_reverse_integer_drops_trailing_zeros():
    assert reverse_integer(1200) == reverse_integer(12)


def test_reverse_integer_zero():
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("x", [2**31 - 1, -(2**31), 1534236469])
def test_reverse_integer_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


@pytest.mark.parametrize("x", [0, 7, 121, 1221, 12321])
def test_is_palindrome_true(x):
    assert is_palindrome(x) is True


@pytest.mark.parametrize("x", [-121, 10, 123, 1231])
def test_is_palindrome_false(x):
    assert is_palindrome(x) is False


def test_check_record_empty():
    assert check_record(0) == 1


def test_check_record_small_values():
    assert check_record(1) == 3
    assert check_record(2) == 8


def test_check_record_grows():
    values = [check_record(n) for n in range(1, 12)]
    assert values == sorted(values)


def test_check_record_large_in_range():
    result = check_record(10101)
    assert 0 <= result < 1_000_000_007


def test_check_record_negative_raises():
    with pytest.raises(ValueError):
        check_record(-1)


def test_pivot_integer_example():
    assert pivot_integer(8) == 6


def test_pivot_integer_one():
    assert pivot_integer(1) == 1


def test_pivot_integer_missing():
    assert pivot_integer(4) == -1
    assert pivot_integer(0) == -1


@pytest.mark.parametrize("n", range(1, 300))
def test_pivot_integer_invariant(n):
    x = pivot_integer(n)
    if x == -1:
        assert all(sum(range(1, i + 1)) != sum(range(i, n + 1)) for i in range(1, n + 1))
    else:
        assert sum(range(1, x + 1)) == sum(range(x, n + 1))