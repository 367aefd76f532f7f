"""Tests for src/algebra/prime.py: Wilson's-theorem primality."""

import pytest

from src.algebra import IntegerOverflowError, IntWidth, MathErrorKind, OutOfRangeError, is_prime_number


class TestIsPrimeNumber:
    @pytest.mark.parametrize("p", [2, 3, 5, 47, 12_967, 111_697, 1_122_157])
    def test_prime_returns_input(self, p):
        assert is_prime_number(p) == p

    @pytest.mark.parametrize("n", [4, 9, 12, 25, 158_874])
    def test_composite_returns_none(self, n):
        assert is_prime_number(n) is None

    def test_small_range_matches_trial_division(self):
        def trial(n: int) -> bool:
            return all(n % d for d in range(2, int(n**0.5) + 1))

        for n in range(2, 200):
            assert (is_prime_number(n) == n) == trial(n)

    def test_i32_width(self):
        assert is_prime_number(47, width=IntWidth.I32) == 47


class TestIsPrimeNumberErrors:
    @pytest.mark.parametrize("a", [1, 0, -1, -(2**63)])
    def test_out_of_range(self, a):
        with pytest.raises(OutOfRangeError) as excinfo:
            is_prime_number(a)
        assert excinfo.value.kind is MathErrorKind.OUT_OF_RANGE

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            is_prime_number(1)

    def test_operand_out_of_width(self):
        with pytest.raises(IntegerOverflowError):
            is_prime_number(2**31, width=IntWidth.I32)

    def test_non_int(self):
        with pytest.raises(TypeError):
            is_prime_number(7.0)
