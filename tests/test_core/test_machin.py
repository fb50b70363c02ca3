"""Tests for the Machin combiner."""

from __future__ import annotations

import pytest

from machinpi.core.machin import (
    GUARD_DIGITS,
    InvalidDigitsError,
    InvalidGuardDigitsError,
    compute_pi,
    required_guard_digits,
    resolve_guard_digits,
    series_terms,
)

# 3 followed by the first 100 decimal digits of pi.
PI_DIGITS = (
    "3"
    "1415926535897932384626433832795028841971693993751058209749445923078164"
    "062862089986280348253421170679"
)


class TestKnownValues:
    """compute_pi() reproduces published digits."""

    def test_zero_digits(self) -> None:
        assert compute_pi(0) == 3

    def test_five_digits(self) -> None:
        assert compute_pi(5) == 314159

    def test_fifty_digits(self) -> None:
        assert str(compute_pi(50)) == PI_DIGITS[:51]

    def test_hundred_digits(self) -> None:
        assert str(compute_pi(100)) == PI_DIGITS

    @pytest.mark.parametrize("digits", [1, 2, 3, 10, 30])
    def test_result_has_digits_plus_one_characters(self, digits: int) -> None:
        assert len(str(compute_pi(digits))) == digits + 1


class TestPrecisionConsistency:
    """Lower precision results are prefixes of higher precision ones."""

    @pytest.mark.parametrize("digits", [1, 10, 50, 100, 150])
    def test_prefix_of_longer_result(self, digits: int) -> None:
        longer = str(compute_pi(200))
        assert longer[: digits + 1] == str(compute_pi(digits))

    def test_idempotent(self) -> None:
        assert compute_pi(300) == compute_pi(300)

    def test_parallel_matches_sequential(self) -> None:
        assert compute_pi(200, parallel=True) == compute_pi(200)


class TestGuardDigits:
    """Fixed and computed guard digit policies."""

    def test_default_is_ten(self) -> None:
        assert GUARD_DIGITS == 10
        assert resolve_guard_digits(100) == 10

    def test_explicit_value_passes_through(self) -> None:
        assert resolve_guard_digits(100, 3) == 3

    def test_auto_resolves_to_required(self) -> None:
        assert resolve_guard_digits(1000, "auto") == required_guard_digits(1000)

    def test_required_grows_slowly(self) -> None:
        small = required_guard_digits(10)
        large = required_guard_digits(100_000)
        assert 1 <= small <= large <= 10

    def test_required_for_zero_digits(self) -> None:
        assert required_guard_digits(0) >= 1

    @pytest.mark.parametrize("digits", [0, 5, 50, 100])
    def test_auto_matches_default(self, digits: int) -> None:
        assert compute_pi(digits, guard_digits="auto") == compute_pi(digits)

    def test_invalid_guard_digits(self) -> None:
        with pytest.raises(InvalidGuardDigitsError):
            compute_pi(10, guard_digits=-1)
        with pytest.raises(InvalidGuardDigitsError):
            compute_pi(10, guard_digits="lots")
        with pytest.raises(InvalidGuardDigitsError):
            compute_pi(10, guard_digits=True)


class TestDigitsValidation:
    """compute_pi() rejects out-of-domain digit counts before computing."""

    def test_negative_digits(self) -> None:
        with pytest.raises(InvalidDigitsError, match=">= 0"):
            compute_pi(-1)

    @pytest.mark.parametrize("bad", [5.0, "5", None, True])
    def test_non_integer_digits(self, bad: object) -> None:
        with pytest.raises(InvalidDigitsError):
            compute_pi(bad)  # type: ignore[arg-type]

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            compute_pi(-5)


class TestSeriesTerms:
    """series_terms() reports the work behind a computation."""

    def test_report_shape(self) -> None:
        report = series_terms(100)
        assert report["digits"] == 100
        assert report["guard_digits"] == 10
        assert report["scale_digits"] == 110
        assert set(report["terms"]) == {5, 239}

    def test_arccot_5_needs_more_terms(self) -> None:
        terms = series_terms(1000)["terms"]
        assert terms[5] > terms[239] > 0
