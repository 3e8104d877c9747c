"""
Tests for the public prime tables: primes() and primes_less_than().

Count mode and ceiling mode are cross-checked against each other and against
trial division.
"""

import numpy as np
import pytest

from ctprimes import (
    BoundUnderflow,
    InvalidCount,
    InvalidWidth,
    WidthOverflow,
    clear_cache,
    primes,
    primes_less_than,
)
from ctprimes import extract
from ctprimes.verify import is_prime_trial, verify_count

FIRST_TEN = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


class TestKnownValues:

    def test_empty_cases(self):
        assert primes(0).tolist() == []
        assert primes_less_than(0).tolist() == []
        assert primes_less_than(1).tolist() == []
        assert primes_less_than(2).tolist() == []

    def test_single_prime(self):
        assert primes(1).tolist() == [2]
        assert primes_less_than(3).tolist() == [2]

    def test_first_ten(self):
        assert primes(10).tolist() == FIRST_TEN

    def test_below_ten(self):
        assert primes_less_than(10).tolist() == [2, 3, 5, 7]

    def test_bound_is_exclusive(self):
        assert primes_less_than(29).tolist() == FIRST_TEN[:-1]
        assert primes_less_than(30).tolist() == FIRST_TEN

    @pytest.mark.parametrize("n", range(1, 8))
    def test_small_counts(self, n):
        """Counts handled by the fixed small ceiling."""
        assert primes(n).tolist() == FIRST_TEN[:n]

    def test_ten_thousandth_prime(self):
        by_count = primes(10_000)
        by_bound = primes_less_than(104730)
        assert len(by_count) == 10_000
        assert by_count[-1] == 104729
        assert by_bound[-1] == 104729
        assert np.array_equal(by_count, by_bound)


class TestProperties:

    @pytest.mark.parametrize("n", [1, 2, 6, 7, 8, 50, 168, 169, 1000])
    def test_count_mode(self, n):
        table = primes(n)
        assert len(table) == n
        assert np.all(np.diff(table) > 0), "must be strictly ascending"
        for p in table.tolist():
            assert is_prime_trial(p), f"{p} is not prime"

    @pytest.mark.parametrize("m", [0, 1, 2, 3, 4, 11, 12, 100, 541, 542, 1000])
    def test_ceiling_mode_matches_count_prefix(self, m):
        below = primes_less_than(m)
        assert np.all(below < m)
        reference = primes(len(below) + 1)
        assert below.tolist() == reference[:len(below)].tolist()
        # the next prime is not below m
        assert reference[len(below)] >= m

    def test_ceiling_mode_is_complete(self):
        m = 500
        expected = [n for n in range(m) if is_prime_trial(n)]
        assert primes_less_than(m).tolist() == expected

    def test_idempotent(self):
        a = primes(300)
        clear_cache()
        b = primes(300)
        assert a.tobytes() == b.tobytes()
        c = primes_less_than(300)
        clear_cache()
        d = primes_less_than(300)
        assert c is not d
        assert c.tobytes() == d.tobytes()


class TestCache:

    def test_repeat_call_returns_cached_table(self):
        clear_cache()
        assert primes(20) is primes(20)

    def test_width_is_part_of_key(self):
        assert primes(20, np.int16).dtype == np.int16
        assert primes(20, np.int32).dtype == np.int32

    def test_results_are_read_only(self):
        table = primes(5)
        with pytest.raises(ValueError):
            table[0] = 4
        assert primes(5)[0] == 2


class TestWidths:

    @pytest.mark.parametrize("width", [np.int8, np.uint8, np.int16, np.int32,
                                       np.int64, np.uint64, 'uint16', int])
    def test_integer_widths_accepted(self, width):
        table = primes(5, width)
        assert table.dtype == np.dtype(width)
        assert table.tolist() == [2, 3, 5, 7, 11]

    @pytest.mark.parametrize("width", [bool, np.bool_, 'U1', 'S1', str,
                                       np.float32, float, complex, object])
    def test_non_integer_widths_rejected(self, width):
        with pytest.raises(InvalidWidth):
            primes(5, width)
        with pytest.raises(InvalidWidth):
            primes_less_than(5, width)

    def test_unparseable_width_rejected(self):
        with pytest.raises(InvalidWidth):
            primes(5, 'not-a-dtype')

    def test_width_overflow_signed_byte(self):
        """The largest prime below 200 is 199 > 127."""
        with pytest.raises(WidthOverflow) as info:
            primes_less_than(200, np.int8)
        assert info.value.value == 199
        assert info.value.maximum == 127

    def test_width_overflow_count_mode(self):
        # 54th prime is 251, 55th is 257
        assert primes(54, np.uint8)[-1] == 251
        with pytest.raises(WidthOverflow):
            primes(55, np.uint8)

    def test_largest_fitting_table(self):
        assert primes_less_than(128, np.int8)[-1] == 127

    def test_bound_dtype_is_default_width(self):
        table = primes_less_than(np.int16(100))
        assert table.dtype == np.int16
        assert primes_less_than(100).dtype == np.int64

    def test_explicit_width_beats_bound_dtype(self):
        assert primes_less_than(np.int16(100), np.uint8).dtype == np.uint8


class TestArgumentValidation:

    @pytest.mark.parametrize("bad", [-1, -100])
    def test_negative_rejected(self, bad):
        with pytest.raises(InvalidCount):
            primes(bad)
        with pytest.raises(InvalidCount):
            primes_less_than(bad)

    @pytest.mark.parametrize("bad", [True, False, 5.0, '5', None, np.bool_(True)])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(InvalidCount):
            primes(bad)
        with pytest.raises(InvalidCount):
            primes_less_than(bad)

    @pytest.mark.parametrize("bad", [-1, -5, True, 2.0])
    def test_extractors_validate_directly(self, bad):
        """Calling the extractors without the public wrappers still rejects bad input."""
        with pytest.raises(InvalidCount):
            extract.first_n_primes(bad)
        with pytest.raises(InvalidCount):
            extract.primes_below(bad)

    def test_verify_rejects_negative_count(self, capsys):
        with pytest.raises(InvalidCount):
            verify_count(-1)
        assert capsys.readouterr().out == ''

    def test_numpy_integers_accepted(self):
        assert primes(np.int32(3)).tolist() == [2, 3, 5]
        assert primes_less_than(np.uint8(10)).tolist() == [2, 3, 5, 7]


class TestBoundUnderflow:
    """An estimator that under-counts must fail loudly, never truncate."""

    def test_short_ceiling_raises(self, monkeypatch):
        monkeypatch.setattr(extract, 'estimate_ceiling', lambda n: 10)
        with pytest.raises(BoundUnderflow) as info:
            extract.first_n_primes(5)
        assert info.value.requested == 5
        assert info.value.found == 4
        assert info.value.ceiling == 10


class TestVerify:

    def test_verify_count_reports_ok(self, capsys):
        report = verify_count(500, verbose=True)
        assert report['ok']
        assert report['last_prime'] == 3571
        assert report['slack'] > 0
        assert "✓" in capsys.readouterr().out

    def test_verify_quiet(self, capsys):
        assert verify_count(10, verbose=False)['ok']
        assert capsys.readouterr().out == ''


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
