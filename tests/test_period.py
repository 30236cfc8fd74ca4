import pytest

from periodcrack.classical.common import ALPHABET
from periodcrack.classical.polyalphabetic.keys import encrypt
from periodcrack.classical.polyalphabetic.period import (
    average_ioc,
    detect_period,
    forced_period,
    ioc_scan,
    period_bound,
)
from periodcrack.core.config import SolverConfig
from periodcrack.core.errors import CrackError, DegenerateSlice, PeriodNotFound


def test_detects_period_three(ciphertext):
    report = detect_period(ciphertext)
    assert report.period == 3
    assert not report.forced
    assert [k for k, _ in report.scores] == [1, 2, 3]
    assert [v for _, v in report.scores] == pytest.approx([1.3079, 1.2985, 1.8733], abs=1e-3)
    assert report.slices == [ciphertext[i::3] for i in range(3)]


def test_multiple_of_period_scores_high_but_is_never_reached(ciphertext):
    scores = dict(ioc_scan(ciphertext, max_period=8))
    assert scores[6] == pytest.approx(1.8579, abs=1e-3)
    assert detect_period(ciphertext).period == 3


def test_monoalphabetic_text_is_period_one(plaintext, key):
    ct = encrypt(plaintext, key[:1])
    report = detect_period(ct)
    assert report.period == 1
    assert report.ioc == pytest.approx(1.8863, abs=1e-3)


def test_high_threshold_finds_nothing(ciphertext):
    config = SolverConfig(ioc_threshold=2.5, max_period=10)
    with pytest.raises(PeriodNotFound) as err:
        detect_period(ciphertext, config)
    assert err.value.bound == 10
    assert len(err.value.scores) == 10
    assert "2.5" in str(err.value)


def test_scan_is_bounded():
    # every period up to 5 leaves each slice with distinct letters
    text = ALPHABET * 2
    with pytest.raises(PeriodNotFound) as err:
        detect_period(text, SolverConfig(max_period=5))
    assert err.value.bound == 5
    assert [k for k, _ in err.value.scores] == [1, 2, 3, 4, 5]


def test_bound_keeps_two_letters_per_slice():
    assert period_bound("A" * 10) == 5
    assert period_bound("A" * 1000, SolverConfig(max_period=7)) == 7


def test_average_ioc_degenerate_slice():
    with pytest.raises(DegenerateSlice) as err:
        average_ioc("ABC", 2)
    assert err.value.period == 2
    assert err.value.index == 1


def test_forced_period(ciphertext):
    report = forced_period(ciphertext, 4)
    assert report.forced
    assert report.period == 4
    assert len(report.slices) == 4
    assert report.ioc == pytest.approx(1.2988, abs=1e-3)


def test_forced_period_out_of_range(ciphertext):
    with pytest.raises(CrackError):
        forced_period(ciphertext, 0)
    with pytest.raises(DegenerateSlice):
        forced_period("ABCDE", 3)
