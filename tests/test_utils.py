import pytest

from smithwilson.utils import get_liquid_rates

MATURITIES = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 19, 20]
RATES = [
    x / 100.0
    for x in [
        0.9250, 1.0590, 1.1032, 1.1044, 1.3788, 1.6944, 1.8429, 1.8642, 2.0102, 2.1872,
        2.2981, 2.4615, 2.5868, 2.6940, 2.7786, 2.7962, 2.8432, 2.8665, 2.8957, 2.9492,
    ]
]


def test_one_rate_per_maturity():
    result = get_liquid_rates(MATURITIES, RATES)
    assert len(result) == len(MATURITIES)


def test_rates_are_taken_by_year():
    result = get_liquid_rates(MATURITIES, RATES)
    for maturity, rate in zip(MATURITIES, result):
        assert rate == RATES[maturity - 1]


def test_gapped_maturities_skip_rates():
    result = get_liquid_rates(MATURITIES, RATES)
    assert result[13] == RATES[14]
    assert result[14] == RATES[18]
    assert result[-1] == RATES[19]


def test_empty_maturities_give_empty_list():
    assert get_liquid_rates([], RATES) == []


def test_zero_maturity_is_rejected():
    with pytest.raises(ValueError):
        get_liquid_rates([0, 1], RATES)


def test_maturity_beyond_curve_is_rejected():
    with pytest.raises(IndexError):
        get_liquid_rates([21], RATES)