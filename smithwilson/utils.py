"""Helpers for preparing market inputs."""

from __future__ import annotations

from collections.abc import Sequence


def get_liquid_rates(maturities: Sequence[int], rates: Sequence[float]) -> list[float]:
    """Pick the rate for each liquid maturity from a curve indexed by year.

    ``rates[k]`` is taken as the rate for maturity ``k + 1`` years.
    """
    liquid = []
    for maturity in maturities:
        if maturity < 1:
            raise ValueError(f"maturity must be at least 1, got {maturity}")
        liquid.append(rates[maturity - 1])
    return liquid