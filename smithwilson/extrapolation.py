"""Smith-Wilson yield curve extrapolation with intensities."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

_TENORS = 150
_PRECISION = 6
_ALPHA_LIMIT = 20.0


class MatrixInversionError(Exception):
    """Raised when the system matrix of the fit cannot be inverted."""

    def __init__(self, message: str = "Matrix is not invertible") -> None:
        super().__init__(message)


class Instrument(enum.Enum):
    """Kind of instrument the liquid rates refer to."""

    ZERO = "zero"
    SWAP = "swap"
    BOND = "bond"


@dataclass(frozen=True)
class SmithWilsonResult:
    """Curves produced by a fit, indexed by whole years from 0 to 149."""

    zero_coupon_rate: list[float]
    yield_intensity: list[float]
    forward_intensity: list[float]
    alpha: float


def h_mat(u, v):
    """Element of the Wilson H matrix; works on scalars and numpy arrays."""
    return _h(u + v) - _h(np.abs(u - v))


def _h(z):
    return (z + np.exp(-z)) / 2.0


def q_matrix(
    maturities: Sequence[int],
    rates: Sequence[float],
    ufr: float,
    instrument: Instrument,
    num_of_coupon: int,
) -> np.ndarray:
    """Build the Q matrix of discounted cash flows.

    ``ufr`` is the continuously compounded ultimate forward rate.
    """
    if not maturities:
        raise ValueError("at least one maturity is required")
    if len(maturities) < len(rates):
        raise ValueError("fewer maturities than rates")
    umax = maturities[-1]
    q = np.zeros((len(rates), umax * num_of_coupon))
    coupons = float(num_of_coupon)

    for row, (maturity, rate) in enumerate(zip(maturities, rates)):
        if instrument is Instrument.ZERO:
            q[row, maturity - 1] = math.exp(-ufr * maturity) * (1.0 + rate) ** maturity
        else:
            payments = num_of_coupon * maturity
            for col in range(payments - 1):
                q[row, col] = math.exp(-ufr * (col + 1) / coupons) * (rate / coupons)
            q[row, payments - 1] = math.exp(-ufr * payments / coupons) * (1.0 + rate / coupons)
    return q


def _g_alpha(
    alpha: float,
    q: np.ndarray,
    umax: int,
    num_of_coupon: int,
    t2: float,
    tau: float,
) -> tuple[float, np.ndarray]:
    """Return the convergence gap g(alpha) - tau and the vector Q b."""
    times = np.arange(1, umax * num_of_coupon + 1) / num_of_coupon
    scaled = alpha * times
    h = h_mat(scaled[:, None], scaled[None, :])

    target = 1.0 - q.sum(axis=1)
    try:
        inverse = np.linalg.inv(q @ h @ q.T)
    except np.linalg.LinAlgError:
        raise MatrixInversionError() from None

    q_b = q.T @ (inverse @ target)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        weighted_times = float(q_b @ times)
        weighted_sinh = float(q_b @ np.sinh(scaled))
        kappa = (1.0 + alpha * weighted_times) / weighted_sinh
        gap = alpha / abs(1.0 - kappa * np.exp(t2 * alpha)) - tau
    return float(gap), q_b


def _scan_for_alpha(
    prev_alpha: float,
    stepsize: float,
    q: np.ndarray,
    umax: int,
    num_of_coupon: int,
    t2: float,
    tau: float,
) -> tuple[float, np.ndarray]:
    step = stepsize / 10.0
    alpha = prev_alpha - stepsize + step
    gamma = np.zeros(1)
    while alpha <= prev_alpha + step:
        gap, gamma = _g_alpha(alpha, q, umax, num_of_coupon, t2, tau)
        if gap <= 0.0:
            break
        alpha += step
    return alpha, gamma


def _optimize_alpha(
    alpha_min: float,
    q: np.ndarray,
    umax: int,
    num_of_coupon: int,
    t2: float,
    tau: float,
    precision: int,
) -> tuple[float, np.ndarray]:
    gap, gamma = _g_alpha(alpha_min, q, umax, num_of_coupon, t2, tau)
    if gap <= 0.0:
        return alpha_min, gamma

    stepsize = 0.1
    alpha = alpha_min
    while alpha < _ALPHA_LIMIT:
        if _g_alpha(alpha, q, umax, num_of_coupon, t2, tau)[0] <= 0.0:
            break
        alpha += stepsize

    for _ in range(precision):
        alpha, gamma = _scan_for_alpha(alpha, stepsize, q, umax, num_of_coupon, t2, tau)
        stepsize /= 10.0
    return alpha, gamma


@dataclass(frozen=True)
class SmithWilson:
    """Smith-Wilson extrapolation settings.

    ``tau`` is the convergence tolerance in basis points, ``convergence_period``
    the years from the last liquid point ``llp`` to the convergence point.
    """

    instrument: Instrument
    ufr: float
    alpha_min: float
    num_of_coupon: int
    tau: float
    convergence_period: int
    llp: int

    def fit(self, maturities: Sequence[int], rates: Sequence[float]) -> SmithWilsonResult:
        """Fit the curve to liquid rates and extrapolate it to 149 years."""
        if not maturities:
            raise ValueError("at least one maturity is required")
        ln_ufr = math.log(1.0 + self.ufr)
        n = self.num_of_coupon
        q = q_matrix(maturities, rates, ln_ufr, self.instrument, n)

        t2 = float(max(self.llp + self.convergence_period, 60))
        umax = maturities[-1]
        tau = self.tau / 10000.0
        alpha, gamma = _optimize_alpha(self.alpha_min, q, umax, n, t2, tau, _PRECISION)

        payments = np.arange(1, umax * n + 1)
        pay_times = payments / n
        years = np.arange(_TENORS)
        t = years.astype(float)

        with np.errstate(over="ignore", invalid="ignore"):
            h = h_mat(alpha * t[:, None], alpha * pay_times[None, :])
            later = (payments // n)[None, :] > years[:, None]
            g = np.where(
                later,
                alpha * (1.0 - np.exp(-alpha * pay_times))[None, :] * np.cosh(alpha * t)[:, None],
                alpha * np.exp(-alpha * t)[:, None] * np.sinh(alpha * pay_times)[None, :],
            )
            tt_discount = h @ gamma
            tt_intensity = g @ gamma
        weighted = float((1.0 - np.exp(-alpha * pay_times)) @ gamma)

        discount = [1.0]
        zero_rate = [0.0]
        yield_intensity = [ln_ufr - alpha * weighted]
        forward_intensity = [yield_intensity[0]]
        for year in range(1, _TENORS):
            adj = 1.0 + float(tt_discount[year])
            yield_intensity.append(ln_ufr - (1.0 + float(tt_discount[year]) / year))
            forward_intensity.append(ln_ufr - float(tt_intensity[year]) / adj)
            price = math.exp(-ln_ufr * year) * adj
            discount.append(price)
            zero_rate.append((1.0 / price) ** (1.0 / year) - 1.0)

        return SmithWilsonResult(
            zero_coupon_rate=zero_rate,
            yield_intensity=yield_intensity,
            forward_intensity=forward_intensity,
            alpha=alpha,
        )