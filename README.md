# smithwilson

Yield curve construction and extrapolation beyond the last liquid point with
the Smith-Wilson method with intensities, in the form used for the EIOPA
risk-free rate term structure.

Given liquid market rates (zero-coupon, swap or bond par rates), the package
calibrates the convergence speed `alpha` so that the forward intensity comes
within a chosen tolerance of the ultimate forward rate at the convergence
point, and returns curves for 150 annual tenors (0 to 149 years).

## Installation

```
pip install smithwilson
```

To run the test suite:

```
pip install "smithwilson[test]"
pytest
```

## Usage

```python
from smithwilson.extrapolation import Instrument, SmithWilson
from smithwilson.utils import get_liquid_rates

# Market rates for maturities 1..20 years, in decimals
market = [
    0.009250, 0.010590, 0.011032, 0.011044, 0.013788, 0.016944, 0.018429,
    0.018642, 0.020102, 0.021872, 0.022981, 0.024615, 0.025868, 0.026940,
    0.027786, 0.027962, 0.028432, 0.028665, 0.028957, 0.029492,
]
maturities = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 19, 20]
liquid = get_liquid_rates(maturities, market)

model = SmithWilson(
    instrument=Instrument.SWAP,
    ufr=0.033,             # ultimate forward rate, annually compounded
    alpha_min=0.05,        # lower bound for alpha
    num_of_coupon=1,       # coupon payments per year
    tau=1.0,               # convergence tolerance, in basis points
    convergence_period=40, # years from the last liquid point to convergence
    llp=20,                # last liquid point
)

result = model.fit(maturities, liquid)
print(result.alpha)
print(result.zero_coupon_rate[:25])
```

`SmithWilson` is a frozen dataclass holding the settings. The convergence
point is `llp + convergence_period` years, but never less than 60. Maturities
are whole years in increasing order; the last one sets the length of the cash
flow grid.

`SmithWilson.fit(maturities, rates)` returns a frozen `SmithWilsonResult` with

- `zero_coupon_rate`: annually compounded zero-coupon rates for tenors 0 to
  149 (the entry for tenor 0 is `0.0`),
- `yield_intensity`: the yield intensity curve,
- `forward_intensity`: the forward intensity curve,
- `alpha`: the calibrated convergence parameter.

`alpha` starts at `alpha_min`. If the tolerance is already met there, it is
kept; otherwise it is searched upwards in steps of 0.1 (up to 20) and then
refined to six further decimal digits.

### Instruments

`Instrument` has three members: `ZERO`, `SWAP` and `BOND`. `ZERO` treats each
rate as an annually compounded zero-coupon rate; `SWAP` and `BOND` are treated
alike, as par instruments paying `rate / num_of_coupon` at each coupon date and
the principal at maturity.

### Errors

- `MatrixInversionError` is raised when the system matrix of the fit is
  singular.
- `ValueError` is raised by `fit` and `q_matrix` when no maturities are given,
  by `q_matrix` when there are fewer maturities than rates, and by
  `get_liquid_rates` when a maturity is below 1.

### Building blocks

- `q_matrix(maturities, rates, ufr, instrument, num_of_coupon)` in
  `smithwilson.extrapolation` builds the matrix of cash flows discounted at the
  ultimate forward intensity; here `ufr` is the continuously compounded
  intensity `ln(1 + UFR)`.
- `h_mat(u, v)` evaluates the Smith-Wilson H function; it accepts scalars or
  numpy arrays.
- `get_liquid_rates(maturities, rates)` in `smithwilson.utils` picks the rate
  for each maturity from a full annual curve, where `rates[k]` is the rate for
  `k + 1` years.

## What it does not do

The package is a library only. It has no command-line tool, does not read or
write rate files, and does not fetch market data; inputs are passed in as
Python sequences and results come back as lists.