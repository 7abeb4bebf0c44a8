"""Smith-Wilson yield curve extrapolation with intensities."""

__version__ = "0.1.0"
__all__ = ["extrapolation", "utils"]