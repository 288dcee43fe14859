"""Matched biquad filters, parameter ranges, value text and a block processor."""

__version__ = "0.1.0"
__all__ = ["coefficients", "parameter_text", "processor", "ranges"]