"""Normalised parameter ranges with optional skew or logarithmic mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

RemapFunction = Callable[[float, float, float], float]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def map_to_log10(value: float, range_start: float, range_end: float) -> float:
    """Map a 0..1 proportion onto a logarithmic range."""
    if range_start <= 0 or range_end <= 0:
        raise ValueError("logarithmic range bounds must be positive")
    return range_start * math.pow(range_end / range_start, value)


def map_from_log10(value: float, range_start: float, range_end: float) -> float:
    """Map a value from a logarithmic range onto 0..1."""
    if range_start <= 0 or range_end <= 0 or value <= 0:
        raise ValueError("logarithmic range values must be positive")
    return math.log(value / range_start) / math.log(range_end / range_start)


@dataclass
class NormalisableRange:
    """A value range that maps to and from the interval 0..1."""

    start: float
    end: float
    interval: float = 0.0
    skew: float = 1.0
    convert_from_0to1_function: Optional[RemapFunction] = None
    convert_to_0to1_function: Optional[RemapFunction] = None
    snap_to_legal_value_function: Optional[RemapFunction] = None

    def __post_init__(self) -> None:
        self._check()

    def _check(self) -> None:
        if not self.end > self.start:
            raise ValueError("range end must be greater than its start")
        if self.interval < 0:
            raise ValueError("interval must not be negative")
        if not self.skew > 0:
            raise ValueError("skew must be positive")

    def set_skew_for_centre(self, centre: float) -> None:
        """Choose the skew so that 0.5 maps onto the given value."""
        if not self.start < centre < self.end:
            raise ValueError("centre must lie strictly inside the range")
        self.skew = math.log(0.5) / math.log((centre - self.start) / (self.end - self.start))
        self._check()

    def convert_to_0to1(self, value: float) -> float:
        if self.convert_to_0to1_function is not None:
            return _clamp(self.convert_to_0to1_function(self.start, self.end, value), 0.0, 1.0)
        proportion = _clamp((value - self.start) / (self.end - self.start), 0.0, 1.0)
        if self.skew == 1.0:
            return proportion
        return math.pow(proportion, self.skew)

    def convert_from_0to1(self, proportion: float) -> float:
        proportion = _clamp(proportion, 0.0, 1.0)
        if self.convert_from_0to1_function is not None:
            return self.convert_from_0to1_function(self.start, self.end, proportion)
        if self.skew != 1.0 and proportion > 0.0:
            proportion = math.exp(math.log(proportion) / self.skew)
        return self.start + (self.end - self.start) * proportion

    def snap_to_legal_value(self, value: float) -> float:
        if self.snap_to_legal_value_function is not None:
            return self.snap_to_legal_value_function(self.start, self.end, value)
        if self.interval > 0:
            value = self.start + self.interval * math.floor((value - self.start) / self.interval + 0.5)
        return _clamp(value, self.start, self.end)


def create_range(min_val: float, max_val: float, mid_val: float) -> NormalisableRange:
    """A linear range skewed so that its centre sits at mid_val."""
    value_range = NormalisableRange(min_val, max_val)
    value_range.set_skew_for_centre(mid_val)
    return value_range


def create_frequency_range(min_freq: float, max_freq: float) -> NormalisableRange:
    """A logarithmic frequency range."""
    return NormalisableRange(
        min_freq,
        max_freq,
        convert_from_0to1_function=lambda s, e, v: map_to_log10(v, s, e),
        convert_to_0to1_function=lambda s, e, v: map_from_log10(v, s, e),
    )


def create_ratio_range() -> NormalisableRange:
    """A 1..20 ratio range centred on 4."""
    return create_range(1.0, 20.0, 4.0)