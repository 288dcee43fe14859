"""Biquad designs matched to analog prototypes at Nyquist."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _root4(x: float) -> float:
    return math.pow(x, 0.25) if x >= 0 else math.nan


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


@dataclass(frozen=True)
class BiquadCoefficients:
    """Normalised biquad coefficients with a0 equal to 1."""

    b0: float
    b1: float
    b2: float
    a1: float
    a2: float

    @property
    def raw(self) -> tuple[float, float, float, float, float, float]:
        return (self.b0, self.b1, self.b2, 1.0, self.a1, self.a2)

    def magnitude_at(self, frequency: float, sample_rate: float) -> float:
        z = cmath.exp(-1j * 2.0 * math.pi * frequency / sample_rate)
        num = self.b0 + self.b1 * z + self.b2 * z * z
        den = 1.0 + self.a1 * z + self.a2 * z * z
        return abs(num / den)


def _from_unnormalised(b0, b1, b2, a0, a1, a2) -> BiquadCoefficients:
    inv = 1.0 / a0
    return BiquadCoefficients(b0 * inv, b1 * inv, b2 * inv, a1 * inv, a2 * inv)


def _terms(f: float, f0: float, q: float) -> tuple[float, float]:
    f2, f02 = f * f, f0 * f0
    first = (f2 - f02) ** 2
    second = f2 * f02 / (q * q)
    return first, second


def predict_gain_peak_filter(f: float, f0: float, q: float, g: float) -> float:
    first, second = _terms(f, f0, q)
    return _sqrt((first + second * g * g) / (first + second))


def predict_gain_low_pass(f: float, f0: float, q: float) -> float:
    first, second = _terms(f, f0, q)
    return f0 * f0 / _sqrt(first + second)


def predict_gain_high_pass(f: float, f0: float, q: float) -> float:
    first, second = _terms(f, f0, q)
    return f * f / _sqrt(first + second)


def predict_gain_band_pass(f: float, f0: float, q: float) -> float:
    first, second = _terms(f, f0, q)
    return _sqrt(second / (first + second))


def predict_gain_notch_filter(f: float, f0: float, q: float) -> float:
    first, second = _terms(f, f0, q)
    return _sqrt(first / (first + second))


def _resonant(g1: float, wd: float, qd: float, b: float) -> BiquadCoefficients:
    n = 1.0 / wd
    n2 = n * n
    alpha = n / qd
    beta = b * alpha
    return _from_unnormalised(
        g1 * n2 + beta + 1.0,
        2.0 * (1.0 - g1 * n2),
        g1 * n2 - beta + 1.0,
        n2 + alpha + 1.0,
        2.0 - 2.0 * n2,
        n2 - alpha + 1.0,
    )


def make_peak_filter(sample_rate: float, frequency: float, q: float, gain: float) -> BiquadCoefficients:
    """Peak filter; gain in decibels."""
    if gain == 0.0:
        return BiquadCoefficients(1.0, 0.0, 0.0, 0.0, 0.0)
    g = math.pow(10.0, gain * 0.05)
    q = q * math.sqrt(g)
    f0 = frequency

    nyquist = sample_rate * 0.5
    g1 = predict_gain_peak_filter(nyquist, f0, q, g)
    w0 = math.pi * f0 / nyquist
    w0_warped = math.tan(w0 * 0.5)
    g2 = g * g

    wd = w0_warped * _root4((g2 - g1 * g1) / (g2 - 1.0))
    wd2 = wd * wd

    q2 = q * q
    wb2 = w0 * w0 * (2.0 * q2 + g - _sqrt(g * (4.0 * q2 + g))) / (2.0 * q2)
    wb2 = math.tan(_sqrt(wb2) * 0.5) ** 2
    w02 = w0_warped * w0_warped

    qd2 = wb2 * w02 * wd2 * g * (1.0 - g)
    qd2 /= (
        w02 * wd2 * wd2 - 2.0 * g1 * wb2 * w02 * wd2 + g1 * g1 * wb2 * wb2 * w02
        - wb2 * wb2 * w02 * g + 2.0 * wb2 * w02 * wd2 * g
        + wb2 * g2 * (w02 - wd2) ** 2 - wb2 * (wd2 - g1 * w02) ** 2 - w02 * wd2 * wd2 * g
    )
    qd = _sqrt(qd2)

    b = w02 * wd2 * g2 + qd2 * g2 * (w02 - wd2) ** 2 - qd2 * (wd2 - g1 * w02) ** 2
    b = _sqrt(b / (w02 * wd2))
    return _resonant(g1, wd, qd, b)


def _low_pass_with_peak(w0, q2, g1, g12):
    wp2 = w0 * w0 * (1.0 - 1.0 / (2.0 * q2))
    gp2 = 4.0 * q2 * q2 / (4.0 * q2 - 1.0)
    gp = _sqrt(gp2)

    wp = math.tan(0.5 * _sqrt(wp2))
    wp2 = wp * wp
    wd = wp * _root4((gp2 - g12) / (gp2 - 1.0))
    wd2 = wd * wd

    wb2 = w0 * w0 * (gp * (2.0 * q2 - 1.0) - _sqrt(gp * (-4.0 * gp * q2 + gp + 4.0 * q2 * q2))) / (2.0 * gp * q2)
    wb2 = math.tan(_sqrt(wb2) * 0.5) ** 2

    wd4, wp4, wb4 = wd2 * wd2, wp2 * wp2, wb2 * wb2
    qd2 = gp * wb2 * wd2 * wp2 * (1.0 - gp) / (
        g12 * wb4 * wp2 - g12 * wb2 * wp4 + gp2 * wb2 * wd4 - 2.0 * gp2 * wb2 * wd2 * wp2
        + gp2 * wb2 * wp4 - gp * wb4 * wp2 + 2.0 * gp * wb2 * wd2 * wp2 - gp * wd4 * wp2
        - wb2 * wd4 + wd4 * wp2
    )
    qd = _sqrt(qd2)
    b = (gp2 * qd2 * (wd2 - wp2) ** 2 + gp2 * wd2 * wp2 - qd2 * (g1 * wp2 - wd2) ** 2) / (wd2 * wp2)
    return wd, _sqrt(b), qd


def _low_pass_no_peak(w0, q, q2, g1, g12):
    wd = math.tan(0.5 * w0)
    wd2 = wd * wd
    wb2 = w0 * w0 * (2.0 * q2 + _sqrt(4.0 * q2 * q - 4.0 * q2 + 1.0) - 1.0) / (2.0 * q2)
    wb2 = math.tan(0.5 * _sqrt(wb2)) ** 2
    qd2 = q * wb2 * wd2 * (1.0 - q) / ((wb2 - wd2) * (g12 * wb2 - q * wb2 + q * wd2 - wd2))
    qd = _sqrt(qd2)
    b = _sqrt(q2 - qd2 * (g1 - 1.0) ** 2)
    return wd, b, qd


def make_low_pass(sample_rate: float, frequency: float, q: float) -> BiquadCoefficients:
    nyquist = sample_rate * 0.5
    g1 = predict_gain_low_pass(nyquist, frequency, q)
    w0 = math.pi * frequency / nyquist
    q2, g12 = q * q, g1 * g1
    q_max, q_min = 0.9, 0.75

    if q > q_max:
        wd, b, qd = _low_pass_with_peak(w0, q2, g1, g12)
    elif q > q_min:
        peak = _low_pass_with_peak(w0, q2, g1, g12)
        flat = _low_pass_no_peak(w0, q, q2, g1, g12)
        t = (q - q_min) / (q_max - q_min)
        wd, b, qd = (_lerp(t, lo, hi) for lo, hi in zip(flat, peak))
    else:
        wd, b, qd = _low_pass_no_peak(w0, q, q2, g1, g12)
    return _resonant(g1, wd, qd, b)


def make_high_pass(sample_rate: float, frequency: float, q: float) -> BiquadCoefficients:
    nyquist = sample_rate * 0.5
    g1 = predict_gain_high_pass(nyquist, frequency, q)
    w0 = math.pi * frequency / nyquist
    wd = w0 * _sqrt(g1)
    q_max, q_min = 1.5, 0.71

    def peaked() -> float:
        g12, q2 = g1 * g1, q * q
        return _sqrt(q2 * (2.0 * q2 + _sqrt(-4.0 * g12 * q2 + g12 + 4.0 * q2 * q2)) / (g12 * (4.0 * q2 - 1.0)))

    def flat() -> float:
        w2 = 2.0 * math.atan(0.5 * wd)
        return predict_gain_high_pass(w2, w0, q) / g1

    if q > q_max:
        qd = peaked()
    elif q > q_min:
        qd = _lerp((q - q_min) / (q_max - q_min), flat(), peaked())
    else:
        qd = flat()

    n = 2.0 / wd
    n2 = n * n
    alpha = n / qd
    b0 = g1 * n2
    return _from_unnormalised(b0, -2.0 * g1 * n2, b0, n2 + alpha + 1.0, 2.0 - 2.0 * n2, n2 - alpha + 1.0)


def make_band_pass(sample_rate: float, frequency: float, q: float) -> BiquadCoefficients:
    nyquist = sample_rate * 0.5
    g1 = predict_gain_band_pass(nyquist, frequency, q)
    w0 = math.pi * frequency / nyquist
    w0_warped = math.tan(0.5 * w0)
    w02 = w0_warped * w0_warped
    q2, g12 = q * q, g1 * g1

    wd = w0_warped * _root4(1.0 - g12)
    wd2 = wd * wd
    gb2 = 0.25

    wb2 = w0 * w0 * (2.0 * q2 * gb2 - gb2 - _sqrt((1.0 - gb2) * (4.0 * q2 * gb2 - gb2 + 1.0)) + 1.0) / (2.0 * q2 * gb2)
    wb2 = math.tan(_sqrt(wb2) / 2.0) ** 2

    wb4, w04, wd4 = wb2 * wb2, w02 * w02, wd2 * wd2
    qd2 = wb2 * w02 * wd2 * (gb2 - 1.0) / (
        g12 * wb4 * w02 - g12 * wb2 * w04 - wb4 * w02 * gb2 + wb2 * w04
        + 2.0 * wb2 * w02 * wd2 * gb2 - 2.0 * wb2 * w02 * wd2 + wb2 * wd4 - w02 * wd4 * gb2
    )
    qd = _sqrt(qd2)
    b = _sqrt(1.0 - g12 * w02 * qd2 / wd2 + qd2 * (w02 - wd2) ** 2 / (w02 * wd2))

    n = 1.0 / wd
    n2 = n * n
    alpha = n / qd
    beta = b * alpha
    return _from_unnormalised(
        g1 * n2 + beta, -2.0 * g1 * n2, g1 * n2 - beta,
        n2 + alpha + 1.0, 2.0 - 2.0 * n2, n2 - alpha + 1.0,
    )


def make_notch_filter(sample_rate: float, frequency: float, q: float) -> BiquadCoefficients:
    nyquist = sample_rate * 0.5
    g1 = predict_gain_notch_filter(nyquist, frequency, q)
    w0 = math.pi * frequency / nyquist
    w0_warped = math.tan(0.5 * w0)
    q2 = q * q

    wd = w0_warped * _sqrt(g1)
    wd2 = wd * wd
    gb = 0.2
    gb2 = gb * gb

    wb2 = w0 * w0 * (q2 * gb2 - q2 - 0.5 * gb2 + gb * _sqrt(-4.0 * q2 * gb2 + 4.0 * q2 + gb2) * 0.5) / (q2 * (gb2 - 1.0))
    wb2 = math.tan(_sqrt(wb2) * 0.5) ** 2

    qd2 = -wb2 * wd2 * gb2 / (gb2 * (wb2 - wd2) ** 2 - (g1 * wb2 - wd2) ** 2)
    qd = _sqrt(qd2)

    n = 1.0 / wd
    n2 = n * n
    alpha = n / qd
    return _from_unnormalised(
        g1 * n2 + 1.0, 2.0 - 2.0 * g1 * n2, g1 * n2 + 1.0,
        n2 + alpha + 1.0, 2.0 - 2.0 * n2, n2 - alpha + 1.0,
    )