import pytest

from xyfilters.coefficients import (
    make_band_pass,
    make_high_pass,
    make_low_pass,
    make_notch_filter,
    make_peak_filter,
    predict_gain_band_pass,
    predict_gain_high_pass,
    predict_gain_low_pass,
    predict_gain_notch_filter,
    predict_gain_peak_filter,
)

FS = 48000.0
NYQ = FS / 2


def _stable(c):
    return abs(c.a2) < 1.0 and abs(c.a1) < 1.0 + c.a2


def test_predicted_gains_at_centre():
    assert predict_gain_peak_filter(1000.0, 1000.0, 0.7, 2.0) == pytest.approx(2.0)
    assert predict_gain_low_pass(1000.0, 1000.0, 0.7) == pytest.approx(0.7)
    assert predict_gain_high_pass(1000.0, 1000.0, 0.7) == pytest.approx(0.7)
    assert predict_gain_band_pass(1000.0, 1000.0, 0.7) == pytest.approx(1.0)
    assert predict_gain_notch_filter(1000.0, 1000.0, 0.7) == pytest.approx(0.0)


def test_peak_zero_gain_is_identity():
    assert make_peak_filter(FS, 1000.0, 0.7071, 0.0).raw == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def test_peak_matches_dc_and_nyquist():
    c = make_peak_filter(FS, 1000.0, 0.7071, 6.0)
    g = 10 ** (6.0 * 0.05)
    assert c.magnitude_at(0.0, FS) == pytest.approx(1.0)
    expected = predict_gain_peak_filter(NYQ, 1000.0, 0.7071 * g ** 0.5, g)
    assert c.magnitude_at(NYQ, FS) == pytest.approx(expected, rel=1e-6)
    assert _stable(c)


@pytest.mark.parametrize("q", [0.5, 2.0])
def test_low_pass(q):
    c = make_low_pass(FS, 1000.0, q)
    assert c.magnitude_at(0.0, FS) == pytest.approx(1.0)
    assert c.magnitude_at(NYQ, FS) == pytest.approx(predict_gain_low_pass(NYQ, 1000.0, q), rel=1e-5)
    assert _stable(c)


@pytest.mark.parametrize("q", [0.5, 3.0])
def test_high_pass(q):
    c = make_high_pass(FS, 1000.0, q)
    assert c.magnitude_at(0.0, FS) == pytest.approx(0.0, abs=1e-9)
    assert c.magnitude_at(NYQ, FS) == pytest.approx(predict_gain_high_pass(NYQ, 1000.0, q), rel=1e-6)
    assert _stable(c)


def test_band_pass():
    c = make_band_pass(FS, 1000.0, 0.7071)
    assert c.magnitude_at(0.0, FS) == pytest.approx(0.0, abs=1e-9)
    assert c.magnitude_at(NYQ, FS) == pytest.approx(predict_gain_band_pass(NYQ, 1000.0, 0.7071), rel=1e-6)
    assert _stable(c)


def test_notch():
    c = make_notch_filter(FS, 1000.0, 0.7071)
    assert c.magnitude_at(0.0, FS) == pytest.approx(1.0)
    assert c.magnitude_at(NYQ, FS) == pytest.approx(predict_gain_notch_filter(NYQ, 1000.0, 0.7071), rel=1e-6)
    assert c.magnitude_at(1000.0, FS) < 0.1
    assert _stable(c)