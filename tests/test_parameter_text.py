import pytest
from hypothesis import given, strategies as st

from xyfilters.parameter_text import (
    frequency_as_text,
    midi_value_as_note_name,
    ms_as_text,
    text_to_value,
    value_as_text,
)


def test_frequency_units():
    assert frequency_as_text(1000.0).endswith(" kHz")
    assert frequency_as_text(440.0) == "440.0 Hz"
    assert frequency_as_text(1500.0, 2) == "1.50 kHz"


def test_ms_units():
    assert ms_as_text(1500.0) == "1.50 s"
    assert ms_as_text(20.0, 1) == "20.0 ms"


def test_value_as_text():
    assert value_as_text(0.7071, 3) == "0.707"


def test_note_names():
    assert midi_value_as_note_name(60.0) == "C5"
    assert midi_value_as_note_name(69.0) == "A5"
    with pytest.raises(ValueError):
        midi_value_as_note_name(-1.0)


def test_text_to_value():
    assert text_to_value("1.5k") == pytest.approx(1500.0)
    assert text_to_value(" -3 dB") == pytest.approx(-3.0)
    assert text_to_value("abc") == 0.0


@given(st.floats(min_value=20.0, max_value=20000.0))
def test_frequency_round_trip(f):
    assert text_to_value(frequency_as_text(f, 2)) == pytest.approx(f, abs=10.0)