"""Text formatting and parsing of parameter values."""

from __future__ import annotations

import re

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _number_text(value: float, decimals: int) -> str:
    if decimals > 0:
        return f"{value:.{decimals}f}"
    return f"{value:.9g}"


def frequency_as_text(value: float, max_length: int = 2) -> str:
    """Format a frequency in Hz or kHz."""
    if value >= 1000.0:
        return _number_text(value / 1000.0, max_length) + " kHz"
    return _number_text(value, max(max_length - 1, 0)) + " Hz"


def ms_as_text(value: float, max_length: int = 2) -> str:
    """Format a duration in milliseconds or seconds."""
    if value >= 1000.0:
        return _number_text(value / 1000.0, max_length) + " s"
    return _number_text(value, max_length) + " ms"


def value_as_text(value: float, max_length: int = 2) -> str:
    return _number_text(value, max_length)


def midi_value_as_note_name(value: float, max_length: int = 2) -> str:
    """Name the MIDI note of a value, e.g. 60 -> 'C5'."""
    note = int(value)
    if note < 0:
        raise ValueError("MIDI note value must not be negative")
    return f"{NOTE_NAMES[note % 12]}{note // 12}"


def text_to_value(text: str) -> float:
    """Parse the leading number of a text; a 'k' anywhere multiplies by 1000."""
    match = _NUMBER.match(text)
    value = float(match.group(1)) if match else 0.0
    if "k" in text or "K" in text:
        value *= 1000.0
    return value