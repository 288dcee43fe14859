"""Parametric filter processor: parameters, per-channel biquads and state."""

from __future__ import annotations

import struct
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Union

import numpy as np

from .coefficients import (
    BiquadCoefficients,
    make_band_pass,
    make_high_pass,
    make_low_pass,
    make_notch_filter,
    make_peak_filter,
)
from .parameter_text import frequency_as_text, text_to_value, value_as_text
from .ranges import NormalisableRange, create_frequency_range, create_range

PLUGIN_NAME = "CustomParametricFilters"
PLUGIN_VERSION = "1.0.0"
STATE_TYPE = "PARAMETER"

_XML_MAGIC = 0x21324356
_HEADER = struct.Struct("<II")
_INV_ROOT2 = 0.7071


class FilterType(IntEnum):
    """Filter shapes, in the order offered to the user."""

    PEAK = 0
    LOWPASS = 1
    HIGHPASS = 2
    BANDPASS = 3
    NOTCH = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


FILTER_CHOICES = tuple(kind.label for kind in FilterType)


@dataclass(frozen=True)
class FloatParameter:
    """A continuous parameter with a range and text conversions."""

    parameter_id: str
    name: str
    range: NormalisableRange
    default: float
    to_text: Callable[[float], str]
    from_text: Callable[[str], float] = text_to_value

    def text_for_value(self, value: float) -> str:
        return self.to_text(value)

    def value_for_text(self, text: str) -> float:
        return self.from_text(text)

    def legal(self, value: float) -> float:
        return self.range.snap_to_legal_value(float(value))


@dataclass(frozen=True)
class ChoiceParameter:
    """A parameter choosing one of a list of named options."""

    parameter_id: str
    name: str
    choices: tuple[str, ...]
    default: int = 0

    def legal(self, value: float) -> int:
        return max(0, min(len(self.choices) - 1, int(round(float(value)))))


Parameter = Union[FloatParameter, ChoiceParameter]


def create_parameter_layout() -> list[Parameter]:
    """The processor's parameters, in declaration order."""
    return [
        FloatParameter(
            "f0",
            "Cutoff",
            create_frequency_range(20.0, 20000.0),
            1000.0,
            lambda v: frequency_as_text(v),
        ),
        FloatParameter(
            "Q",
            "Q",
            create_range(0.1, 8.0, _INV_ROOT2),
            _INV_ROOT2,
            lambda v: value_as_text(v, 3),
        ),
        FloatParameter(
            "g",
            "Gain",
            NormalisableRange(-20.0, 20.0),
            0.0,
            lambda v: value_as_text(v) + " dB",
        ),
        ChoiceParameter("filterType", "Filter Type", FILTER_CHOICES, 0),
    ]


@dataclass
class BiquadFilter:
    """One transposed direct-form II biquad per channel, sharing coefficients."""

    coefficients: BiquadCoefficients = field(
        default_factory=lambda: BiquadCoefficients(1.0, 0.0, 0.0, 0.0, 0.0)
    )
    _state: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)), repr=False)

    @property
    def num_channels(self) -> int:
        return self._state.shape[0]

    def prepare(self, num_channels: int) -> None:
        if num_channels < 0:
            raise ValueError("number of channels must not be negative")
        self._state = np.zeros((num_channels, 2))

    def reset(self) -> None:
        self._state.fill(0.0)

    def process(self, block: np.ndarray) -> np.ndarray:
        """Filter a (channels, samples) array in place and return it."""
        if not isinstance(block, np.ndarray):
            raise TypeError("block must be a numpy array")
        frames = block[np.newaxis, :] if block.ndim == 1 else block
        if frames.ndim != 2:
            raise ValueError("block must be one- or two-dimensional")
        channels = frames.shape[0]
        if channels > self.num_channels:
            raise ValueError(
                f"block has {channels} channels but the filter was prepared for {self.num_channels}"
            )
        c = self.coefficients
        s1 = self._state[:channels, 0].copy()
        s2 = self._state[:channels, 1].copy()
        for column in frames.T:
            x = column.astype(np.float64)
            y = c.b0 * x + s1
            s1 = c.b1 * x - c.a1 * y + s2
            s2 = c.b2 * x - c.a2 * y
            column[:] = y
        self._state[:channels, 0] = s1
        self._state[:channels, 1] = s2
        return block


_DESIGNS = {
    FilterType.LOWPASS: make_low_pass,
    FilterType.HIGHPASS: make_high_pass,
    FilterType.BANDPASS: make_band_pass,
    FilterType.NOTCH: make_notch_filter,
}


class ParametricFilterProcessor:
    """Applies the selected filter design to blocks of audio."""

    name = PLUGIN_NAME
    accepts_midi = False
    produces_midi = False
    is_midi_effect = False
    tail_length_seconds = 0.0
    num_programs = 1

    def __init__(self, input_channels: int = 2, output_channels: int = 2) -> None:
        self.input_channels = input_channels
        self.output_channels = output_channels
        self.parameters: dict[str, Parameter] = {
            p.parameter_id: p for p in create_parameter_layout()
        }
        self._values: dict[str, float] = {
            pid: p.default for pid, p in self.parameters.items()
        }
        self.filter = BiquadFilter()
        self.sample_rate = 0.0
        self.max_block_size = 0

    def get_parameter(self, parameter_id: str) -> float:
        if parameter_id not in self._values:
            raise KeyError(f"unknown parameter: {parameter_id!r}")
        return self._values[parameter_id]

    def set_parameter(self, parameter_id: str, value: float) -> None:
        try:
            parameter = self.parameters[parameter_id]
        except KeyError:
            raise KeyError(f"unknown parameter: {parameter_id!r}") from None
        self._values[parameter_id] = parameter.legal(value)

    def is_buses_layout_supported(self, input_channels: int, output_channels: int) -> bool:
        if output_channels not in (1, 2):
            return False
        return input_channels == output_channels

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if samples_per_block < 0:
            raise ValueError("block size must not be negative")
        self.sample_rate = float(sample_rate)
        self.max_block_size = int(samples_per_block)
        self.filter.prepare(max(self.input_channels, self.output_channels))

    def current_coefficients(self) -> BiquadCoefficients:
        if self.sample_rate <= 0:
            raise RuntimeError("prepare_to_play must be called first")
        f0 = self._values["f0"]
        q = self._values["Q"]
        try:
            kind = FilterType(int(self._values["filterType"]))
        except ValueError:
            kind = FilterType.PEAK
        if kind is FilterType.PEAK:
            return make_peak_filter(self.sample_rate, f0, q, self._values["g"])
        return _DESIGNS[kind](self.sample_rate, f0, q)

    def process_block(self, buffer: np.ndarray) -> np.ndarray:
        """Filter a (channels, samples) buffer in place and return it."""
        coefficients = self.current_coefficients()
        if not isinstance(buffer, np.ndarray) or buffer.ndim != 2:
            raise ValueError("buffer must be a two-dimensional numpy array")
        if self.input_channels < self.output_channels:
            buffer[self.input_channels:self.output_channels] = 0
        self.filter.coefficients = coefficients
        return self.filter.process(buffer)

    def get_state_information(self) -> bytes:
        root = ET.Element(self.name, {"version": PLUGIN_VERSION})
        tree = ET.SubElement(root, STATE_TYPE)
        for pid, value in self._values.items():
            ET.SubElement(tree, "PARAM", {"id": pid, "value": repr(float(value))})
        text = ET.tostring(root, encoding="unicode").encode("utf-8")
        return _HEADER.pack(_XML_MAGIC, len(text)) + text + b"\0"

    def set_state_information(self, data: bytes) -> None:
        """Restore parameters from saved state; unreadable data is ignored."""
        root = _xml_from_binary(data)
        if root is None:
            return
        tree = root.find(STATE_TYPE)
        if tree is None:
            return
        for param in tree.iter("PARAM"):
            pid = param.get("id")
            if pid not in self.parameters:
                continue
            try:
                value = float(param.get("value", ""))
            except ValueError:
                continue
            self.set_parameter(pid, value)


def _xml_from_binary(data: bytes) -> ET.Element | None:
    if len(data) < _HEADER.size:
        return None
    magic, size = _HEADER.unpack_from(data)
    if magic != _XML_MAGIC or size > len(data) - _HEADER.size:
        return None
    text = data[_HEADER.size:_HEADER.size + size]
    try:
        return ET.fromstring(text.decode("utf-8"))
    except (ET.ParseError, UnicodeDecodeError):
        return None