# xyfilters

Second-order (biquad) audio filters whose digital response is matched to the
analog prototype, including its gain at Nyquist, rather than squashed by the
plain bilinear transform. The package offers five filter shapes, parameter
ranges that map to and from 0..1, text formatting for parameter values and a
block processor that ties them together.

## Installation

```
pip install xyfilters
```

To run the tests:

```
pip install "xyfilters[test]"
pytest
```

## Filters

`xyfilters.coefficients` builds normalised biquad coefficients
(`BiquadCoefficients`, with `b0`, `b1`, `b2`, `a1`, `a2` and `a0` fixed at 1):

```python
from xyfilters.coefficients import (
    make_peak_filter, make_low_pass, make_high_pass,
    make_band_pass, make_notch_filter,
)

peak = make_peak_filter(48000.0, 1000.0, 0.7071, 6.0)   # gain in dB
low = make_low_pass(48000.0, 2000.0, 0.7071)

peak.magnitude_at(1000.0, 48000.0)   # linear magnitude of the response at 1 kHz
low.raw                              # (b0, b1, b2, 1.0, a1, a2)
```

A gain of 0 dB on the peak filter gives a pass-through filter. The
`predict_gain_peak_filter`, `predict_gain_low_pass`, `predict_gain_high_pass`,
`predict_gain_band_pass` and `predict_gain_notch_filter` functions return the
analog prototype's magnitude at a given frequency; the designs use them to fix
the gain at Nyquist. Parameters for which a design has no real solution give
NaN coefficients rather than raising.

## Ranges

`xyfilters.ranges.NormalisableRange` maps values to and from 0..1 with an
optional skew, step interval or custom mapping functions:

```python
from xyfilters.ranges import create_frequency_range, create_range, create_ratio_range

freq = create_frequency_range(20.0, 20000.0)   # logarithmic
freq.convert_to_0to1(632.46)                   # about 0.5
q = create_range(0.1, 8.0, 0.7071)             # skewed so 0.7071 sits at the centre
ratio = create_ratio_range()                   # 1..20 with 4 at the centre
q.snap_to_legal_value(12.0)                    # clamped to 8.0
```

`map_to_log10` and `map_from_log10` are the logarithmic mappings on their own.
Invalid ranges (end not above start, a centre outside the range, non-positive
log bounds) raise `ValueError`.

## Parameter text

```python
from xyfilters.parameter_text import (
    frequency_as_text, value_as_text, ms_as_text,
    midi_value_as_note_name, text_to_value,
)

frequency_as_text(1500.0, 2)        # "1.50 kHz"
ms_as_text(250.0, 1)                # "250.0 ms"
text_to_value("1.5 kHz")            # 1500.0
midi_value_as_note_name(60.0, 2)    # "C5"
```

`text_to_value` reads the leading number of the text and multiplies it by
1000 if a `k` or `K` appears anywhere in it.

## Processor

`xyfilters.processor.ParametricFilterProcessor` holds the parameters `f0`
(cutoff, 20 Hz to 20 kHz), `Q` (0.1 to 8), `g` (gain, -20 to 20 dB) and
`filterType` (`FilterType.PEAK`, `LOWPASS`, `HIGHPASS`, `BANDPASS`, `NOTCH`).
Values are clamped into their ranges when set. On every block it builds the
coefficients for the chosen type and filters a channels-by-samples NumPy array
in place:

```python
import numpy as np
from xyfilters.processor import ParametricFilterProcessor

proc = ParametricFilterProcessor()       # stereo in, stereo out
proc.prepare_to_play(48000.0, 512)
proc.set_parameter("f0", 500.0)
proc.set_parameter("filterType", 1)     # Lowpass

block = np.random.default_rng(0).standard_normal((2, 512)).astype(np.float32)
proc.process_block(block)

saved = proc.get_state_information()    # bytes: a short header, then XML
proc.set_state_information(saved)
```

`process_block` raises `RuntimeError` until `prepare_to_play` has been called.
`set_state_information` silently ignores data it cannot read. The parameter
definitions are available from `create_parameter_layout()` as
`FloatParameter` and `ChoiceParameter` objects, and `BiquadFilter` can be used
on its own to run a set of coefficients over a block.

## What it does not do

The package has no graphical editor, no audio-plugin host integration, no
audio input or output and no command-line program: it computes coefficients
and filters arrays that you supply.