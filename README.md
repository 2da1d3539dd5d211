# apekit

Building blocks for audio processors, written in pure Python with no dependencies.

## Installation

```
pip install apekit
```

To run the test suite:

```
pip install "apekit[test]"
pytest
```

## What is inside

- `apekit.dsp`: decibel conversion (`db_from`, `db_to`), the `lanczos` and `sinc` kernels, and the list helpers `to_complex`, `normalize`, `accumulate_norm` and `multiply`. Each list helper returns a new list.
- `apekit.interpolation`: `linear`, `hermite4` and `lagrange5` on explicit points. Also `linear_at`, `hermite4_at`, `lagrange`, `lanczos_filter` and `sinc_filter`, which sample a signal. A signal here is any callable that takes an integer index.
- `apekit.signals`:
  - `CircularSignal`, which wraps around its source.
  - `WindowedSignal`, which returns zero outside its source.
  - `SampleMatrix`, a resizable list of channels.
  - `cyclic`, which iterates with wrap-around.
  - `clear`, which resets values in place.

  `CircularSignal` and `WindowedSignal` take integer indices. They also accept fractional indices, which they hermite-interpolate.
- `apekit.meter`: `MeteredValue`, a level meter. Its level decays with a quarter-second time constant, and its peak is held for one second before it decays.
- `apekit.resampling`: `RealSourceResampler`, a looping, linearly interpolated playback of a multi-channel source at a variable rate. It provides `produce` and `produce_each`.
- `apekit.formatting`:
  - `sprint` replaces each lone `%` with the next argument, and `%%` gives a literal `%`. It raises `FormatError` on too few or too many arguments.
  - `format_value` and `type_designator` render single values.
  - `SharedValue` and `Label` make text that follows the values it is bound to.
- `apekit.allocator`: `Allocator` hands out zeroed `Block`s and rounds sizes up for alignment. It raises `DoubleFreeError` when a block that is not live is freed, and it frees everything on `clear()` or on leaving a `with` block.
- `apekit.mathutil`: `nextpow2`, `nextpow2above`, `ispow2` and `clamp_available`, plus numeric constants such as `PI`, `TAU` and `EPSILON`.
- `apekit.tracing`:
  - `Trace` and `Tracer` collect traced values per block.
  - `trace_value` records a value and returns it unchanged. Complex values are split into `real` and `imag` traces.
  - `transform_source` wraps the statements on chosen lines of a source text in `TRC(...)`. It raises `TraceLineError` for a chosen line that has no `;`.

## Examples

Sample a looping signal:

```python
from apekit.signals import CircularSignal
from apekit.interpolation import linear_at

signal = CircularSignal([0.0, 1.0, 0.0, -1.0])
print(signal(5))               # 1.0, because the index wraps around
print(linear_at(signal, 0.5))  # 0.5
```

Play a source back at a different rate:

```python
from apekit.resampling import RealSourceResampler

resampler = RealSourceResampler([[0.0, 1.0, 2.0, 3.0]])
block = resampler.produce(4, factor=0.5)
print(block[0])  # [0.0, 0.5, 1.0, 1.5]
```

Format values into a string:

```python
from apekit.formatting import sprint

print(sprint("gain: % dB (100%%)", 3))  # gain: 3 dB (100%)
```

Trace values during a block:

```python
from apekit.tracing import Tracer, trace_value

tracer = Tracer()
for x in (0.1, 0.2):
    trace_value(tracer, "x * 2", x * 2)
print(list(tracer))  # [(('x * 2',), [0.2, 0.4])]
```

## What it does not do

apekit is a set of helper modules, not a plugin framework. It has no processor, effect or generator classes, and no event handling or host connection. It has no automatable parameters, no range mapping and no knob scaling curves. It does no audio file input or output, and it does not compile or run scripts. `transform_source` rewrites source text and does nothing else with it.