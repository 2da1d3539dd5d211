"""Building blocks for audio processors: DSP, interpolation, signals, meters, resampling, formatting, allocation and tracing."""

__version__ = "0.5.0"

__all__ = [
    "allocator",
    "dsp",
    "formatting",
    "interpolation",
    "mathutil",
    "meter",
    "resampling",
    "signals",
    "tracing",
]