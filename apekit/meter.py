"""A peak meter with decay and peak hold, fed at audio rate."""

from __future__ import annotations

import math

__all__ = ["MeteredValue"]


class MeteredValue:
    """Tracks a decaying level and a held peak of the values pushed to it.

    The level decays with a time constant of a quarter second; the peak is
    held for one second before it starts to decay.
    """

    def __init__(self, name: str, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.name = name
        self.value = 0.0
        self.peak = 0.0
        self.pole = math.exp(-1.0 / (0.25 * sample_rate))
        self.peak_stop = int(sample_rate)
        self._peak_timer = 0

    def push_value(self, value: float) -> None:
        """Update the meter with one sample."""
        level = abs(value)
        if level <= self.value:
            self.value *= self.pole
        else:
            self.value = level

        if level <= self.peak:
            if self._peak_timer > self.peak_stop:
                self.peak *= self.pole
            else:
                self._peak_timer += 1
        else:
            self.peak = level
            self._peak_timer = 0