"""Real-time variable-rate playback of a looping multi-channel source."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from apekit.signals import SampleMatrix

__all__ = ["RealSourceResampler"]


class RealSourceResampler:
    """A linearly interpolated, wrapping, resampled view on a source matrix."""

    def __init__(self, source: Sequence[Sequence[float]] | SampleMatrix) -> None:
        rows = [list(channel) for channel in source]
        if not rows or not rows[0]:
            raise ValueError("the source must have at least one channel and sample")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all source channels must have the same length")
        self._source = rows
        self._samples = len(rows[0])
        self.position = 0.0

    @property
    def channels(self) -> int:
        """Number of channels produced."""
        return len(self._source)

    def produce(self, frames: int, factor: float = 1.0) -> SampleMatrix:
        """Produce the next ``frames`` samples, advancing by ``factor`` per frame."""
        if factor < 0:
            raise ValueError("the resampling factor cannot be negative")
        output = SampleMatrix(self.channels, frames)
        samples = self._samples
        for frame in range(frames):
            x0 = int(self.position)
            x1 = x0 + 1
            if x1 >= samples:
                x1 -= samples
            weight = self.position - x0
            for out_row, row in zip(output, self._source):
                out_row[frame] = row[x0] * (1 - weight) + weight * row[x1]
            self.position += factor
            while self.position >= samples:
                self.position -= samples
        return output

    def produce_each(
        self,
        frames: int,
        callback: Callable[[int, list[float]], object],
        factor: float = 1.0,
    ) -> None:
        """Produce ``frames`` samples, calling ``callback(frame, channel_values)``."""
        matrix = self.produce(frames, factor)
        for frame in range(frames):
            callback(frame, [row[frame] for row in matrix])