"""Reference histogram and the helpers used to check accelerated histograms."""

from __future__ import annotations

import math
import struct
from dataclasses import astuple, dataclass
from typing import Sequence

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class UniformElements:
    """Four u32 arguments handed to a histogram shader; the first is the element count."""

    argument_0: int = 0
    argument_1: int = 0
    argument_2: int = 0
    argument_3: int = 0

    def to_bytes(self) -> bytes:
        """Pack the four arguments as little-endian u32 words, in field order."""
        values = astuple(self)
        for value in values:
            if not 0 <= value <= _U32_MAX:
                raise ValueError(
                    "UniformElements values must fit in an unsigned 32-bit integer. "
                    f"Current value: {value}."
                )
        return struct.pack("<4I", *values)


def _bin_index(value: float) -> int:
    # Negative and NaN values saturate to bin 0, as an unsigned float cast does.
    if math.isnan(value):
        return 0
    if math.isinf(value):
        if value < 0:
            return 0
        raise ValueError("Cannot place an infinite value in a histogram bin.")
    return max(math.floor(value), 0)


def histogram(values: Sequence[float], bin_count: int) -> list[int]:
    """Count each value in bin floor(value); values must fall below bin_count."""
    if bin_count < 0:
        raise ValueError(f"bin_count must not be negative. Current value: {bin_count}.")
    bins = [0] * bin_count
    for value in values:
        index = _bin_index(value)
        if index >= bin_count:
            raise ValueError(
                f"Value {value} falls in bin {index}, outside {bin_count} bins."
            )
        bins[index] += 1
    return bins


def _check_comparable(a: Sequence[int], b: Sequence[int]) -> None:
    if len(b) < len(a):
        raise ValueError(
            f"Second histogram is shorter than the first: {len(b)} < {len(a)}."
        )


def histogram_error(a: Sequence[int], b: Sequence[int]) -> int:
    """Signed sum of a[i] - b[i] over the bins of a."""
    _check_comparable(a, b)
    return sum(x - y for x, y in zip(a, b))


def are_histograms_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """True when every bin of a matches the same bin of b exactly."""
    _check_comparable(a, b)
    return all(x == y for x, y in zip(a, b))