"""Reference implementations of vector addition, 1D convolution and matrix multiplication.

These are the ground-truth versions that accelerated results are checked
against, together with the comparison helpers used for that check.
"""

from __future__ import annotations

import operator
from typing import Sequence

EQUIVALENCE_EPSILON = 0.001


def vector_add(input_a: Sequence[float], input_b: Sequence[float]) -> list[float]:
    """Element-wise sum of two vectors of equal length."""
    if len(input_a) != len(input_b):
        raise ValueError(
            f"Vectors must have the same length: {len(input_a)} != {len(input_b)}."
        )
    return list(map(operator.add, input_a, input_b))


def convolution(signal: Sequence[float], filter: Sequence[float]) -> list[float]:
    """Centred 1D convolution; samples outside the signal count as zero.

    The filter is expected to have an odd length, so that it is centred on
    each output sample.
    """
    filter_offset = len(filter) // 2
    signal_length = len(signal)
    output = []
    for signal_index in range(signal_length):
        start = signal_index - filter_offset
        output.append(
            sum(
                signal[start + filter_index] * weight
                for filter_index, weight in enumerate(filter)
                if 0 <= start + filter_index < signal_length
            )
        )
    return output


def matrix_multiplication(
    left: Sequence[float],
    right: Sequence[float],
    outer_left: int,
    inner: int,
    outer_right: int,
) -> list[float]:
    """Multiply a row-major outer_left x inner matrix by an inner x outer_right matrix."""
    if len(left) < outer_left * inner:
        raise ValueError(
            f"left matrix needs {outer_left * inner} elements, has {len(left)}."
        )
    if len(right) < inner * outer_right:
        raise ValueError(
            f"right matrix needs {inner * outer_right} elements, has {len(right)}."
        )
    columns = [
        right[column : inner * outer_right : outer_right]
        for column in range(outer_right)
    ]
    output = []
    for row in range(outer_left):
        left_row = left[row * inner : (row + 1) * inner]
        output.extend(sum(map(operator.mul, left_row, column)) for column in columns)
    return output


def _check_comparable(a: Sequence[float], b: Sequence[float]) -> None:
    if len(b) < len(a):
        raise ValueError(
            f"Second vector is shorter than the first: {len(b)} < {len(a)}."
        )


def are_vectors_equivalent(a: Sequence[float], b: Sequence[float]) -> bool:
    """True when every element of a is within 0.001 of the matching element of b."""
    _check_comparable(a, b)
    return all(abs(x - y) <= EQUIVALENCE_EPSILON for x, y in zip(a, b))


def mean_square_error(a: Sequence[float], b: Sequence[float]) -> float:
    """Mean of the squared differences over the elements of a."""
    _check_comparable(a, b)
    count = len(a)
    return sum((x - y) * (x - y) / count for x, y in zip(a, b))