"""Uniform blocks sent to compute shaders, packed as little-endian u32 words."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass

from memlab.tensor2d import Tensor2D

_U32_MAX = 0xFFFFFFFF


def _pack_u32(name: str, values: tuple[int, ...]) -> bytes:
    for value in values:
        if not 0 <= value <= _U32_MAX:
            raise ValueError(
                f"{name} values must fit in an unsigned 32-bit integer. "
                f"Current value: {value}."
            )
    return struct.pack(f"<{len(values)}I", *values)


@dataclass(frozen=True)
class LinearDimensions:
    """Row and column counts of the input, weights, bias and output of a linear layer."""

    input_row_count: int
    input_column_count: int
    weights_row_count: int
    weights_column_count: int
    bias_row_count: int
    bias_column_count: int
    output_row_count: int
    output_column_count: int

    @classmethod
    def from_tensors(
        cls,
        input: Tensor2D,
        weights: Tensor2D,
        bias: Tensor2D,
        output: Tensor2D,
    ) -> LinearDimensions:
        """Collect the shapes of the four tensors of a linear layer."""
        return cls(
            input_row_count=input.row_count,
            input_column_count=input.column_count,
            weights_row_count=weights.row_count,
            weights_column_count=weights.column_count,
            bias_row_count=bias.row_count,
            bias_column_count=bias.column_count,
            output_row_count=output.row_count,
            output_column_count=output.column_count,
        )

    def to_bytes(self) -> bytes:
        """Pack the eight counts as little-endian u32 words, in field order."""
        return _pack_u32("LinearDimensions", astuple(self))


@dataclass(frozen=True)
class ReluDimensions:
    """Row and column counts of the tensor a ReLU shader works on."""

    row_count: int
    column_count: int

    @classmethod
    def from_tensor(cls, tensor: Tensor2D) -> ReluDimensions:
        """Take the shape of the given tensor."""
        return cls(row_count=tensor.row_count, column_count=tensor.column_count)

    def to_bytes(self) -> bytes:
        """Pack row and column count as little-endian u32 words."""
        return _pack_u32("ReluDimensions", astuple(self))


@dataclass(frozen=True)
class SumElements:
    """Element and workgroup counts for a sum reduction shader."""

    element_count: int
    workgroup_count: int

    def to_bytes(self) -> bytes:
        """Pack element and workgroup count as little-endian u32 words."""
        return _pack_u32("SumElements", astuple(self))


@dataclass(frozen=True)
class SoftmaxDimensions:
    """Element count for a softmax shader."""

    element_count: int

    def to_bytes(self) -> bytes:
        """Pack the element count as a little-endian u32 word."""
        return _pack_u32("SoftmaxDimensions", astuple(self))