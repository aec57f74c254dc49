"""A dense row-major 2D tensor with linear, ReLU and softmax operators."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Tensor2D:
    """Row-major matrix whose active data lives in the first rows*columns slots."""

    data: list[float] = field(default_factory=list)
    row_count: int = 0
    column_count: int = 0

    @classmethod
    def ramp(cls, scale: float, row_count: int, column_count: int) -> Tensor2D:
        """Create a tensor whose element at flat index i holds i * scale."""
        return cls(
            data=[index * scale for index in range(row_count * column_count)],
            row_count=row_count,
            column_count=column_count,
        )

    def __len__(self) -> int:
        return self.row_count * self.column_count

    def sum(self) -> float:
        """Sum of all active elements."""
        return sum(self.data[: len(self)])

    def subtract(self, other: Tensor2D) -> Tensor2D:
        """Element-wise difference self - other."""
        if len(self) != len(other):
            raise ValueError(
                f"Mismatch - lengths differ: {len(self)} and {len(other)}."
            )
        count = len(self)
        return Tensor2D(
            data=[a - b for a, b in zip(self.data[:count], other.data[:count])],
            row_count=self.row_count,
            column_count=self.column_count,
        )

    # Shape validation

    def _check_positive_dimensions(self, weights, bias, output) -> None:
        for name, tensor in (
            ("input", self),
            ("weights", weights),
            ("bias", bias),
            ("output", output),
        ):
            if tensor.row_count <= 0:
                raise ValueError(
                    f"{name}.row_count must be larger than 0. "
                    f"Current value: {tensor.row_count}."
                )
            if tensor.column_count <= 0:
                raise ValueError(
                    f"{name}.column_count must be larger than 0. "
                    f"Current value: {tensor.column_count}."
                )

    def _check_linear(self, weights, bias, output) -> None:
        self._check_positive_dimensions(weights, bias, output)
        pairs = (
            ("bias.row_count", bias.row_count, "output.row_count", output.row_count),
            (
                "bias.column_count",
                bias.column_count,
                "output.column_count",
                output.column_count,
            ),
            ("input.row_count", self.row_count, "output.row_count", output.row_count),
            (
                "weights.column_count",
                weights.column_count,
                "output.column_count",
                output.column_count,
            ),
            (
                "input.column_count",
                self.column_count,
                "weights.row_count",
                weights.row_count,
            ),
        )
        for left_name, left, right_name, right in pairs:
            if left != right:
                raise ValueError(
                    f"Mismatch - {left_name} ({left}) & {right_name} ({right})."
                )

    def _check_fused(self, weights, bias, output) -> None:
        self._check_positive_dimensions(weights, bias, output)
        if len(bias) != len(output):
            raise ValueError(
                f"Mismatch - bias length ({len(bias)}) & output length ({len(output)})."
            )

    def _dot_products(self, weights: Tensor2D, output: Tensor2D) -> Iterator[tuple[int, float]]:
        """Yield (output index, row-by-column dot product) for every output cell."""
        inner = self.column_count
        columns = [
            weights.data[column : weights.row_count * weights.column_count : weights.column_count][:inner]
            for column in range(output.column_count)
        ]
        for row in range(output.row_count):
            input_row = self.data[row * inner : (row + 1) * inner]
            base = row * output.column_count
            for column, weight_column in enumerate(columns):
                yield base + column, sum(map(operator.mul, input_row, weight_column))

    # Linear layers

    def linear(self, weights: Tensor2D, bias: Tensor2D) -> Tensor2D:
        """Return self @ weights + bias as a new tensor."""
        output = Tensor2D.ramp(0.0, self.row_count, weights.column_count)
        self.linear_preallocated(weights, bias, output)
        return output

    def linear_preallocated(self, weights, bias, output) -> None:
        """Accumulate self @ weights + bias into output."""
        self._check_linear(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] += product
        for row in range(bias.row_count):
            for column in range(bias.column_count):
                index = row * output.column_count + column
                output.data[index] += bias.data[index]

    def linear_preallocated_inline(self, weights, bias, output) -> None:
        """Same as linear_preallocated."""
        self.linear_preallocated(weights, bias, output)

    def linear_local_accumulation(self, weights, bias, output) -> None:
        """Write self @ weights into output, then add bias."""
        self._check_linear(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] = product
        for index in range(len(bias)):
            output.data[index] += bias.data[index]

    def linear_optimized(self, weights, bias, output) -> None:
        """Write self @ weights + bias into output in one pass."""
        self._check_linear(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] = product + bias.data[index]

    def linear_local_accumulation_relu(self, weights, bias, output) -> None:
        """Write relu(self @ weights + bias) into output, bias applied in a second pass."""
        self._check_linear(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] = product
        for index in range(len(bias)):
            output.data[index] = max(output.data[index] + bias.data[index], 0.0)

    def linear_optimized_relu(self, weights, bias, output) -> None:
        """Write relu(self @ weights + bias) into output in one pass."""
        self._check_linear(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] = max(product + bias.data[index], 0.0)

    def linear_relu_softmax_fused_fission(self, weights, bias, output) -> None:
        """Linear, ReLU and softmax in separate passes over output."""
        self._check_fused(weights, bias, output)
        for index, product in self._dot_products(weights, output):
            output.data[index] = product
        bias_count = len(bias)
        for index in range(bias_count):
            output.data[index] += bias.data[index]
        maximum = -math.inf
        for index in range(bias_count):
            result = max(output.data[index] + bias.data[index], 0.0)
            maximum = max(maximum, result)
            output.data[index] = result
        _softmax_with_max(output.data, len(output), maximum)

    def linear_relu_softmax_fused(self, weights, bias, output) -> None:
        """Linear and ReLU in one pass tracking the maximum, then softmax."""
        self._check_fused(weights, bias, output)
        maximum = -math.inf
        for index, product in self._dot_products(weights, output):
            result = max(product + bias.data[index], 0.0)
            maximum = max(maximum, result)
            output.data[index] = result
        _softmax_with_max(output.data, len(output), maximum)

    # Activations

    def relu(self) -> Tensor2D:
        """Return max(x, 0) element-wise as a new tensor."""
        output = Tensor2D.ramp(0.0, self.row_count, self.column_count)
        self.relu_preallocated(output)
        return output

    def relu_preallocated(self, output: Tensor2D) -> None:
        """Write max(x, 0) element-wise into output."""
        count = len(output)
        output.data[:count] = [max(value, 0.0) for value in self.data[:count]]

    def relu_inplace(self) -> None:
        """Replace every element with max(x, 0)."""
        self.relu_preallocated(self)

    def softmax(self) -> Tensor2D:
        """Return the softmax over all elements as a new tensor."""
        output = Tensor2D.ramp(0.0, self.row_count, self.column_count)
        self.softmax_preallocated(output)
        return output

    def softmax_preallocated(self, output: Tensor2D) -> None:
        """Write the softmax over all elements into output."""
        count = len(output)
        values = self.data[:count]
        maximum = max(values, default=-math.inf)
        offset = maximum + math.log(sum(math.exp(value - maximum) for value in values))
        output.data[:count] = [math.exp(value - offset) for value in values]

    def softmax_inplace(self) -> None:
        """Replace the elements with their softmax."""
        self.softmax_preallocated(self)


def _softmax_with_max(data: list[float], count: int, maximum: float) -> None:
    total = sum(math.exp(value - maximum) for value in data[:count])
    offset = maximum + math.log(total)
    data[:count] = [math.exp(value - offset) for value in data[:count]]