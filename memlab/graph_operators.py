"""Operators that make up a computational graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from memlab.tensor2d import Tensor2D


@dataclass(frozen=True)
class Empty:
    """A no-op placeholder."""


@dataclass(frozen=True)
class HostToDevice:
    """Upload the input tensor to the device."""

    input: Tensor2D


@dataclass(frozen=True)
class DeviceToHost:
    """Download the current result back to the host."""


@dataclass(frozen=True)
class Linear:
    """A linear layer: input @ weights + bias."""

    weights: Tensor2D
    bias: Tensor2D


@dataclass(frozen=True)
class ReLU:
    """Element-wise max(x, 0)."""


@dataclass(frozen=True)
class Softmax:
    """Softmax over all elements."""


@dataclass(frozen=True)
class LinearReLUFused:
    """A linear layer followed by ReLU in one operator."""

    weights: Tensor2D
    bias: Tensor2D


@dataclass(frozen=True)
class LinearReLUSoftmaxFused:
    """A linear layer, ReLU and softmax in one operator."""

    weights: Tensor2D
    bias: Tensor2D


GraphOperator = Union[
    Empty,
    HostToDevice,
    DeviceToHost,
    Linear,
    ReLU,
    Softmax,
    LinearReLUFused,
    LinearReLUSoftmaxFused,
]