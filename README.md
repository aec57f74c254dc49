# memlab

Small, readable building blocks for studying how memory layout and access
patterns affect numeric code. Everything is pure Python with no third-party
dependencies.

## What is in the package

- `memlab.tensor2d.Tensor2D`: a row-major 2D tensor. `Tensor2D.ramp(scale,
  rows, columns)` fills element `i` with `i * scale`. It offers several
  variants of a linear layer (`input @ weights + bias`): `linear`,
  `linear_preallocated`, `linear_preallocated_inline`,
  `linear_local_accumulation`, `linear_optimized`, the ReLU-fused
  `linear_local_accumulation_relu` and `linear_optimized_relu`, and the
  linear/ReLU/softmax kernels `linear_relu_softmax_fused` and
  `linear_relu_softmax_fused_fission`. ReLU and softmax come in allocating
  (`relu`, `softmax`), preallocated (`relu_preallocated`,
  `softmax_preallocated`) and in-place (`relu_inplace`, `softmax_inplace`)
  forms, and `sum` and `subtract` help with checking results. Shape
  mismatches raise `ValueError`.
- `memlab.configuration.Configuration`: run settings, built with
  `Configuration.for_cpu(...)` or `Configuration.for_gpu(...)`; the latter
  raises `ValueError` when `loop_range` and `graph_depth_range` differ in
  length.
- `memlab.graph_operators`: the operators a computational graph is described
  with: `Empty`, `HostToDevice`, `DeviceToHost`, `Linear`, `ReLU`, `Softmax`,
  `LinearReLUFused` and `LinearReLUSoftmaxFused`.
- `memlab.uniforms`: `LinearDimensions`, `ReluDimensions`, `SumElements` and
  `SoftmaxDimensions`, each with `to_bytes()` packing its fields as
  little-endian unsigned 32-bit words (values out of range raise
  `ValueError`).
- `memlab.kernels`: reference `vector_add`, centred 1D `convolution` (samples
  outside the signal count as zero) and row-major `matrix_multiplication`,
  with `are_vectors_equivalent` (tolerance 0.001) and `mean_square_error`.
- `memlab.histogram`: reference `histogram(values, bin_count)` placing each
  value in bin `floor(value)`, the checks `histogram_error` and
  `are_histograms_equal`, and `UniformElements`, a four-word uniform block
  with `to_bytes()`.
- `memlab.hashmap_bench`: a dictionary benchmark, `run_benchmark(...)`
  returning `HashMapTimings`, and its command-line entry point.

## Installation

    pip install .

## Example

    from memlab.tensor2d import Tensor2D

    inputs = Tensor2D.ramp(0.5, 3, 4)
    weights = Tensor2D.ramp(1.0, 4, 4)
    bias = Tensor2D.ramp(0.1, 3, 4)

    output = inputs.linear(weights, bias)
    print(output.sum())            # about 1116.6
    print(output.softmax().sum())  # about 1.0

    from memlab.kernels import convolution
    print(convolution([1.0] * 5, [0.25, 0.5, -0.25]))  # [0.25, 0.5, 0.5, 0.5, 0.75]

## Hash map benchmark

Times insertion and read-modify-write updates for string-keyed and
integer-keyed dictionaries. With no options it runs the pairs
(1000, 100000), (10000, 10000), (100000, 1000) and (1000000, 100):

    memlab-hashmap-bench

Choose your own element/iteration pairs (repeatable) and a random seed:

    memlab-hashmap-bench --pair 1000 100 --pair 10000 10 --seed 42

## What the package does not do

memlab runs nothing on a GPU: the uniform classes only produce the bytes a
compute shader would read, and the kernels are the CPU reference versions.
It has no harness for timing the tensor operations across sizes or graph
depths, and it draws no charts.

## Running the tests

    pip install .[test]
    pytest