[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memlab"
version = "0.1.0"
description = "Small dense-tensor kernels, reference compute kernels and a dictionary benchmark for exploring memory hierarchies"
requires-python = ">=3.10"
keywords = ["tensor", "benchmark", "memory hierarchy", "softmax", "linear layer", "histogram", "convolution"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
memlab-hashmap-bench = "memlab.hashmap_bench:main"

[tool.hatch.build.targets.wheel]
packages = ["memlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
