"""Dense-tensor kernels, reference compute kernels, packed uniform blocks and a dictionary benchmark."""

__version__ = "0.1.0"