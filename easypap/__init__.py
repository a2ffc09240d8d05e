"""Framework for running and timing iterative image kernels, with thread barriers and work distribution."""

__version__ = "0.1.0"