"""Phone orientation classification from accelerometer readings by nearest neighbour."""

__version__ = "0.1.0"
__all__ = ["__version__"]