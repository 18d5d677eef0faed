"""Sort integers with two stacks and check instruction sequences."""

__version__ = "0.1.0"

__all__ = ["__version__"]