"""A small slide editor driven by typed commands, with a tkinter window."""

__version__ = "0.1.0"

__all__ = ["__version__"]