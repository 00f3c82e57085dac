"""Merge translation JSON trees by appending missing dataList entries, with a Tkinter window."""

__version__ = "0.1.0"
__all__ = ["__version__"]