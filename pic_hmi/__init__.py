"""Toolbar model, main-window logic and Tkinter front end for a substation process-picture operator station."""

__version__ = "0.1.0"
__all__ = ["__version__"]