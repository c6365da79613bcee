"""A small modal text editor for the terminal with vi-style keys."""

__version__ = "0.1.0"