"""Solved short programming exercises as functions and judge-style commands."""

__version__ = "1.0.0"