"""Compiler for a small BASIC dialect that emits register-machine assembly text."""

__version__ = "0.1.0"