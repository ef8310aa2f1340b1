"""Stagecraft: compiles database change requests into gated deployment pipelines."""

__version__ = "0.3.0"
