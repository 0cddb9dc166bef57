"""Apex: reports, documents, and the content-addressable store behind them."""

__version__ = "0.1.0"
