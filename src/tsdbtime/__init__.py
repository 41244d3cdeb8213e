"""tsdbtime - time range parsing for time-series queries."""

__version__ = "0.1.0"
__author__ = "tsdbtime Team"
__description__ = "Parse relative, absolute and numeric query times into epoch milliseconds"

__all__ = ["__version__", "__author__", "__description__"]
