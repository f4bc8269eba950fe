"""Static check for the ESH-INF descriptor directory of a binding."""

__version__ = "0.1.0"
