"""signalc - a SIGNAL language front end written in Python."""

__version__ = "0.1.0"
