"""SizzleSync restaurant point-of-sale console."""

__version__ = "0.1.0"
