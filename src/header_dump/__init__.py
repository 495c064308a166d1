"""header-dump - print a debug representation of a header record."""

__version__ = "0.1.0"
