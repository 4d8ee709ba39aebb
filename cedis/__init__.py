"""A small Redis-style TCP server that answers a single client's command."""

__version__ = "0.1.0"