"""goscaffold - generate a Go web-service project skeleton."""

__version__ = "0.1.0"
