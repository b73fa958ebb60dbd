"""User records API: a JSON-file backed user repository behind FastAPI."""

__version__ = "0.1.0"
