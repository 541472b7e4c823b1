"""Small programs: an append-only key-value store with an HTTP front end, an HTTP request-line parser and logging server, and exercises."""

__version__ = "0.1.0"