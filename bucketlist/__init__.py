"""A holiday bucket list kept in SQLite and served as a small WSGI web application."""

__version__ = "0.1.0"