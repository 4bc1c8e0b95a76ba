"""URL shortener: maps long URLs to short codes and redirects them back."""

__version__ = "0.1.0"
