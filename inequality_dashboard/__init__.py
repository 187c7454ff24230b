"""U.S. income inequality statistics: Lambda handlers and dashboard."""

__version__ = "0.1.0"
