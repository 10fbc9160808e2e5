"""Watch Resy venues for open tables and book the best slot automatically."""

__version__ = "0.1.0"
