"""Content backend for a marketing website: principles, team members and awards."""

__version__ = "0.1.0"
