"""Car Center reservation platform API: authentication and user management."""

__version__ = "1.0.0"
