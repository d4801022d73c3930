"""Vista Alegre day-use booking API."""

__version__ = "1.0.0"
