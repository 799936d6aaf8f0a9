"""Utility packages for bulkrename: logging, naming helpers, JSON storage."""
