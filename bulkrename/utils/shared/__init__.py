"""Shared utilities: JSON preset storage."""
