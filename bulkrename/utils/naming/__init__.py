"""Naming helpers: case and separator transforms, filename validation."""
