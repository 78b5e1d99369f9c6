# Area: Shared
"""Shared utilities: logging and randomness."""
