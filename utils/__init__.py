"""Validation and formatting helpers for Italian identifiers."""
