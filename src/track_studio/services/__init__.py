"""Parsing, metrics and synthesis services."""
