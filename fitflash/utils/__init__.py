"""Shared helpers: unit conversion and display formatting."""
