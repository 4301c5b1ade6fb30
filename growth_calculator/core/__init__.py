"""Calculation engines."""
