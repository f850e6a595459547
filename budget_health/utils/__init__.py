"""Decimal, datetime and filesystem helpers."""
