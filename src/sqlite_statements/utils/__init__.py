"""Utility helpers for sqlite-statements."""
