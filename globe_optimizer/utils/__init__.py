"""Utility helpers shared across activities."""
