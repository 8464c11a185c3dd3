"""Utility helpers for translation and logging."""
