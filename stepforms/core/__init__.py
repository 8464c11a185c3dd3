"""Core primitives shared across the form engine."""
