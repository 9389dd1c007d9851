"""Shared errors, models and lookups."""
