"""Shared helpers for the Vitrine viewer."""
