"""Shared helper services."""
