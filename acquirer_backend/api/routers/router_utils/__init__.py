"""Shared router helpers."""
