"""Domain core: exception hierarchy and credential helpers."""
