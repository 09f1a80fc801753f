"""Core entities shared across the service."""
