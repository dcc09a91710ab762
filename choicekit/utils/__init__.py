"""Shared utilities: event signals and logging."""
