"""Shared infrastructure: configuration, storage, logging, errors, CLI."""
