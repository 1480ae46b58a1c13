"""Application use cases (orchestrate repositories and services)."""
