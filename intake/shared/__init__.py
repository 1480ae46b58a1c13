"""Shared cross-cutting helpers (logging, tracing). No business logic."""
