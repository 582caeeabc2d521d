"""Shared cross-cutting helpers (logging)."""
