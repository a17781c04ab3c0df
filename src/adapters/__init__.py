"""Adaptadores de I/O (HTTP, exportación a disco)."""
