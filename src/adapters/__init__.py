"""Adaptadores: I/O concreto (HTTP, consola)."""
