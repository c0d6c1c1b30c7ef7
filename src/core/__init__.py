"""Core: dominio, contratos y servicios (sin HTTP ni UI)."""
