"""Servicios del Core (orquestación sin efectos de UI)."""
