"""Modelos y errores del dominio.

Por qué:
- Aquí viven el registro `Poem` (Pydantic v2) y los tipos de fallo del fetch.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
