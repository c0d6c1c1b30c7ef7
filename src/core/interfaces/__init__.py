"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para la fuente de poemas y la vista.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
