"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2): payloads de la API,
  parámetros de query y la allow-list de idiomas.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
