"""Núcleo: configuración, errores, dominio y catálogo de endpoints.

No importa `httpx`: el transporte vive en `quran_content.adapters`.
"""
