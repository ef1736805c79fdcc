"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from quran_content.core.interfaces.dispatcher import Dispatcher

__all__ = ["Dispatcher"]
