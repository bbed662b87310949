"""Contrato de fuentes de aleatoriedad.

Por qué Protocol:
- El motor de tiradas no decide de dónde salen los números.
- En producción cada thread usa su propio generador; en tests se inyecta uno
  con semilla fija para comprobar secuencias exactas.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomProvider(Protocol):
    """Entrega el generador que debe usar el thread que llama.

    Reglas de diseño:
    - Cada llamada desde el mismo thread devuelve el mismo generador.
    - Threads distintos no comparten estado.
    """

    def generator(self) -> random.Random:
        ...
