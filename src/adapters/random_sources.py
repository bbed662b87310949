"""Fuentes de aleatoriedad concretas.

Por qué thread-local:
- Cada worker del pool tiene su propio `random.Random`; no hay contención ni
  estado compartido entre threads.
"""

from __future__ import annotations

import os
import random
import threading


class ThreadLocalRandomProvider:
    """Un generador por thread, sembrado con entropía del sistema operativo.

    No es reproducible entre ejecuciones ni apto para criptografía.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def generator(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = random.Random(int.from_bytes(os.urandom(16), "big"))
            self._local.rng = rng
        return rng


class SeededRandomProvider:
    """Un generador por thread, derivado de una semilla fija.

    El primer thread que pide generador recibe exactamente `random.Random(seed)`,
    así que en ejecución secuencial la secuencia de tiradas es reproducible.
    Los threads siguientes reciben `random.Random(f"{seed}:{n}")` para que los
    workers del pool no repitan la misma secuencia.
    """

    def __init__(self, seed: int | str | bytes) -> None:
        self.seed = seed
        self._local = threading.local()
        self._lock = threading.Lock()
        self._next_index = 0

    def generator(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            with self._lock:
                index = self._next_index
                self._next_index += 1
            rng = random.Random(self.seed if index == 0 else f"{self.seed}:{index}")
            self._local.rng = rng
        return rng
