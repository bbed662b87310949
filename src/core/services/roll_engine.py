"""Motor de tiradas.

Este módulo concentra la generación de números; la CLI solo decide el modo
(suma o verbose) y dónde se escribe el resultado. Así el motor es reutilizable
desde tests u otros entry-points sin efectos secundarios propios.

Modos:
- `roll_sum`: solo interesa el total, así que el trabajo se puede repartir
  en trozos entre threads y sumar los parciales.
- `roll_each`: entrega cada tirada a un `sink` en cuanto se produce. Es
  secuencial salvo que `parallel_verbose` esté activo; en paralelo el `sink`
  debe ser thread-safe y el orden de las tiradas no está definido.
"""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Iterator, TypeVar

from adapters.random_sources import ThreadLocalRandomProvider
from core.config import AppSettings
from core.domain.models import DiceRoll
from core.interfaces.random_source import RandomProvider
from core.logging_setup import get_logger

T = TypeVar("T")

_log = get_logger("engine")


def split_chunks(total: int, parts: int) -> list[int]:
    """Reparte `total` en como mucho `parts` trozos no vacíos y casi iguales."""

    if total <= 0:
        return []
    parts = max(1, min(parts, total))
    base, extra = divmod(total, parts)
    return [base + 1 if i < extra else base for i in range(parts)]


class RollEngine:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        provider: RandomProvider | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.provider = provider or ThreadLocalRandomProvider()

    def iter_rolls(self, roll: DiceRoll) -> Iterator[int]:
        """Itera las tiradas una a una en el thread actual."""

        rng = self.provider.generator()
        for _ in range(roll.repetitions):
            yield rng.randint(1, roll.faces)

    def roll_sum(self, roll: DiceRoll) -> int:
        """Tira todos los dados y devuelve la suma."""

        workers = self._workers_for(roll, parallel=roll.repetitions >= self.settings.parallel_threshold)
        if workers <= 1:
            return sum(self.iter_rolls(roll))

        def sum_chunk(size: int) -> int:
            rng = self.provider.generator()
            return sum(rng.randint(1, roll.faces) for _ in range(size))

        return sum(self._run_chunks(sum_chunk, split_chunks(roll.repetitions, workers)))

    def roll_each(self, roll: DiceRoll, sink: Callable[[int], None]) -> None:
        """Tira los dados y entrega cada resultado a `sink` al momento."""

        workers = self._workers_for(roll, parallel=self.settings.parallel_verbose)
        if workers <= 1:
            for value in self.iter_rolls(roll):
                sink(value)
            return

        def emit_chunk(size: int) -> None:
            rng = self.provider.generator()
            for _ in range(size):
                sink(rng.randint(1, roll.faces))

        self._run_chunks(emit_chunk, split_chunks(roll.repetitions, workers))

    def _workers_for(self, roll: DiceRoll, *, parallel: bool) -> int:
        workers = self.settings.effective_workers() if parallel else 1
        workers = max(1, min(workers, roll.repetitions))
        _log.debug("rolling %s with %d worker(s)", roll, workers)
        return workers

    @staticmethod
    def _run_chunks(fn: Callable[[int], T], sizes: list[int]) -> list[T]:
        with ThreadPoolExecutor(max_workers=len(sizes), thread_name_prefix="dice-roll") as pool:
            futures = [pool.submit(fn, size) for size in sizes]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in done:
                exc = future.exception()
                if exc is not None:
                    for other in pending:
                        other.cancel()
                    raise exc
            return [future.result() for future in futures]
