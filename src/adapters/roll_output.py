"""Escritura de resultados en stdout.

Por qué un writer propio:
- El modo verbose puede escribir desde varios threads; cada token se escribe
  bajo un lock para que nunca se mezclen dígitos de dos tiradas.
- Los fallos del stream (p.ej. `BrokenPipeError`) se convierten en
  `OutputError` y se tratan como fatales en la CLI.
"""

from __future__ import annotations

import sys
import threading
from contextlib import contextmanager
from typing import Iterator, TextIO

from core.domain.errors import OutputError


def format_sum(total: int) -> str:
    return f"{total}\n"


def format_roll(value: int) -> str:
    return f"{value} "


class RollWriter:
    """Writer thread-safe para el resultado de una tirada.

    Si no se pasa `stream`, se usa el `sys.stdout` vigente en cada escritura
    (así funciona con la captura de `CliRunner`/pytest).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._broken = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_sum(self, total: int) -> None:
        with self._guard():
            self.stream.write(format_sum(total))

    def write_roll(self, value: int) -> None:
        with self._guard():
            self.stream.write(format_roll(value))

    def flush(self) -> None:
        with self._guard():
            self.stream.flush()

    @contextmanager
    def _guard(self) -> Iterator[None]:
        with self._lock:
            if self._broken:
                raise OutputError("output stream is closed after a previous write error")
            try:
                yield
            except (OSError, ValueError) as exc:
                self._broken = True
                raise OutputError(f"failed to write output: {exc}") from exc
