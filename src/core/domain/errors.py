"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI puede distinguir fallos de notación (uso) de fallos de salida (I/O).
- Cada error hereda también de la excepción estándar equivalente, así que
  el código que ya captura `ValueError`/`OSError` sigue funcionando.
"""

from __future__ import annotations


class DiceError(Exception):
    """Base de todos los errores de dice-roll."""


class FormatError(DiceError, ValueError):
    """La notación `NdM` no es válida."""


class OutputError(DiceError, OSError):
    """No se pudo escribir el resultado en la salida estándar."""
