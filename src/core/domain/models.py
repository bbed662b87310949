"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la CLI.
- `frozen=True` hace que una tirada sea un valor inmutable y comparable.

Nota:
- Estos modelos describen *qué* se tira, no *cómo* se generan los números.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import FormatError

# Límite de un entero sin signo de 64 bits; notaciones mayores se rechazan.
MAX_COUNT = 2**64 - 1

_DELIMITER = "d"
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class DiceRoll(BaseModel):
    """Especificación de una tirada: `repetitions` dados de `faces` caras.

    Por qué existe:
    - Es el único dato que viaja de la CLI al motor de tiradas.
    - Su representación textual (`3d6`) es la misma notación que se parsea.
    """

    model_config = ConfigDict(frozen=True)

    repetitions: int = Field(
        ...,
        ge=0,
        le=MAX_COUNT,
        description="Cantidad de dados a tirar (0 es válido).",
    )
    faces: int = Field(
        ...,
        gt=0,
        le=MAX_COUNT,
        description="Número de caras de cada dado.",
    )

    @classmethod
    def parse(cls, text: str) -> "DiceRoll":
        """Alias de `parse_dice_roll` para quien prefiera el constructor."""

        return parse_dice_roll(text)

    def __str__(self) -> str:
        return f"{self.repetitions}{_DELIMITER}{self.faces}"


def _parse_count(text: str, label: str) -> int:
    try:
        if not text:
            raise ValueError("cannot parse integer from empty string")
        if not _UNSIGNED_RE.fullmatch(text):
            raise ValueError(f"invalid digit found in {text!r}")
        value = int(text)
        if value > MAX_COUNT:
            raise ValueError("number too large to fit in target type")
    except ValueError as exc:
        raise FormatError(f"invalid {label}: {exc}") from exc
    return value


def parse_dice_roll(text: str) -> DiceRoll:
    """Parsea la notación `NdM` (p.ej. `3d6`, `0d20`).

    Reglas:
    - Exactamente un delimitador `d`.
    - Ambas partes son enteros decimales no negativos.
    - `faces` no puede ser 0.

    Raises:
        FormatError: si la notación no cumple alguna de las reglas.
    """

    parts = text.split(_DELIMITER)
    if len(parts) != 2:
        raise FormatError("invalid specification format")

    repetitions = _parse_count(parts[0], "number of rolls")
    faces = _parse_count(parts[1], "number of faces")
    if faces == 0:
        raise FormatError("invalid number of faces")

    return DiceRoll(repetitions=repetitions, faces=faces)
