"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce threads, CLI ni streams: solo la tirada de dados.
"""

from core.domain.errors import DiceError, FormatError, OutputError
from core.domain.models import DiceRoll, parse_dice_roll

__all__ = ["DiceError", "DiceRoll", "FormatError", "OutputError", "parse_dice_roll"]
