"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el motor de tiradas y el logging lean config de forma consistente.

Ningún valor de aquí cambia el formato de la salida: solo el plan de ejecución
(threads, umbrales) y el nivel de logging.
"""

from __future__ import annotations

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Ajustes de ejecución leídos de variables `DICE_ROLL_*`.

    Solo deciden cuántos threads se usan, a partir de cuántos dados se reparte
    la suma y el nivel de logging; el resultado impreso es el mismo con
    cualquier combinación de valores.
    """

    model_config = SettingsConfigDict(
        env_prefix="DICE_ROLL_",
        extra="ignore",
        case_sensitive=False,
    )

    workers: int | None = Field(
        default=None,
        ge=1,
        le=1024,
        description="Threads del pool de tiradas (por defecto, los CPUs disponibles).",
    )
    parallel_threshold: int = Field(
        default=250_000,
        ge=1,
        description="Repeticiones mínimas para repartir la suma entre threads.",
    )
    parallel_verbose: bool = Field(
        default=False,
        description="Permite el modo verbose en paralelo (el orden deja de ser el de los dados).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging en stderr (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    def effective_workers(self) -> int:
        """Threads a usar: el valor configurado o los CPUs disponibles."""

        return self.workers or os.cpu_count() or 1
