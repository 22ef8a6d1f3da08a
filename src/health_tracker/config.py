"""Configuracion de limites y presentacion del tracker."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerConfig:
    """Tracker tunables (no persistence, defaults only)."""

    max_weight_kg: float = 500.0
    max_height_cm: float = 300.0
    history_preview_rows: int = 120
    # None: zona horaria local del sistema (dateutil.tz.gettz).
    local_tz: str | None = None
