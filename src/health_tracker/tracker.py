"""Controlador de sesion: valida, deriva y guarda cada envio del formulario."""

from __future__ import annotations

import itertools
import logging
from datetime import date

from health_tracker.config import TrackerConfig
from health_tracker.derivation import derive_entry, risk_advisory, select_tips
from health_tracker.model import Entry, LatestReport
from health_tracker.store import EntryStore
from health_tracker.validation import EntryValidationError, validate_measurement

logger = logging.getLogger(__name__)


class HealthTracker:
    """One user session: a single in-memory store and its submissions."""

    def __init__(
        self,
        config: TrackerConfig | None = None,
        store: EntryStore | None = None,
    ) -> None:
        self.config = config or TrackerConfig()
        self.store = store if store is not None else EntryStore()
        self._ids = itertools.count(1)

    def submit(
        self,
        raw_date: str,
        raw_weight: str,
        raw_height: str,
        today: date | None = None,
    ) -> Entry:
        """Validate the form values and record a new entry.

        Returns:
            The created entry, now ``store.latest()``.

        Raises:
            EntryValidationError: If any field is rejected. Nothing is stored.
        """
        try:
            measurement = validate_measurement(
                raw_date, raw_weight, raw_height, config=self.config, today=today
            )
        except EntryValidationError as exc:
            logger.warning("Entrada rechazada (%s): %s", type(exc).__name__, exc)
            raise

        entry = derive_entry(measurement, entry_id=str(next(self._ids)))
        self.store.append(entry)
        logger.info(
            "Entrada %s agregada: %s bmi=%s (%s)",
            entry.id,
            entry.date.isoformat(),
            entry.bmi,
            entry.category.value,
        )
        return entry

    def latest_report(self) -> LatestReport | None:
        """Data for the latest-result and tips panels; None if no entries."""
        entry = self.store.latest()
        if entry is None:
            return None
        return LatestReport(
            entry=entry,
            advisory=risk_advisory(entry.bmi),
            tips=select_tips(entry.bmi),
        )
