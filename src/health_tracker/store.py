"""Historial en memoria de entradas (mas reciente primero)."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

import pandas as pd

from health_tracker.model import Entry

HISTORY_COLUMNS = ["date", "weight", "height", "bmi", "category", "risk_label"]


class EntryStore:
    """Session-scoped, prepend-only list of entries."""

    def __init__(self) -> None:
        self._entries: deque[Entry] = deque()

    def append(self, entry: Entry) -> None:
        """Prepend ``entry``; no dedup, same-date entries are kept."""
        self._entries.appendleft(entry)

    def latest(self) -> Entry | None:
        """Most recent entry, or None when the store is empty."""
        if not self._entries:
            return None
        return self._entries[0]

    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of all entries, newest first."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def to_frame(self) -> pd.DataFrame:
        """History as DataFrame (newest first) for the history panel."""
        rows = [
            {
                "date": e.date,
                "weight": e.weight,
                "height": e.height,
                "bmi": e.bmi,
                "category": e.category.value,
                "risk_label": e.risk_label.value,
            }
            for e in self._entries
        ]
        if not rows:
            return pd.DataFrame(columns=HISTORY_COLUMNS)
        return pd.DataFrame(rows, columns=HISTORY_COLUMNS)
