from __future__ import annotations

import logging
from datetime import date

import pytest

from health_tracker.guidance import HIGHER_BMI_ADVISORY, PCOS_SPECIFIC
from health_tracker.model import Category, RiskLabel
from health_tracker.tracker import HealthTracker
from health_tracker.validation import (
    FutureDateError,
    MissingFieldError,
    OutOfRangeError,
)

TODAY = date(2025, 12, 15)


def test_submit_records_entry_as_latest() -> None:
    tracker = HealthTracker()
    entry = tracker.submit("2025-12-15", "65.5", "165.5", today=TODAY)
    assert tracker.store.latest() is entry
    assert entry.bmi == 23.9
    assert entry.category is Category.NORMAL
    assert entry.risk_label is RiskLabel.LOW_TO_MODERATE


def test_submit_assigns_unique_ids() -> None:
    tracker = HealthTracker()
    ids = {
        tracker.submit("2025-12-15", "70", "170", today=TODAY).id for _ in range(3)
    }
    assert len(ids) == 3


@pytest.mark.parametrize(("weight", "height"), [("", "170"), ("70", "")])
def test_missing_field_stores_nothing(weight: str, height: str) -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-14", "70", "170", today=TODAY)
    with pytest.raises(MissingFieldError):
        tracker.submit("2025-12-15", weight, height, today=TODAY)
    assert len(tracker.store) == 1


def test_weight_over_max_stores_nothing() -> None:
    tracker = HealthTracker()
    with pytest.raises(OutOfRangeError):
        tracker.submit("2025-12-15", "600", "170", today=TODAY)
    assert len(tracker.store) == 0
    assert tracker.latest_report() is None


def test_future_date_stores_nothing() -> None:
    tracker = HealthTracker()
    with pytest.raises(FutureDateError):
        tracker.submit("2025-12-16", "70", "170", today=TODAY)
    assert len(tracker.store) == 0


def test_latest_report_for_obese_entry() -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-15", "90", "160", today=TODAY)
    report = tracker.latest_report()
    assert report is not None
    assert report.entry.bmi == 35.2
    assert report.entry.category is Category.OBESE
    assert report.entry.risk_label is RiskLabel.HIGH
    assert report.advisory == HIGHER_BMI_ADVISORY
    assert PCOS_SPECIFIC in report.tips.lifestyle


def test_latest_report_follows_most_recent_submission() -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-15", "90", "160", today=TODAY)
    tracker.submit("2025-12-01", "50", "170", today=TODAY)
    report = tracker.latest_report()
    assert report is not None
    assert report.entry.category is Category.UNDERWEIGHT
    assert report.tips.exercise.title == "Focus on Strength Building:"


def test_submit_logs_accept_and_reject(caplog: pytest.LogCaptureFixture) -> None:
    tracker = HealthTracker()
    with caplog.at_level(logging.INFO, logger="health_tracker.tracker"):
        tracker.submit("2025-12-15", "70", "170", today=TODAY)
        with pytest.raises(MissingFieldError):
            tracker.submit("2025-12-15", "", "170", today=TODAY)
    levels = [r.levelno for r in caplog.records]
    assert logging.INFO in levels
    assert logging.WARNING in levels
    assert "MissingFieldError" in caplog.text


def test_submit_defaults_today_from_local_clock(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        "health_tracker.validation.local_today", lambda _config: TODAY
    )
    tracker = HealthTracker()
    tracker.submit("2025-12-15", "70", "170")
    with pytest.raises(FutureDateError):
        tracker.submit("2025-12-16", "70", "170")


def test_tiny_heights_never_reach_derivation_errors() -> None:
    tracker = HealthTracker()
    entry = tracker.submit("2025-12-15", "500", "0.00000000001", today=TODAY)
    assert entry.category is Category.OBESE
    with pytest.raises(OutOfRangeError):
        tracker.submit("2025-12-15", "500", "1e-200", today=TODAY)
    assert len(tracker.store) == 1
