"""Tests for the Kivy-free rendering helpers."""

from __future__ import annotations

from datetime import date

import pandas as pd

from health_tracker.app import (
    _display_frame,
    _format_education,
    _format_latest,
    _format_preview_value,
    _format_reference,
    _format_risk,
    _format_tip_blocks,
    _format_tips,
)
from health_tracker.model import TipBlock
from health_tracker.tracker import HealthTracker

TODAY = date(2025, 12, 15)


def test_format_preview_value() -> None:
    assert _format_preview_value(None) == ""
    assert _format_preview_value(float("nan")) == ""
    assert _format_preview_value(date(2025, 12, 15)) == "2025-12-15"
    assert _format_preview_value(pd.Timestamp("2025-12-15 08:30")) == "2025-12-15"
    assert _format_preview_value(70.0) == "70"
    assert _format_preview_value(65.50) == "65.5"
    assert _format_preview_value(3) == "3"
    assert _format_preview_value("Obese") == "Obese"


def test_display_frame_formats_every_cell() -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-14", "70", "175", today=TODAY)
    out = _display_frame(tracker.store.to_frame())
    assert out.loc[0, "date"] == "2025-12-14"
    assert out.loc[0, "weight"] == "70"
    assert out.loc[0, "bmi"] == "22.9"
    assert out.loc[0, "category"] == "Normal weight"


def test_display_frame_empty() -> None:
    assert _display_frame(pd.DataFrame()).empty


def test_format_tip_blocks_bullets() -> None:
    text = _format_tip_blocks([TipBlock("Head:", ("a", "b"))])
    assert text.splitlines() == ["Head:", "  • a", "  • b"]


def test_latest_and_risk_panels() -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-15", "90", "160", today=TODAY)
    report = tracker.latest_report()
    assert report is not None
    latest = _format_latest(report)
    assert "BMI Score: 35.2" in latest
    assert "Category: Obese" in latest
    assert "Weight: 90 kg" in latest
    risk = _format_risk(report)
    assert risk.startswith("High risk")
    assert "Higher BMI" in risk


def test_tips_panel_includes_pcos_block_only_from_25() -> None:
    tracker = HealthTracker()
    tracker.submit("2025-12-15", "60", "170", today=TODAY)
    report = tracker.latest_report()
    assert report is not None
    text = _format_tips(report)
    assert "(Normal weight)" in text
    assert "PCOS-Specific Tips:" not in text
    assert "Week 1-2: Foundation" in text

    tracker.submit("2025-12-15", "80", "170", today=TODAY)
    report = tracker.latest_report()
    assert report is not None
    assert "PCOS-Specific Tips:" in _format_tips(report)


def test_static_panels() -> None:
    reference = _format_reference()
    assert "Underweight: < 18.5" in reference
    assert "Obese: ≥ 30.0" in reference
    assert "What is PCOS?" in _format_education()
