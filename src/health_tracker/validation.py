"""Validacion de los campos del formulario (peso, altura, fecha)."""

from __future__ import annotations

import math
import re
from datetime import date, datetime

from dateutil import parser, tz

from health_tracker.config import TrackerConfig
from health_tracker.model import Measurement

_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


class EntryValidationError(ValueError):
    """Base class for rejected submissions; message is user-facing."""


class MissingFieldError(EntryValidationError):
    """Weight or height left empty."""


class NotANumberError(EntryValidationError):
    """Weight or height is not a finite number."""


class OutOfRangeError(EntryValidationError):
    """Weight or height outside the accepted range."""


class InvalidDateError(EntryValidationError):
    """Date missing or not an ISO calendar date."""


class FutureDateError(EntryValidationError):
    """Date after today."""


def validate_measurement(
    raw_date: str,
    raw_weight: str,
    raw_height: str,
    config: TrackerConfig | None = None,
    today: date | None = None,
) -> Measurement:
    """Validate raw form strings and return the numeric measurement.

    Args:
        raw_date: ISO date string (``YYYY-MM-DD``).
        raw_weight: Weight in kg as typed by the user.
        raw_height: Height in cm as typed by the user.
        config: Limits; defaults to ``TrackerConfig()``.
        today: Reference day; defaults to today in the configured timezone.

    Returns:
        Measurement with the values unchanged (no unit conversion).

    Raises:
        MissingFieldError: If weight or height is empty.
        NotANumberError: If weight or height does not parse to a finite number.
        OutOfRangeError: If weight or height is out of range.
        InvalidDateError: If the date is empty or malformed.
        FutureDateError: If the date is after ``today``.
    """
    cfg = config or TrackerConfig()
    weight, height = validate_weight_height(raw_weight, raw_height, cfg)
    ref_day = today if today is not None else local_today(cfg)
    day = validate_date(raw_date, ref_day)
    return Measurement(day=day, weight=weight, height=height)


def validate_weight_height(
    raw_weight: str, raw_height: str, config: TrackerConfig
) -> tuple[float, float]:
    """Check presence, then numeric validity, then range (weight first)."""
    if not (raw_weight or "").strip() or not (raw_height or "").strip():
        raise MissingFieldError("Please fill in both weight and height fields")

    weight = _parse_number(raw_weight)
    height = _parse_number(raw_height)
    if weight is None or height is None:
        raise NotANumberError("Please enter valid numbers for weight and height")

    if not 0 < weight <= config.max_weight_kg:
        raise OutOfRangeError(
            "Please enter a valid weight between 1-"
            f"{_fmt_limit(config.max_weight_kg)} kg"
        )
    height_error = (
        "Please enter a valid height between 1-"
        f"{_fmt_limit(config.max_height_cm)} cm"
    )
    if not 0 < height <= config.max_height_cm:
        raise OutOfRangeError(height_error)
    if not _bmi_is_finite(weight, height):
        raise OutOfRangeError(height_error)
    return weight, height


def validate_date(raw_date: str, today: date) -> date:
    """Parse an ISO date and reject days after ``today``."""
    text = (raw_date or "").strip()
    if not text:
        raise InvalidDateError("Please enter a date (YYYY-MM-DD)")
    if not _ISO_DAY.fullmatch(text):
        raise InvalidDateError(f"Please enter a valid date (YYYY-MM-DD): {text}")
    try:
        day = parser.isoparse(text).date()
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(
            f"Please enter a valid date (YYYY-MM-DD): {text}"
        ) from exc
    if day > today:
        raise FutureDateError("The date cannot be in the future")
    return day


def local_today(config: TrackerConfig) -> date:
    """Return today's date in the configured timezone."""
    return datetime.now(tz=tz.gettz(config.local_tz)).date()


def _parse_number(raw: str) -> float | None:
    text = raw.strip()
    # float() acepta separadores "_" (1_000); el formulario no.
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _bmi_is_finite(weight: float, height: float) -> bool:
    """Same float steps as calculate_bmi; False on underflow or overflow."""
    height_m = height / 100
    squared = height_m * height_m
    if squared == 0:
        return False
    return math.isfinite(weight / squared)


def _fmt_limit(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)
