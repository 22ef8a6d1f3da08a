"""Modelos tipados para mediciones corporales y entradas del historial."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Category(str, Enum):
    """BMI weight category."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class RiskLabel(str, Enum):
    """Qualitative PCOS risk label."""

    LOW = "Low risk"
    LOW_TO_MODERATE = "Low to moderate risk"
    MODERATE_TO_HIGH = "Moderate to high risk"
    HIGH = "High risk"


@dataclass(frozen=True)
class Measurement:
    """Validated form input (kg / cm, no unit conversion)."""

    day: date
    weight: float
    height: float


@dataclass(frozen=True)
class Entry:
    """One history entry with its derived values."""

    id: str
    date: date
    weight: float
    height: float
    bmi: float
    category: Category
    risk_label: RiskLabel


@dataclass(frozen=True)
class TipBlock:
    """Heading plus bullet items of static advice."""

    title: str
    items: tuple[str, ...]


@dataclass(frozen=True)
class TipSet:
    """Personalized tips for one category."""

    exercise: TipBlock
    nutrition: TipBlock
    lifestyle: tuple[TipBlock, ...]


@dataclass(frozen=True)
class LatestReport:
    """Read model for the latest-result panels."""

    entry: Entry
    advisory: str
    tips: TipSet
