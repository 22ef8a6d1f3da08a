"""Derivacion pura: BMI -> categoria -> riesgo -> tips."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from health_tracker.guidance import (
    EXERCISE_TIPS,
    GENERAL_WELLNESS,
    HEALTHY_BMI_ADVISORY,
    HIGHER_BMI_ADVISORY,
    NUTRITION_TIPS,
    PCOS_SPECIFIC,
)
from health_tracker.model import (
    Category,
    Entry,
    Measurement,
    RiskLabel,
    TipBlock,
    TipSet,
)

# Limite superior exclusivo -> categoria; el ultimo tramo no tiene limite.
CATEGORY_THRESHOLDS: tuple[tuple[float, Category], ...] = (
    (18.5, Category.UNDERWEIGHT),
    (25.0, Category.NORMAL),
    (30.0, Category.OVERWEIGHT),
)

RISK_BY_CATEGORY: dict[Category, RiskLabel] = {
    Category.UNDERWEIGHT: RiskLabel.LOW,
    Category.NORMAL: RiskLabel.LOW_TO_MODERATE,
    Category.OVERWEIGHT: RiskLabel.MODERATE_TO_HIGH,
    Category.OBESE: RiskLabel.HIGH,
}

ELEVATED_BMI = 25.0

_ONE_DECIMAL = Decimal("0.1")
# Alcanza para cualquier float finito (max ~1.8e308) con un decimal.
_BMI_PRECISION = 400


def calculate_bmi(weight: float, height: float) -> float:
    """Return BMI rounded half-up to one decimal.

    Args:
        weight: Weight in kilograms.
        height: Height in centimeters.
    """
    height_m = height / 100
    raw = weight / (height_m * height_m)
    with localcontext() as ctx:
        ctx.prec = _BMI_PRECISION
        rounded = Decimal(raw).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return float(rounded)


def classify_bmi(bmi: float) -> Category:
    """Map a BMI to its category (lower bound inclusive)."""
    for upper, category in CATEGORY_THRESHOLDS:
        if bmi < upper:
            return category
    return Category.OBESE


def risk_label(bmi: float) -> RiskLabel:
    """PCOS risk label; same boundaries as the category."""
    return RISK_BY_CATEGORY[classify_bmi(bmi)]


def risk_advisory(bmi: float) -> str:
    if bmi >= ELEVATED_BMI:
        return HIGHER_BMI_ADVISORY
    return HEALTHY_BMI_ADVISORY


def exercise_tips(bmi: float) -> TipBlock:
    return EXERCISE_TIPS[classify_bmi(bmi)]


def nutrition_tips(bmi: float) -> TipBlock:
    return NUTRITION_TIPS[classify_bmi(bmi)]


def lifestyle_tips(bmi: float) -> tuple[TipBlock, ...]:
    """General wellness, plus PCOS-specific tips from BMI 25 on."""
    if bmi >= ELEVATED_BMI:
        return (GENERAL_WELLNESS, PCOS_SPECIFIC)
    return (GENERAL_WELLNESS,)


def select_tips(bmi: float) -> TipSet:
    return TipSet(
        exercise=exercise_tips(bmi),
        nutrition=nutrition_tips(bmi),
        lifestyle=lifestyle_tips(bmi),
    )


def derive_entry(measurement: Measurement, entry_id: str) -> Entry:
    """Build an immutable Entry from a validated measurement."""
    bmi = calculate_bmi(measurement.weight, measurement.height)
    category = classify_bmi(bmi)
    return Entry(
        id=entry_id,
        date=measurement.day,
        weight=measurement.weight,
        height=measurement.height,
        bmi=bmi,
        category=category,
        risk_label=RISK_BY_CATEGORY[category],
    )
