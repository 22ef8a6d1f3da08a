"""Contenido educativo estatico: tablas de tips por categoria y paneles fijos."""

from __future__ import annotations

from health_tracker.model import Category, TipBlock

EXERCISE_TIPS: dict[Category, TipBlock] = {
    Category.UNDERWEIGHT: TipBlock(
        "Focus on Strength Building:",
        (
            "Resistance training 3-4x per week",
            "Compound exercises (squats, deadlifts)",
            "Progressive overload training",
            "Limit excessive cardio",
        ),
    ),
    Category.NORMAL: TipBlock(
        "Maintain Current Fitness:",
        (
            "150 minutes moderate cardio weekly",
            "Strength training 2-3x per week",
            "Mix of HIIT and steady-state cardio",
            "Flexibility and mobility work",
        ),
    ),
    Category.OVERWEIGHT: TipBlock(
        "Focus on Fat Loss:",
        (
            "Combine cardio and strength training",
            "HIIT workouts 3x per week",
            "Daily walks (8,000-10,000 steps)",
            "Circuit training for efficiency",
        ),
    ),
    Category.OBESE: TipBlock(
        "Start Gradually:",
        (
            "Begin with 20-30 min daily walks",
            "Low-impact exercises (swimming, cycling)",
            "Bodyweight exercises at home",
            "Gradually increase intensity",
        ),
    ),
}

_PCOS_DIET = TipBlock(
    "PCOS-Friendly Diet:",
    (
        "Low glycemic index foods",
        "Reduce refined sugars and processed foods",
        "Anti-inflammatory foods (berries, leafy greens)",
        "Lean proteins and healthy fats",
        "Consider intermittent fasting",
    ),
)

NUTRITION_TIPS: dict[Category, TipBlock] = {
    Category.UNDERWEIGHT: TipBlock(
        "Healthy Weight Gain:",
        (
            "Increase caloric intake by 300-500 calories",
            "Focus on nutrient-dense foods",
            "Healthy fats: nuts, avocados, olive oil",
            "Protein with every meal",
        ),
    ),
    Category.NORMAL: TipBlock(
        "Maintain Balance:",
        (
            "Balanced macronutrients (40% carbs, 30% protein, 30% fat)",
            "5-6 servings of fruits and vegetables",
            "Whole grains over refined carbs",
            "Stay hydrated (8-10 glasses water)",
        ),
    ),
    Category.OVERWEIGHT: _PCOS_DIET,
    Category.OBESE: _PCOS_DIET,
}

GENERAL_WELLNESS = TipBlock(
    "General Wellness:",
    (
        "7-9 hours of quality sleep",
        "Stress management (meditation, yoga)",
        "Regular meal timing",
        "Limit caffeine and alcohol",
    ),
)

PCOS_SPECIFIC = TipBlock(
    "PCOS-Specific Tips:",
    (
        "Monitor blood sugar levels",
        "Consider supplements (inositol, vitamin D)",
        "Regular gynecological check-ups",
        "Track menstrual cycles",
    ),
)

ACTION_PLAN: tuple[TipBlock, ...] = (
    TipBlock(
        "Week 1-2: Foundation",
        (
            "Start with 20-30 min daily walks",
            "Replace one processed meal with whole foods",
            "Establish consistent sleep schedule",
        ),
    ),
    TipBlock(
        "Week 3-4: Progress",
        (
            "Add strength training 2x per week",
            "Meal prep healthy options",
            "Practice stress-reduction techniques",
        ),
    ),
)

HIGHER_BMI_ADVISORY = (
    "Higher BMI is associated with increased PCOS risk. Consider consulting "
    "a healthcare provider for personalized advice."
)
HEALTHY_BMI_ADVISORY = (
    "Maintaining a healthy weight can help reduce PCOS risk factors. Continue "
    "with healthy lifestyle choices."
)

CATEGORY_REFERENCE: tuple[tuple[str, str], ...] = (
    ("Underweight", "< 18.5"),
    ("Normal", "18.5 - 24.9"),
    ("Overweight", "25.0 - 29.9"),
    ("Obese", "≥ 30.0"),
)

WHAT_IS_PCOS = (
    "Polycystic Ovary Syndrome (PCOS) is a hormonal disorder affecting women "
    "of reproductive age. It's characterized by irregular periods, excess "
    "androgen levels, and polycystic ovaries."
)

PCOS_EDUCATION: tuple[TipBlock, ...] = (
    TipBlock(
        "Weight and PCOS Connection",
        (
            "60-80% of women with PCOS are overweight or obese",
            "Excess weight can worsen insulin resistance",
            "Higher BMI increases androgen production",
            "Weight gain can trigger PCOS symptoms",
        ),
    ),
    TipBlock(
        "How Weight Loss Helps",
        (
            "5-10% weight loss can improve symptoms significantly",
            "Better insulin sensitivity and hormone balance",
            "More regular menstrual cycles",
            "Reduced risk of diabetes and heart disease",
            "Improved fertility outcomes",
        ),
    ),
)

WEIGHT_LOSS_NOTE = (
    "Even modest weight loss can lead to significant improvements in PCOS "
    "symptoms and overall health."
)

MEDICAL_DISCLAIMER = (
    "Medical Disclaimer: This tool provides general health information and "
    "should not replace professional medical advice. PCOS risk assessment is "
    "based on BMI correlation studies. Please consult with a healthcare "
    "provider for accurate diagnosis and personalized treatment plans."
)
