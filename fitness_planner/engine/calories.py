"""
Calorie and macro calculations.

BMR uses the Mifflin-St Jeor equation with a fixed "moderately active"
activity multiplier. Missing profile fields fall back to defaults one
field at a time.
"""

import math
import logging
from typing import Iterable, Optional

from .models import Gender, MacroTargets, Profile, goal_flags

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_AGE = 25
DEFAULT_GENDER = Gender.OTHER

ACTIVITY_MULTIPLIER = 1.55  # moderately active; no other levels are modeled

# Additive constant per gender. "other" uses the average-offset convention
# between the male and female constants.
GENDER_OFFSETS = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
    Gender.OTHER: -78,
}

WEIGHT_LOSS_DEFICIT = 500
MUSCLE_GAIN_SURPLUS = 300

PROTEIN_PER_KG_MUSCLE_GAIN = 2.0
PROTEIN_PER_KG_DEFAULT = 1.6
FAT_CALORIE_SHARE = 0.25

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARB = 4
CALORIES_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def resolve_weight(profile: Profile) -> float:
    return profile.current_weight or DEFAULT_WEIGHT_KG


def calculate_bmr(profile: Profile) -> float:
    """
    Basal metabolic rate in kcal/day.

    Args:
        profile: User profile; absent fields use the module defaults

    Returns:
        Unrounded Mifflin-St Jeor BMR
    """
    weight = resolve_weight(profile)
    height = profile.height or DEFAULT_HEIGHT_CM
    age = profile.age or DEFAULT_AGE
    gender = profile.gender or DEFAULT_GENDER

    return 10 * weight + 6.25 * height - 5 * age + GENDER_OFFSETS[gender]


def calculate_base_calories(profile: Profile) -> int:
    """Total daily energy expenditure, rounded to whole kcal."""
    return round_half_up(calculate_bmr(profile) * ACTIVITY_MULTIPLIER)


def adjust_calories_for_goals(base_calories: int, goals: Optional[Iterable]) -> int:
    """Apply the goal-specific calorie adjustment.

    Only a single-direction goal moves the target. Holding both goals, or
    none, keeps maintenance calories.
    """
    needs_weight_loss, needs_muscle_gain = goal_flags(goals)

    if needs_weight_loss and not needs_muscle_gain:
        return base_calories - WEIGHT_LOSS_DEFICIT
    if needs_muscle_gain and not needs_weight_loss:
        return base_calories + MUSCLE_GAIN_SURPLUS
    return base_calories


def calculate_macro_targets(profile: Profile,
                            goals: Optional[Iterable],
                            clamp_negative_carbs: bool = True) -> MacroTargets:
    """
    Split the daily calorie target into protein, fat and carb grams.

    Protein is set per kg of body weight, fat takes a fixed share of calories
    and carbs receive whatever remains.

    Args:
        profile: User profile
        goals: Goal values (enum members or strings)
        clamp_negative_carbs: Floor carb grams at zero when protein and fat
            already exceed the calorie target

    Returns:
        Daily macro targets (unrounded grams)
    """
    _, needs_muscle_gain = goal_flags(goals)

    daily_calories = adjust_calories_for_goals(calculate_base_calories(profile), goals)

    protein_per_kg = PROTEIN_PER_KG_MUSCLE_GAIN if needs_muscle_gain else PROTEIN_PER_KG_DEFAULT
    protein_grams = resolve_weight(profile) * protein_per_kg
    protein_calories = protein_grams * CALORIES_PER_GRAM_PROTEIN

    fats_calories = daily_calories * FAT_CALORIE_SHARE
    fats_grams = fats_calories / CALORIES_PER_GRAM_FAT

    carbs_calories = daily_calories - protein_calories - fats_calories
    carbs_grams = carbs_calories / CALORIES_PER_GRAM_CARB

    if carbs_grams < 0 and clamp_negative_carbs:
        logger.warning(
            f"Protein and fat exceed the {daily_calories} kcal target; "
            f"clamping carbs from {carbs_grams:.1f}g to 0g"
        )
        carbs_grams = 0.0

    return MacroTargets(
        daily_calories=daily_calories,
        protein_grams=protein_grams,
        fats_grams=fats_grams,
        carbs_grams=carbs_grams,
    )
