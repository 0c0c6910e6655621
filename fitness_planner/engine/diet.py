"""Daily nutrition plan generation."""

import logging
from types import MappingProxyType
from typing import Iterable, List, Optional

from .calories import calculate_macro_targets, round_half_up
from .models import DietPlanEntry, MealType, Profile

logger = logging.getLogger(__name__)

# Share of the daily target given to each meal:
# (calories, protein, carbs, fats)
MEAL_SHARES = MappingProxyType({
    MealType.BREAKFAST: (0.25, 0.25, 0.30, 0.25),
    MealType.SNACK: (0.10, 0.15, 0.10, 0.15),
    MealType.LUNCH: (0.30, 0.30, 0.35, 0.30),
    MealType.POST_WORKOUT: (0.15, 0.20, 0.15, 0.10),
    MealType.DINNER: (0.20, 0.25, 0.20, 0.25),
})

MEAL_ORDER = (
    MealType.BREAKFAST,
    MealType.SNACK,
    MealType.LUNCH,
    MealType.POST_WORKOUT,
    MealType.DINNER,
)

MEAL_TEMPLATES = MappingProxyType({
    MealType.BREAKFAST: {
        'meal_name': "High-Protein Breakfast",
        'description': "Balanced meal to start your day with energy",
        'suggested_time': "7:00 AM",
        'foods': (
            "3 whole eggs or egg whites",
            "Oatmeal with berries",
            "Greek yogurt",
            "Green tea or black coffee",
        ),
    },
    MealType.SNACK: {
        'meal_name': "Mid-Morning Snack",
        'description': "Light snack to maintain energy",
        'suggested_time': "10:00 AM",
        'foods': ("Protein shake or bar", "Apple or banana", "Handful of almonds"),
    },
    MealType.LUNCH: {
        'meal_name': "Balanced Lunch",
        'description': "Nutrient-dense meal for sustained energy",
        'suggested_time': "1:00 PM",
        'foods': (
            "Grilled chicken breast (150g)",
            "Brown rice or quinoa (1 cup)",
            "Mixed vegetables",
            "Olive oil dressing",
        ),
    },
    MealType.POST_WORKOUT: {
        'meal_name': "Post-Workout Nutrition",
        'description': "Recovery meal after training",
        'suggested_time': "30 minutes after workout",
        'foods': ("Protein shake", "Banana", "Rice cakes with peanut butter"),
    },
    MealType.DINNER: {
        'meal_name': "Light Dinner",
        'description': "Protein-rich dinner with vegetables",
        'suggested_time': "7:00 PM",
        'foods': (
            "Salmon or lean beef (150g)",
            "Sweet potato or whole grain pasta",
            "Steamed broccoli and spinach",
            "Avocado",
        ),
    },
})


def generate_diet_plan(profile: Optional[Profile],
                       goals: Optional[Iterable],
                       clamp_negative_carbs: bool = True) -> List[DietPlanEntry]:
    """
    Generate the fixed five-meal daily plan scaled to the user's targets.

    Args:
        profile: User profile; missing fields use calculator defaults
        goals: Goal values
        clamp_negative_carbs: Floor carb grams at zero for extreme inputs

    Returns:
        Breakfast, snack, lunch, post-workout and dinner entries
    """
    targets = calculate_macro_targets(profile or Profile(), goals, clamp_negative_carbs)

    meals = []
    for meal_type in MEAL_ORDER:
        calorie_share, protein_share, carb_share, fat_share = MEAL_SHARES[meal_type]
        template = MEAL_TEMPLATES[meal_type]

        meals.append(DietPlanEntry(
            meal_type=meal_type,
            meal_name=template['meal_name'],
            description=template['description'],
            suggested_time=template['suggested_time'],
            calories=round_half_up(targets.daily_calories * calorie_share),
            protein_grams=round_half_up(targets.protein_grams * protein_share),
            carbs_grams=round_half_up(targets.carbs_grams * carb_share),
            fats_grams=round_half_up(targets.fats_grams * fat_share),
            foods=template['foods'],
        ))

    logger.debug(f"Generated diet plan for {targets.daily_calories} kcal/day")
    return meals
