"""One-call plan generation for onboarding and profile updates."""

import logging
from typing import Iterable, Optional

from .diet import generate_diet_plan
from .models import (
    FitnessPlan,
    Profile,
    coerce_conditions,
    coerce_goals,
    coerce_locations,
)
from .sleep import generate_sleep_schedule
from .tasks import generate_daily_tasks
from .workouts import generate_workout_plan

logger = logging.getLogger(__name__)


def generate_fitness_plan(profile: Optional[Profile],
                          goals: Optional[Iterable],
                          conditions: Optional[Iterable],
                          locations: Optional[Iterable],
                          today_weekday: int,
                          clamp_negative_carbs: bool = True) -> FitnessPlan:
    """
    Run every generator and bundle the results.

    Args:
        profile: User profile
        goals: Goal values
        conditions: Medical condition tags
        locations: Exercise locations
        today_weekday: Day index (0=Sunday) used for today's checklist
        clamp_negative_carbs: Carb policy passed to the diet generator

    Returns:
        Complete plan with workouts, meals, sleep schedule and today's tasks
    """
    profile = profile or Profile()
    goals = coerce_goals(goals)
    conditions = coerce_conditions(conditions)
    locations = coerce_locations(locations)

    workouts = generate_workout_plan(profile, goals, conditions, locations)
    meals = generate_diet_plan(profile, goals, clamp_negative_carbs)
    sleep = generate_sleep_schedule(goals)
    tasks = generate_daily_tasks(workouts, meals, sleep, today_weekday)

    logger.info(
        f"Generated plan: {len(workouts)} workouts, {len(meals)} meals, "
        f"{len(tasks)} tasks for weekday {today_weekday}"
    )

    return FitnessPlan(
        profile=profile,
        goals=goals,
        conditions=conditions,
        locations=locations,
        workouts=tuple(workouts),
        meals=tuple(meals),
        sleep=sleep,
        today_weekday=today_weekday,
        tasks=tuple(tasks),
    )
