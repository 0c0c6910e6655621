"""Daily checklist derivation."""

import logging
from datetime import date
from typing import Iterable, List

from .models import DailyTask, DietPlanEntry, SleepSchedule, TaskType, WorkoutPlanEntry

logger = logging.getLogger(__name__)

HYDRATION_TARGET = "2-3 liters"


def weekday_index(day: date) -> int:
    """Day-of-week index for a date with 0=Sunday, 6=Saturday.

    Python's ``date.weekday()`` counts from Monday, so it is shifted here.
    """
    return day.isoweekday() % 7


def format_hours(hours: float) -> str:
    """Render hours without a trailing ".0" (8.0 -> "8", 8.5 -> "8.5")."""
    return f"{hours:g}"


def generate_daily_tasks(workouts: Iterable[WorkoutPlanEntry],
                         meals: Iterable[DietPlanEntry],
                         sleep: SleepSchedule,
                         today_weekday: int) -> List[DailyTask]:
    """
    Build today's checklist.

    Workouts are filtered to ``today_weekday``; every meal is included
    because meals repeat daily. One hydration and one sleep task close the
    list.

    Args:
        workouts: Weekly workout plan
        meals: Daily meal plan
        sleep: Sleep schedule
        today_weekday: Caller-supplied day index (0=Sunday)

    Returns:
        Workout tasks, meal tasks, hydration task, sleep task
    """
    tasks: List[DailyTask] = []

    for workout in workouts:
        if workout.day_of_week != today_weekday:
            continue
        tasks.append(DailyTask(
            task_type=TaskType.WORKOUT,
            title=workout.title,
            description=workout.description,
            target_value=f"{workout.duration_minutes} minutes",
        ))

    for meal in meals:
        tasks.append(DailyTask(
            task_type=TaskType.MEAL,
            title=meal.meal_name,
            description=f"{meal.meal_type.value} - {meal.suggested_time}",
            target_value=f"{meal.calories} calories",
        ))

    tasks.append(DailyTask(
        task_type=TaskType.HYDRATION,
        title="Daily Water Intake",
        description="Stay hydrated throughout the day",
        target_value=HYDRATION_TARGET,
    ))

    tasks.append(DailyTask(
        task_type=TaskType.SLEEP,
        title="Sleep Schedule",
        description=f"Bedtime: {sleep.bedtime}, Wake: {sleep.wake_time}",
        target_value=f"{format_hours(sleep.target_hours)} hours",
    ))

    logger.debug(f"Derived {len(tasks)} tasks for weekday {today_weekday}")
    return tasks
