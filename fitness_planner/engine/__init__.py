"""Plan-generation engine: workouts, nutrition, sleep and daily tasks."""

from .calories import calculate_base_calories, calculate_bmr, calculate_macro_targets
from .diet import generate_diet_plan
from .models import (
    DailyTask,
    DietPlanEntry,
    ExerciseLocation,
    FitnessPlan,
    Gender,
    Goal,
    Profile,
    SleepSchedule,
    WorkoutPlanEntry,
)
from .planner import generate_fitness_plan
from .sleep import generate_sleep_schedule
from .tasks import generate_daily_tasks, weekday_index
from .workouts import generate_workout_plan

__all__ = [
    "calculate_base_calories",
    "calculate_bmr",
    "calculate_macro_targets",
    "generate_diet_plan",
    "generate_workout_plan",
    "generate_sleep_schedule",
    "generate_daily_tasks",
    "generate_fitness_plan",
    "weekday_index",
    "DailyTask",
    "DietPlanEntry",
    "ExerciseLocation",
    "FitnessPlan",
    "Gender",
    "Goal",
    "Profile",
    "SleepSchedule",
    "WorkoutPlanEntry",
]
