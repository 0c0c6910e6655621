"""Sleep schedule recommendation."""

from typing import Iterable, Optional

from .models import SleepSchedule, goal_flags

# Muscle gain gets an earlier bedtime for extra recovery
MUSCLE_GAIN_SLEEP = SleepSchedule(bedtime="10:00 PM", wake_time="6:30 AM", target_hours=8.5)
DEFAULT_SLEEP = SleepSchedule(bedtime="10:30 PM", wake_time="6:30 AM", target_hours=8.0)


def generate_sleep_schedule(goals: Optional[Iterable]) -> SleepSchedule:
    """Pick the sleep schedule for a goal set; nothing else is consulted."""
    _, needs_muscle_gain = goal_flags(goals)
    return MUSCLE_GAIN_SLEEP if needs_muscle_gain else DEFAULT_SLEEP
