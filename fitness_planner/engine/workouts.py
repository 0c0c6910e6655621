"""
Weekly workout plan generation.

Three independent blocks are emitted in a fixed order:
- cardio on weekdays 1-5 when weight loss is a goal
- strength on days 1, 3 and 5 when muscle gain is a goal
- flexibility/recovery on days 0 and 6, always

Days use 0=Sunday indexing.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import (
    ExerciseLocation,
    ExerciseType,
    Intensity,
    Profile,
    WorkoutPlanEntry,
    coerce_locations,
    goal_flags,
    has_asthma,
)

logger = logging.getLogger(__name__)

CARDIO_DAYS = (1, 2, 3, 4, 5)
CARDIO_DURATION = 30
CARDIO_DURATION_ASTHMA = 25

STRENGTH_DAYS = (1, 3, 5)
STRENGTH_FOCUS_AREAS = ("Upper Body", "Lower Body", "Full Body")
STRENGTH_DURATION = 45
REST_INTERVAL = "60-90 seconds"
REST_INTERVAL_ASTHMA = "90-120 seconds"

FLEXIBILITY_DAYS = (0, 6)
FLEXIBILITY_DURATION = 20

CARDIO_EQUIPMENT = {
    ExerciseLocation.GYM: ("Treadmill", "Stationary bike", "Rowing machine"),
    ExerciseLocation.HOME: ("Jump rope", "Resistance bands", "Bodyweight exercises"),
    ExerciseLocation.OUTDOORS: ("Running shoes", "Bicycle"),
}
CARDIO_EQUIPMENT_DEFAULT = ("Bodyweight exercises", "Running shoes")

STRENGTH_EQUIPMENT = {
    ExerciseLocation.GYM: ("Dumbbells", "Barbells", "Cable machines", "Leg press", "Bench"),
    ExerciseLocation.HOME: ("Dumbbells", "Resistance bands", "Pull-up bar", "Bodyweight"),
    ExerciseLocation.OUTDOORS: ("Resistance bands", "Bodyweight exercises"),
}
STRENGTH_EQUIPMENT_DEFAULT = ("Bodyweight exercises", "Resistance bands")

# Equipment lists are concatenated in this order regardless of input order
LOCATION_ORDER = (ExerciseLocation.GYM, ExerciseLocation.HOME, ExerciseLocation.OUTDOORS)

CARDIO_INSTRUCTIONS = (
    "5-minute warm-up",
    "20-25 minutes steady cardio (running, cycling, or rowing)",
    "5-minute cool-down",
)
CARDIO_INSTRUCTIONS_ASTHMA = (
    "5-minute warm-up with light walking",
    "Deep breathing exercises",
    "15-20 minutes moderate intensity (brisk walking or light cycling)",
    "Take breaks if needed",
    "5-minute cool-down with stretching",
)

# "{rest}" is replaced with the rest interval for the session
STRENGTH_INSTRUCTIONS = {
    "Upper Body": (
        "5-minute warm-up",
        "Push-ups or Bench Press: 3 sets of 8-12 reps",
        "Rows or Pull-ups: 3 sets of 8-12 reps",
        "Shoulder Press: 3 sets of 8-12 reps",
        "Bicep Curls: 3 sets of 10-15 reps",
        "Tricep Extensions: 3 sets of 10-15 reps",
        "Rest {rest} between sets",
        "5-minute stretching",
    ),
    "Lower Body": (
        "5-minute warm-up",
        "Squats: 3 sets of 10-15 reps",
        "Lunges: 3 sets of 10 reps per leg",
        "Leg Press or Step-ups: 3 sets of 12-15 reps",
        "Calf Raises: 3 sets of 15-20 reps",
        "Rest {rest} between sets",
        "5-minute stretching",
    ),
    "Full Body": (
        "5-minute warm-up",
        "Squats: 3 sets of 10-12 reps",
        "Push-ups: 3 sets of 8-12 reps",
        "Bent-over Rows: 3 sets of 10-12 reps",
        "Plank: 3 sets of 30-60 seconds",
        "Lunges: 2 sets of 10 reps per leg",
        "Rest {rest} between sets",
        "5-minute stretching",
    ),
}

FLEXIBILITY_INSTRUCTIONS = (
    "5-minute light walking",
    "Full body stretching routine",
    "Deep breathing exercises",
    "Foam rolling if available",
)


def _collect_equipment(locations: Sequence[ExerciseLocation], table, default) -> Tuple[str, ...]:
    equipment: List[str] = []
    for location in LOCATION_ORDER:
        if location in locations:
            equipment.extend(table[location])
    return tuple(equipment) if equipment else default


def get_cardio_equipment(locations: Optional[Iterable]) -> Tuple[str, ...]:
    """Cardio equipment for the selected locations."""
    return _collect_equipment(coerce_locations(locations), CARDIO_EQUIPMENT, CARDIO_EQUIPMENT_DEFAULT)


def get_strength_equipment(locations: Optional[Iterable]) -> Tuple[str, ...]:
    """Strength equipment for the selected locations."""
    return _collect_equipment(coerce_locations(locations), STRENGTH_EQUIPMENT, STRENGTH_EQUIPMENT_DEFAULT)


def get_strength_instructions(focus: str, asthma: bool) -> Tuple[str, ...]:
    """Exercise script for a strength focus area with the rest interval filled in."""
    rest = REST_INTERVAL_ASTHMA if asthma else REST_INTERVAL
    return tuple(step.format(rest=rest) for step in STRENGTH_INSTRUCTIONS[focus])


def _cardio_block(asthma: bool, equipment: Tuple[str, ...]) -> List[WorkoutPlanEntry]:
    if asthma:
        description = "Moderate intensity cardio with breathing focus. Start with 5-minute warm-up."
        instructions = CARDIO_INSTRUCTIONS_ASTHMA
    else:
        description = "Steady-state cardio for fat burning and cardiovascular health."
        instructions = CARDIO_INSTRUCTIONS

    return [
        WorkoutPlanEntry(
            title=f"Cardio Session - Day {day}",
            description=description,
            exercise_type=ExerciseType.CARDIO,
            duration_minutes=CARDIO_DURATION_ASTHMA if asthma else CARDIO_DURATION,
            intensity=Intensity.MODERATE,
            equipment_needed=equipment,
            instructions=instructions,
            day_of_week=day,
        )
        for day in CARDIO_DAYS
    ]


def _strength_block(asthma: bool, equipment: Tuple[str, ...]) -> List[WorkoutPlanEntry]:
    if asthma:
        description = "Resistance training with extended rest periods. Focus on controlled breathing."
    else:
        description = "Progressive resistance training to build muscle mass and strength."

    return [
        WorkoutPlanEntry(
            title=f"Strength Training - {focus}",
            description=description,
            exercise_type=ExerciseType.STRENGTH,
            duration_minutes=STRENGTH_DURATION,
            intensity=Intensity.MODERATE if asthma else Intensity.HIGH,
            equipment_needed=equipment,
            instructions=get_strength_instructions(focus, asthma),
            day_of_week=day,
        )
        for day, focus in zip(STRENGTH_DAYS, STRENGTH_FOCUS_AREAS)
    ]


def _flexibility_block() -> List[WorkoutPlanEntry]:
    return [
        WorkoutPlanEntry(
            title="Active Recovery & Flexibility",
            description="Light stretching and mobility work for recovery.",
            exercise_type=ExerciseType.FLEXIBILITY,
            duration_minutes=FLEXIBILITY_DURATION,
            intensity=Intensity.LOW,
            equipment_needed=("Yoga mat",),
            instructions=FLEXIBILITY_INSTRUCTIONS,
            day_of_week=day,
        )
        for day in FLEXIBILITY_DAYS
    ]


def generate_workout_plan(profile: Optional[Profile],
                          goals: Optional[Iterable],
                          conditions: Optional[Iterable],
                          locations: Optional[Iterable]) -> List[WorkoutPlanEntry]:
    """
    Generate the weekly workout plan.

    Args:
        profile: User profile (currently not consulted by any rule)
        goals: Goal values; "both" enables the cardio and strength blocks
        conditions: Medical condition tags; only "asthma" changes the plan
        locations: Exercise locations used to pick equipment

    Returns:
        Cardio entries, then strength entries, then flexibility entries
    """
    needs_weight_loss, needs_muscle_gain = goal_flags(goals)
    asthma = has_asthma(conditions)

    workouts: List[WorkoutPlanEntry] = []

    if needs_weight_loss:
        workouts.extend(_cardio_block(asthma, get_cardio_equipment(locations)))

    if needs_muscle_gain:
        workouts.extend(_strength_block(asthma, get_strength_equipment(locations)))

    workouts.extend(_flexibility_block())

    logger.debug(
        f"Generated {len(workouts)} workouts "
        f"(weight_loss={needs_weight_loss}, muscle_gain={needs_muscle_gain}, asthma={asthma})"
    )
    return workouts
