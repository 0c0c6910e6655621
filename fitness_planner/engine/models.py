"""Domain models for generated fitness plans."""

from enum import Enum
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, Optional, Tuple, Any


class Gender(str, Enum):
    """Gender branch used by the BMR formula."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    """Fitness goal selected by the user."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    BOTH = "both"


class ExerciseLocation(str, Enum):
    """Where the user is able to train."""
    GYM = "gym"
    HOME = "home"
    OUTDOORS = "outdoors"


class ExerciseType(str, Enum):
    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    MIXED = "mixed"


class Intensity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    POST_WORKOUT = "post_workout"


class TaskType(str, Enum):
    WORKOUT = "workout"
    MEAL = "meal"
    HYDRATION = "hydration"
    SLEEP = "sleep"


ASTHMA = "asthma"  # only medical condition tag with rules attached


@dataclass(frozen=True)
class Profile:
    """Biometric profile supplied by the caller.

    Every field is optional; the calorie calculator substitutes its own
    default for each missing value independently.
    """
    age: Optional[int] = None
    height: Optional[float] = None           # cm
    current_weight: Optional[float] = None   # kg
    target_weight: Optional[float] = None    # kg
    gender: Optional[Gender] = None

    def __post_init__(self):
        if not self.gender:
            object.__setattr__(self, "gender", None)
        elif not isinstance(self.gender, Gender):
            object.__setattr__(self, "gender", Gender(str(self.gender).lower()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """Build a profile from a loosely typed mapping (JSON, CLI input)."""
        def number(key, cast):
            value = data.get(key)
            if value is None or value == "":
                return None
            return cast(value)

        age = number("age", float)
        if age is not None:
            if not age.is_integer():
                raise ValueError(f"age must be a whole number, got {data['age']!r}")
            age = int(age)
        return cls(
            age=age,
            height=number("height", float),
            current_weight=number("current_weight", float),
            target_weight=number("target_weight", float),
            gender=data.get("gender") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'age': self.age,
            'height': self.height,
            'current_weight': self.current_weight,
            'target_weight': self.target_weight,
            'gender': self.gender.value if self.gender else None,
        }


@dataclass(frozen=True)
class WorkoutPlanEntry:
    """One workout on a given day of the week (0=Sunday)."""
    title: str
    description: str
    exercise_type: ExerciseType
    duration_minutes: int
    intensity: Intensity
    equipment_needed: Tuple[str, ...]
    instructions: Tuple[str, ...]
    day_of_week: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'title': self.title,
            'description': self.description,
            'exercise_type': self.exercise_type.value,
            'duration_minutes': self.duration_minutes,
            'intensity': self.intensity.value,
            'equipment_needed': list(self.equipment_needed),
            'instructions': list(self.instructions),
            'day_of_week': self.day_of_week,
        }


@dataclass(frozen=True)
class DietPlanEntry:
    """One meal of the daily nutrition plan."""
    meal_type: MealType
    meal_name: str
    description: str
    suggested_time: str
    calories: int
    protein_grams: int
    carbs_grams: int
    fats_grams: int
    foods: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'meal_type': self.meal_type.value,
            'meal_name': self.meal_name,
            'description': self.description,
            'suggested_time': self.suggested_time,
            'calories': self.calories,
            'protein_grams': self.protein_grams,
            'carbs_grams': self.carbs_grams,
            'fats_grams': self.fats_grams,
            'foods': list(self.foods),
        }


@dataclass(frozen=True)
class SleepSchedule:
    bedtime: str
    wake_time: str
    target_hours: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bedtime': self.bedtime,
            'wake_time': self.wake_time,
            'target_hours': self.target_hours,
        }


@dataclass(frozen=True)
class DailyTask:
    """Checklist item derived for a single day."""
    task_type: TaskType
    title: str
    description: str
    target_value: str
    is_completed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyTask":
        return cls(
            task_type=TaskType(data["task_type"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            target_value=data.get("target_value", ""),
            is_completed=bool(data.get("is_completed", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'task_type': self.task_type.value,
            'title': self.title,
            'description': self.description,
            'target_value': self.target_value,
            'is_completed': self.is_completed,
        }


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie target and macro grams before the per-meal split."""
    daily_calories: int
    protein_grams: float
    fats_grams: float
    carbs_grams: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'daily_calories': self.daily_calories,
            'protein_grams': round(self.protein_grams, 1),
            'fats_grams': round(self.fats_grams, 1),
            'carbs_grams': round(self.carbs_grams, 1),
        }


@dataclass(frozen=True)
class WeightLogEntry:
    log_date: date
    weight: float
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightLogEntry":
        log_date = data["log_date"]
        if isinstance(log_date, str):
            log_date = date.fromisoformat(log_date)
        return cls(log_date=log_date, weight=float(data["weight"]), notes=data.get("notes"))


@dataclass(frozen=True)
class WeightProgress:
    """Weight statistics over a series of log entries."""
    start_weight: float
    current_weight: float
    weight_change: float
    target_weight: Optional[float] = None
    remaining_to_target: Optional[float] = None
    entries: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start_weight': self.start_weight,
            'current_weight': self.current_weight,
            'weight_change': round(self.weight_change, 1),
            'target_weight': self.target_weight,
            'remaining_to_target': (
                round(self.remaining_to_target, 1) if self.remaining_to_target is not None else None
            ),
            'entries': self.entries,
        }


@dataclass(frozen=True)
class FitnessPlan:
    """Everything generated for one onboarding or profile update."""
    profile: Profile
    goals: Tuple[Goal, ...]
    conditions: Tuple[str, ...]
    locations: Tuple[ExerciseLocation, ...]
    workouts: Tuple[WorkoutPlanEntry, ...]
    meals: Tuple[DietPlanEntry, ...]
    sleep: SleepSchedule
    today_weekday: int
    tasks: Tuple[DailyTask, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'profile': self.profile.to_dict(),
            'goals': [g.value for g in self.goals],
            'conditions': list(self.conditions),
            'locations': [loc.value for loc in self.locations],
            'workouts': [w.to_dict() for w in self.workouts],
            'meals': [m.to_dict() for m in self.meals],
            'sleep': self.sleep.to_dict(),
            'today_weekday': self.today_weekday,
            'tasks': [t.to_dict() for t in self.tasks],
        }


def coerce_goals(goals: Optional[Iterable]) -> Tuple[Goal, ...]:
    """Normalize goal values (enum members or strings) preserving order, without duplicates."""
    result = []
    for goal in goals or ():
        goal = Goal(goal)
        if goal not in result:
            result.append(goal)
    return tuple(result)


def coerce_locations(locations: Optional[Iterable]) -> Tuple[ExerciseLocation, ...]:
    result = []
    for location in locations or ():
        location = ExerciseLocation(location)
        if location not in result:
            result.append(location)
    return tuple(result)


def coerce_conditions(conditions: Optional[Iterable]) -> Tuple[str, ...]:
    result = []
    for condition in conditions or ():
        condition = str(condition)
        if condition not in result:
            result.append(condition)
    return tuple(result)


def goal_flags(goals: Optional[Iterable]) -> Tuple[bool, bool]:
    """Return (needs_weight_loss, needs_muscle_gain) for a goal set.

    "both" turns on both flags.
    """
    goal_set = set(coerce_goals(goals))
    needs_weight_loss = Goal.WEIGHT_LOSS in goal_set or Goal.BOTH in goal_set
    needs_muscle_gain = Goal.MUSCLE_GAIN in goal_set or Goal.BOTH in goal_set
    return needs_weight_loss, needs_muscle_gain


def has_asthma(conditions: Optional[Iterable]) -> bool:
    return ASTHMA in coerce_conditions(conditions)
