"""
Input validation for onboarding and profile updates.

The plan engine accepts anything and falls back to defaults; these checks
run before it, mirroring what the onboarding form requires.
"""

from typing import Iterable, List, Optional

from .engine.models import ExerciseLocation, Goal, Profile


class ProfileValidationError(ValueError):
    """Raised when profile or selection input is not acceptable."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _profile_errors(profile: Profile) -> List[str]:
    errors = []

    if profile.age is None:
        errors.append("age is required")
    elif isinstance(profile.age, bool) or not isinstance(profile.age, int):
        errors.append("age must be a whole number")
    elif profile.age <= 0:
        errors.append("age must be positive")

    for name in ("height", "current_weight", "target_weight"):
        value = getattr(profile, name)
        if value is None:
            errors.append(f"{name} is required")
        elif value <= 0:
            errors.append(f"{name} must be positive")

    return errors


def _selection_errors(goals: Optional[Iterable],
                      conditions: Optional[Iterable],
                      locations: Optional[Iterable],
                      require_all: bool) -> List[str]:
    errors = []
    goals = list(goals or [])
    conditions = list(conditions or [])
    locations = list(locations or [])

    parsed_goals = []
    for goal in goals:
        try:
            parsed_goals.append(Goal(goal))
        except ValueError:
            errors.append(f"unknown goal '{goal}'")

    for location in locations:
        try:
            ExerciseLocation(location)
        except ValueError:
            errors.append(f"unknown exercise location '{location}'")

    if Goal.BOTH in parsed_goals and len(set(parsed_goals)) > 1:
        errors.append("'both' cannot be combined with other goals")

    if require_all:
        if not goals:
            errors.append("select at least one goal")
        if not conditions:
            errors.append("select at least one medical condition (or 'none')")
        if not locations:
            errors.append("select at least one exercise location")

    return errors


def validate_profile(profile: Profile) -> Profile:
    """Check required biometric fields; returns the profile unchanged."""
    errors = _profile_errors(profile)
    if errors:
        raise ProfileValidationError(errors)
    return profile


def validate_selections(goals: Optional[Iterable],
                        conditions: Optional[Iterable],
                        locations: Optional[Iterable],
                        require_all: bool = True) -> None:
    errors = _selection_errors(goals, conditions, locations, require_all)
    if errors:
        raise ProfileValidationError(errors)


def validate_onboarding(profile: Profile,
                        goals: Optional[Iterable],
                        conditions: Optional[Iterable],
                        locations: Optional[Iterable],
                        require_all: bool = True) -> None:
    """Run profile and selection checks, reporting every problem at once."""
    errors = _profile_errors(profile) + _selection_errors(goals, conditions, locations, require_all)
    if errors:
        raise ProfileValidationError(errors)
