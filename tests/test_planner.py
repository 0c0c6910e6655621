"""Tests for the plan bundle and progress summaries."""

import json
from datetime import date

import pytest
from fitness_planner.engine.models import (
    DailyTask,
    ExerciseLocation,
    Gender,
    Goal,
    Profile,
    TaskType,
    WeightLogEntry,
)
from fitness_planner.engine.planner import generate_fitness_plan
from fitness_planner.engine.progress import (
    completion_rate,
    describe_goals,
    group_tasks_by_type,
    summarize_weight_logs,
)


class TestFitnessPlan:
    """Test the one-call plan generation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profile = Profile(age=35, height=172, current_weight=88, target_weight=78, gender="male")

    def test_bundle_contents(self):
        """Test the bundle contains every generator's output."""
        plan = generate_fitness_plan(self.profile, ["both"], ["asthma"], ["gym"], today_weekday=1)

        assert len(plan.workouts) == 10
        assert len(plan.meals) == 5
        assert plan.sleep.target_hours == 8.5
        # Monday: cardio + upper body strength, 5 meals, hydration, sleep
        assert len(plan.tasks) == 2 + 5 + 1 + 1
        assert plan.goals == (Goal.BOTH,)
        assert plan.locations == (ExerciseLocation.GYM,)
        assert plan.conditions == ("asthma",)

    def test_inputs_are_deduplicated(self):
        plan = generate_fitness_plan(self.profile, ["weight_loss", "weight_loss"], [], ["home", "home"], 0)

        assert plan.goals == (Goal.WEIGHT_LOSS,)
        assert plan.locations == (ExerciseLocation.HOME,)

    def test_to_dict_is_json_serializable(self):
        plan = generate_fitness_plan(self.profile, ["muscle_gain"], [], ["outdoors"], today_weekday=5)
        data = json.loads(json.dumps(plan.to_dict()))

        assert data["goals"] == ["muscle_gain"]
        assert data["profile"]["gender"] == "male"
        assert data["sleep"]["bedtime"] == "10:00 PM"
        assert data["tasks"][0]["task_type"] == "workout"
        assert data["today_weekday"] == 5

    def test_empty_inputs(self):
        plan = generate_fitness_plan(None, None, None, None, today_weekday=6)

        assert len(plan.workouts) == 2
        assert plan.tasks[0].title == "Active Recovery & Flexibility"

    def test_idempotent(self):
        args = (self.profile, ["weight_loss"], ["asthma"], ["home"], 3)
        assert generate_fitness_plan(*args) == generate_fitness_plan(*args)


class TestProgress:
    """Test completion and weight summaries."""

    def test_completion_rate(self):
        tasks = [
            DailyTask(TaskType.MEAL, "Breakfast", "", "500 calories", is_completed=True),
            DailyTask(TaskType.MEAL, "Lunch", "", "600 calories"),
            DailyTask(TaskType.HYDRATION, "Water", "", "2-3 liters", is_completed=True),
        ]
        assert completion_rate(tasks) == 67

    def test_completion_rate_empty(self):
        assert completion_rate([]) == 0

    def test_completion_rate_rounds_half_up(self):
        tasks = [DailyTask(TaskType.MEAL, str(i), "", "", is_completed=i < 1) for i in range(8)]
        assert completion_rate(tasks) == 13  # 12.5%

    def test_group_tasks_by_type(self):
        plan = generate_fitness_plan(Profile(), ["weight_loss"], [], [], today_weekday=2)
        grouped = group_tasks_by_type(plan.tasks)

        assert list(grouped) == [TaskType.WORKOUT, TaskType.MEAL, TaskType.HYDRATION, TaskType.SLEEP]
        assert len(grouped[TaskType.MEAL]) == 5

    def test_weight_summary(self):
        """Test logs are ordered by date before computing change."""
        logs = [
            WeightLogEntry(date(2024, 3, 1), 84.0),
            WeightLogEntry(date(2024, 1, 1), 88.0, notes="start"),
            WeightLogEntry(date(2024, 2, 1), 86.5),
        ]
        progress = summarize_weight_logs(logs, target_weight=78)

        assert progress.start_weight == 88.0
        assert progress.current_weight == 84.0
        assert progress.weight_change == pytest.approx(-4.0)
        assert progress.remaining_to_target == pytest.approx(6.0)
        assert progress.entries == 3

    def test_weight_summary_without_target(self):
        progress = summarize_weight_logs([WeightLogEntry(date(2024, 1, 1), 70.0)])

        assert progress.weight_change == 0
        assert progress.remaining_to_target is None

    def test_weight_summary_empty(self):
        assert summarize_weight_logs([]) is None

    def test_weight_log_from_dict(self):
        entry = WeightLogEntry.from_dict({"log_date": "2024-05-02", "weight": "71.3"})
        assert entry.log_date == date(2024, 5, 2)
        assert entry.weight == 71.3

    def test_describe_goals(self):
        assert describe_goals([]) == "No goals set"
        assert describe_goals(["both"]) == "Weight Loss & Muscle Gain"
        assert describe_goals(["weight_loss", "muscle_gain"]) == "Weight Loss, Muscle Gain"


class TestProfile:
    """Test profile construction and serialization."""

    def test_string_gender_is_normalized(self):
        """Test plain-string genders are stored as the enum."""
        assert Profile(gender="male").gender is Gender.MALE
        assert Profile(gender="Female").gender is Gender.FEMALE
        assert Profile(gender="").gender is None

    def test_unknown_gender_rejected(self):
        with pytest.raises(ValueError):
            Profile(gender="robot")

    def test_plan_with_string_gender_serializes(self):
        """Test a plan built from a plain-string gender converts to JSON."""
        profile = Profile(age=30, height=180, current_weight=80, gender="male")
        data = generate_fitness_plan(profile, ["both"], [], ["gym"], today_weekday=3).to_dict()

        assert json.loads(json.dumps(data))["profile"]["gender"] == "male"

    def test_from_dict_accepts_whole_float_age(self):
        profile = Profile.from_dict({"age": 30.0, "height": "170", "gender": "OTHER"})

        assert profile.age == 30
        assert isinstance(profile.age, int)
        assert profile.gender is Gender.OTHER

    def test_from_dict_rejects_fractional_age(self):
        with pytest.raises(ValueError, match="whole number"):
            Profile.from_dict({"age": 30.5})
