"""Tests for sleep schedules and daily task derivation."""

from datetime import date

import pytest
from fitness_planner.engine.diet import generate_diet_plan
from fitness_planner.engine.models import Profile, SleepSchedule, TaskType
from fitness_planner.engine.sleep import generate_sleep_schedule
from fitness_planner.engine.tasks import format_hours, generate_daily_tasks, weekday_index
from fitness_planner.engine.workouts import generate_workout_plan


class TestSleepSchedule:
    """Test the sleep generator."""

    def test_weight_loss_schedule(self):
        schedule = generate_sleep_schedule(["weight_loss"])
        assert schedule == SleepSchedule(bedtime="10:30 PM", wake_time="6:30 AM", target_hours=8)

    def test_muscle_gain_schedule(self):
        schedule = generate_sleep_schedule(["muscle_gain"])
        assert schedule == SleepSchedule(bedtime="10:00 PM", wake_time="6:30 AM", target_hours=8.5)

    def test_both_counts_as_muscle_gain(self):
        assert generate_sleep_schedule(["both"]).target_hours == 8.5

    def test_no_goals(self):
        assert generate_sleep_schedule([]).bedtime == "10:30 PM"
        assert generate_sleep_schedule(None).target_hours == 8


class TestDailyTasks:
    """Test the daily checklist."""

    def setup_method(self):
        """Set up test fixtures."""
        profile = Profile(age=28, height=165, current_weight=60, gender="female")
        self.goals = ["muscle_gain"]
        self.workouts = generate_workout_plan(profile, self.goals, [], ["home"])
        self.meals = generate_diet_plan(profile, self.goals)
        self.sleep = generate_sleep_schedule(self.goals)

    def test_single_workout_day(self):
        """Test one matching workout gives 1 + meals + hydration + sleep tasks."""
        tasks = generate_daily_tasks(self.workouts, self.meals, self.sleep, today_weekday=3)

        assert len(tasks) == 1 + len(self.meals) + 1 + 1
        assert all(task.is_completed is False for task in tasks)

    def test_task_order_and_content(self):
        """Test workouts first, then meals, then hydration and sleep."""
        tasks = generate_daily_tasks(self.workouts, self.meals, self.sleep, today_weekday=3)

        assert [t.task_type for t in tasks] == (
            [TaskType.WORKOUT] + [TaskType.MEAL] * 5 + [TaskType.HYDRATION, TaskType.SLEEP]
        )

        workout = tasks[0]
        assert workout.title == "Strength Training - Lower Body"
        assert workout.target_value == "45 minutes"

        breakfast = tasks[1]
        assert breakfast.title == "High-Protein Breakfast"
        assert breakfast.description == "breakfast - 7:00 AM"
        assert breakfast.target_value == f"{self.meals[0].calories} calories"

        hydration, sleep = tasks[-2], tasks[-1]
        assert hydration.title == "Daily Water Intake"
        assert hydration.target_value == "2-3 liters"
        assert sleep.description == "Bedtime: 10:00 PM, Wake: 6:30 AM"
        assert sleep.target_value == "8.5 hours"

    def test_rest_day_has_no_workout_tasks(self):
        """Test a day without strength sessions still gets meals and reminders."""
        tasks = generate_daily_tasks(self.workouts, self.meals, self.sleep, today_weekday=2)

        assert TaskType.WORKOUT not in {t.task_type for t in tasks}
        assert len(tasks) == 7

    def test_multiple_workouts_same_day(self):
        """Test every workout on the day is listed in plan order."""
        workouts = generate_workout_plan(Profile(), ["both"], [], [])
        tasks = generate_daily_tasks(workouts, self.meals, self.sleep, today_weekday=1)

        workout_tasks = [t for t in tasks if t.task_type == TaskType.WORKOUT]
        assert [t.title for t in workout_tasks] == [
            "Cardio Session - Day 1",
            "Strength Training - Upper Body",
        ]
        assert workout_tasks[0].target_value == "30 minutes"

    def test_whole_hours_formatted_without_decimal(self):
        tasks = generate_daily_tasks([], [], generate_sleep_schedule([]), today_weekday=0)

        assert len(tasks) == 2
        assert tasks[-1].target_value == "8 hours"

    def test_idempotent(self):
        first = generate_daily_tasks(self.workouts, self.meals, self.sleep, 5)
        second = generate_daily_tasks(self.workouts, self.meals, self.sleep, 5)
        assert first == second


class TestWeekdayIndex:
    """Test date to day-index conversion."""

    @pytest.mark.parametrize("day, expected", [
        (date(2023, 12, 31), 0),  # Sunday
        (date(2024, 1, 1), 1),    # Monday
        (date(2024, 1, 3), 3),    # Wednesday
        (date(2024, 1, 6), 6),    # Saturday
    ])
    def test_sunday_is_zero(self, day, expected):
        assert weekday_index(day) == expected

    def test_format_hours(self):
        assert format_hours(8.0) == "8"
        assert format_hours(8.5) == "8.5"
