"""Tests for daily nutrition plan generation."""

import pytest
from fitness_planner.engine.calories import calculate_macro_targets
from fitness_planner.engine.diet import MEAL_SHARES, generate_diet_plan
from fitness_planner.engine.models import Gender, MealType, Profile


class TestMealShares:
    """Test the per-meal percentage table."""

    def test_column_totals(self):
        """Test calories split exactly while macro shares over-allocate."""
        totals = [sum(shares[column] for shares in MEAL_SHARES.values()) for column in range(4)]

        assert totals[0] == pytest.approx(1.0)
        assert totals[1] == pytest.approx(1.15)  # protein
        assert totals[2] == pytest.approx(1.10)  # carbs
        assert totals[3] == pytest.approx(1.05)  # fats

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MEAL_SHARES[MealType.SNACK] = (0.5, 0.5, 0.5, 0.5)


class TestDietPlan:
    """Test the diet generator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profile = Profile(age=30, height=180, current_weight=80, target_weight=72, gender=Gender.MALE)

    def test_fixed_meal_order(self):
        """Test exactly five meals in the fixed order."""
        meals = generate_diet_plan(self.profile, ["weight_loss"])

        assert [m.meal_type for m in meals] == [
            MealType.BREAKFAST,
            MealType.SNACK,
            MealType.LUNCH,
            MealType.POST_WORKOUT,
            MealType.DINNER,
        ]

    def test_breakfast_values(self):
        """Test per-field rounding of the breakfast share."""
        breakfast = generate_diet_plan(self.profile, ["weight_loss"])[0]

        # 2259 kcal target, 128g protein, 62.75g fat, 295.5625g carbs
        assert breakfast.calories == 565
        assert breakfast.protein_grams == 32
        assert breakfast.carbs_grams == 89
        assert breakfast.fats_grams == 16
        assert breakfast.meal_name == "High-Protein Breakfast"
        assert breakfast.suggested_time == "7:00 AM"
        assert breakfast.foods[0] == "3 whole eggs or egg whites"

    def test_post_workout_content(self):
        post_workout = generate_diet_plan(self.profile, [])[3]

        assert post_workout.meal_type == MealType.POST_WORKOUT
        assert post_workout.suggested_time == "30 minutes after workout"
        assert post_workout.foods == ("Protein shake", "Banana", "Rice cakes with peanut butter")

    @pytest.mark.parametrize("goals", [[], ["weight_loss"], ["muscle_gain"], ["both"]])
    def test_calorie_total_within_rounding(self, goals):
        """Test meal calories add up to the daily target within rounding drift."""
        meals = generate_diet_plan(self.profile, goals)
        target = calculate_macro_targets(self.profile, goals).daily_calories

        assert len(meals) == 5
        assert abs(sum(m.calories for m in meals) - target) <= 3

    def test_content_independent_of_profile(self):
        """Test names, foods and times do not depend on the profile."""
        light = generate_diet_plan(Profile(current_weight=50), [])
        heavy = generate_diet_plan(Profile(current_weight=120), [])

        for a, b in zip(light, heavy):
            assert (a.meal_name, a.description, a.suggested_time, a.foods) == \
                (b.meal_name, b.description, b.suggested_time, b.foods)
            assert a.calories < b.calories

    def test_missing_profile_uses_defaults(self):
        assert generate_diet_plan(None, []) == generate_diet_plan(Profile(), [])

    def test_negative_carbs_clamped_by_default(self):
        profile = Profile(age=120, height=1, current_weight=100, gender=Gender.FEMALE)
        meals = generate_diet_plan(profile, ["muscle_gain"])

        assert all(m.carbs_grams == 0 for m in meals)

    def test_negative_carbs_when_clamping_disabled(self):
        profile = Profile(age=120, height=1, current_weight=100, gender=Gender.FEMALE)
        meals = generate_diet_plan(profile, ["muscle_gain"], clamp_negative_carbs=False)

        assert all(m.carbs_grams < 0 for m in meals)
        assert meals[0].carbs_grams == -22  # -72.5 * 0.30 = -21.75

    def test_idempotent(self):
        assert generate_diet_plan(self.profile, ["both"]) == generate_diet_plan(self.profile, ["both"])
