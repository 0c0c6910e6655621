"""Command-line interface for the fitness planner."""

import json
import logging
import sys
from datetime import date

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

from .config import config
from .engine import (
    Profile,
    calculate_bmr,
    calculate_base_calories,
    calculate_macro_targets,
    generate_daily_tasks,
    generate_diet_plan,
    generate_fitness_plan,
    generate_sleep_schedule,
    generate_workout_plan,
    weekday_index,
)
from .engine.models import DailyTask, ExerciseLocation, Gender, Goal, WeightLogEntry
from .engine.progress import completion_rate, describe_goals, group_tasks_by_type, summarize_weight_logs
from .engine.tasks import format_hours
from .validation import ProfileValidationError, validate_onboarding, validate_selections

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

INTENSITY_STYLES = {
    "high": "red",
    "moderate": "yellow",
    "low": "green",
}


def profile_options(func):
    """Shared profile and selection options."""
    options = [
        click.option("--profile", "profile_file", type=click.Path(exists=True, dir_okay=False),
                     help="JSON file with profile fields, goals, conditions and locations"),
        click.option("--age", type=int, help="Age in years"),
        click.option("--height", type=float, help="Height in cm"),
        click.option("--weight", type=float, help="Current weight in kg"),
        click.option("--target-weight", type=float, help="Target weight in kg"),
        click.option("--gender", type=click.Choice([g.value for g in Gender]), help="Gender"),
        click.option("--goal", "goals", multiple=True, type=click.Choice([g.value for g in Goal]),
                     help="Fitness goal (repeatable)"),
        click.option("--condition", "conditions", multiple=True,
                     help="Medical condition tag, e.g. asthma (repeatable)"),
        click.option("--location", "locations", multiple=True,
                     type=click.Choice([loc.value for loc in ExerciseLocation]),
                     help="Exercise location (repeatable)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def read_json_object(path) -> dict:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__} ({path})")
    return data


def load_inputs(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations):
    """Merge a profile JSON file with command-line options (options win)."""
    data = {}
    if profile_file:
        data = read_json_object(profile_file)

    profile_data = data.get("profile", data)
    if not isinstance(profile_data, dict):
        raise ValueError("profile must be a JSON object")
    profile_data = dict(profile_data)
    overrides = {
        "age": age,
        "height": height,
        "current_weight": weight,
        "target_weight": target_weight,
        "gender": gender,
    }
    profile_data.update({key: value for key, value in overrides.items() if value is not None})
    if not profile_data.get("gender"):
        profile_data["gender"] = config.DEFAULT_GENDER

    profile = Profile.from_dict(profile_data)
    goals = list(goals) or list(data.get("goals", []))
    conditions = list(conditions) or list(data.get("conditions", []))
    locations = list(locations) or list(data.get("locations", []))

    return profile, goals, conditions, locations


def use_json(json_flag: bool) -> bool:
    return json_flag or config.OUTPUT_FORMAT == "json"


def echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


def fail(message: str) -> None:
    console.print(f"[red]❌ {message}[/red]")
    sys.exit(1)


def render_workouts(workouts) -> None:
    table = Table(title="🏋️ Weekly Workout Plan", box=box.ROUNDED)
    table.add_column("Day", style="cyan")
    table.add_column("Workout", style="bold")
    table.add_column("Type")
    table.add_column("Duration", justify="right")
    table.add_column("Intensity")
    table.add_column("Equipment")

    for workout in sorted(workouts, key=lambda w: w.day_of_week):
        intensity = workout.intensity.value
        table.add_row(
            DAY_NAMES[workout.day_of_week],
            workout.title,
            workout.exercise_type.value,
            f"{workout.duration_minutes} min",
            f"[{INTENSITY_STYLES.get(intensity, 'white')}]{intensity}[/]",
            ", ".join(workout.equipment_needed),
        )

    console.print(table)


def render_meals(meals) -> None:
    table = Table(title="🥗 Daily Nutrition Plan", box=box.ROUNDED)
    table.add_column("Meal", style="bold")
    table.add_column("Time", style="cyan")
    table.add_column("kcal", justify="right")
    table.add_column("Protein", justify="right")
    table.add_column("Carbs", justify="right")
    table.add_column("Fats", justify="right")
    table.add_column("Foods")

    for meal in meals:
        table.add_row(
            meal.meal_name,
            meal.suggested_time,
            str(meal.calories),
            f"{meal.protein_grams}g",
            f"{meal.carbs_grams}g",
            f"{meal.fats_grams}g",
            ", ".join(meal.foods),
        )

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]", "",
        str(sum(m.calories for m in meals)),
        f"{sum(m.protein_grams for m in meals)}g",
        f"{sum(m.carbs_grams for m in meals)}g",
        f"{sum(m.fats_grams for m in meals)}g",
        "",
    )

    console.print(table)


def render_sleep(sleep) -> None:
    console.print(Panel(
        f"Bedtime: {sleep.bedtime}\n"
        f"Wake: {sleep.wake_time}\n"
        f"Target: {format_hours(sleep.target_hours)} hours",
        title="😴 Sleep Schedule", style="blue"
    ))


def render_tasks(tasks, today: int) -> None:
    table = Table(title=f"✅ Tasks for {DAY_NAMES[today]}", box=box.ROUNDED)
    table.add_column("", justify="center")
    table.add_column("Type", style="cyan")
    table.add_column("Task", style="bold")
    table.add_column("Details")
    table.add_column("Target", justify="right")

    for task_type, group in group_tasks_by_type(tasks).items():
        for task in group:
            table.add_row(
                "☑" if task.is_completed else "☐",
                task_type.value,
                task.title,
                task.description,
                task.target_value,
            )

    console.print(table)


def resolve_day(day) -> int:
    return day if day is not None else weekday_index(date.today())


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL for this run")
def cli(log_level):
    """Fitness plan generator: workouts, nutrition, sleep and daily tasks."""
    logging.basicConfig(
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger("fitness_planner").setLevel(config.get_log_level(log_level))

    try:
        config.validate()
    except ValueError as e:
        fail(f"Configuration error: {e}")


@cli.command()
@profile_options
@click.option("--day", type=click.IntRange(0, 6), help="Day index for today's tasks (0=Sun, 6=Sat)")
@click.option("--strict", is_flag=True, help="Apply full onboarding validation")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def plan(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations,
         day, strict, as_json):
    """Generate the complete plan: workouts, meals, sleep and today's tasks."""
    try:
        profile, goals, conditions, locations = load_inputs(
            profile_file, age, height, weight, target_weight, gender, goals, conditions, locations
        )
        if strict:
            validate_onboarding(profile, goals, conditions, locations)
        else:
            validate_selections(goals, conditions, locations, require_all=False)

        today = resolve_day(day)
        fitness_plan = generate_fitness_plan(
            profile, goals, conditions, locations, today,
            clamp_negative_carbs=config.CLAMP_NEGATIVE_CARBS,
        )
    except (ProfileValidationError, TypeError, ValueError) as e:
        fail(f"Error: {e}")

    if use_json(as_json):
        echo_json(fitness_plan.to_dict())
        return

    console.print(Panel.fit(f"🎯 Goals: {describe_goals(fitness_plan.goals)}", style="bold blue"))
    render_workouts(fitness_plan.workouts)
    render_meals(fitness_plan.meals)
    render_sleep(fitness_plan.sleep)
    render_tasks(fitness_plan.tasks, today)


@cli.command()
@profile_options
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def workouts(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations, as_json):
    """Show the weekly workout plan."""
    try:
        profile, goals, conditions, locations = load_inputs(
            profile_file, age, height, weight, target_weight, gender, goals, conditions, locations
        )
        validate_selections(goals, conditions, locations, require_all=False)
        entries = generate_workout_plan(profile, goals, conditions, locations)
    except (ProfileValidationError, TypeError, ValueError) as e:
        fail(f"Error: {e}")

    if use_json(as_json):
        echo_json([w.to_dict() for w in entries])
        return

    render_workouts(entries)


@cli.command()
@profile_options
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def diet(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations, as_json):
    """Show the daily nutrition plan."""
    try:
        profile, goals, conditions, locations = load_inputs(
            profile_file, age, height, weight, target_weight, gender, goals, conditions, locations
        )
        validate_selections(goals, conditions, locations, require_all=False)
        meals = generate_diet_plan(profile, goals, clamp_negative_carbs=config.CLAMP_NEGATIVE_CARBS)
    except (ProfileValidationError, TypeError, ValueError) as e:
        fail(f"Error: {e}")

    if use_json(as_json):
        echo_json([m.to_dict() for m in meals])
        return

    render_meals(meals)


@cli.command()
@click.option("--goal", "goals", multiple=True, type=click.Choice([g.value for g in Goal]),
              help="Fitness goal (repeatable)")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def sleep(goals, as_json):
    """Show the recommended sleep schedule."""
    schedule = generate_sleep_schedule(goals)

    if use_json(as_json):
        echo_json(schedule.to_dict())
        return

    render_sleep(schedule)


@cli.command()
@profile_options
@click.option("--day", type=click.IntRange(0, 6), help="Day index (0=Sun, 6=Sat), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def tasks(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations, day, as_json):
    """Show the checklist for one day."""
    try:
        profile, goals, conditions, locations = load_inputs(
            profile_file, age, height, weight, target_weight, gender, goals, conditions, locations
        )
        validate_selections(goals, conditions, locations, require_all=False)
        today = resolve_day(day)
        daily_tasks = generate_daily_tasks(
            generate_workout_plan(profile, goals, conditions, locations),
            generate_diet_plan(profile, goals, clamp_negative_carbs=config.CLAMP_NEGATIVE_CARBS),
            generate_sleep_schedule(goals),
            today,
        )
    except (ProfileValidationError, TypeError, ValueError) as e:
        fail(f"Error: {e}")

    if use_json(as_json):
        echo_json([t.to_dict() for t in daily_tasks])
        return

    render_tasks(daily_tasks, today)


@cli.command()
@profile_options
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def calories(profile_file, age, height, weight, target_weight, gender, goals, conditions, locations, as_json):
    """Show BMR, TDEE and daily macro targets."""
    try:
        profile, goals, conditions, locations = load_inputs(
            profile_file, age, height, weight, target_weight, gender, goals, conditions, locations
        )
        validate_selections(goals, conditions, locations, require_all=False)
        bmr = calculate_bmr(profile)
        tdee = calculate_base_calories(profile)
        targets = calculate_macro_targets(profile, goals, clamp_negative_carbs=config.CLAMP_NEGATIVE_CARBS)
    except (ProfileValidationError, TypeError, ValueError) as e:
        fail(f"Error: {e}")

    if use_json(as_json):
        echo_json({'bmr': round(bmr, 1), 'tdee': tdee, **targets.to_dict()})
        return

    console.print(Panel(
        f"BMR: {bmr:.0f} kcal\n"
        f"TDEE: {tdee} kcal\n"
        f"Daily Target: {targets.daily_calories} kcal\n"
        f"Protein: {targets.protein_grams:.0f}g\n"
        f"Carbs: {targets.carbs_grams:.0f}g\n"
        f"Fats: {targets.fats_grams:.0f}g",
        title="🔥 Energy & Macros", style="green"
    ))


@cli.command()
@click.option("--file", "progress_file", required=True, type=click.Path(exists=True, dir_okay=False),
              help="JSON file with weight_logs, tasks and optional target_weight")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def progress(progress_file, as_json):
    """Summarize task completion and weight progress."""
    try:
        data = read_json_object(progress_file)

        logs = [WeightLogEntry.from_dict(entry) for entry in data.get("weight_logs", [])]
        task_list = [DailyTask.from_dict(entry) for entry in data.get("tasks", [])]
        target = data.get("target_weight")
        weight_progress = summarize_weight_logs(logs, float(target) if target is not None else None)
        rate = completion_rate(task_list)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        fail(f"Could not read progress file: {e}")

    completed = sum(1 for t in task_list if t.is_completed)

    if use_json(as_json):
        echo_json({
            'completed_tasks': completed,
            'total_tasks': len(task_list),
            'completion_rate': rate,
            'weight': weight_progress.to_dict() if weight_progress else None,
        })
        return

    console.print(Panel.fit(
        f"Completed: {completed}/{len(task_list)} tasks ({rate}%)",
        title="📈 Task Completion", style="bold blue"
    ))

    if weight_progress is None:
        console.print("[yellow]No weight logs yet[/yellow]")
        return

    lines = [
        f"Start: {weight_progress.start_weight:.1f} kg",
        f"Current: {weight_progress.current_weight:.1f} kg",
        f"Change: {weight_progress.weight_change:+.1f} kg",
    ]
    if weight_progress.target_weight is not None:
        lines.append(f"Target: {weight_progress.target_weight:.1f} kg "
                     f"({weight_progress.remaining_to_target:+.1f} kg to go)")
    console.print(Panel("\n".join(lines), title="⚖️ Weight Progress", style="green"))


if __name__ == "__main__":
    cli()
