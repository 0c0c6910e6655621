"""Progress summaries over tasks and weight logs."""

from typing import Dict, Iterable, List, Optional

from .calories import round_half_up
from .models import DailyTask, Goal, TaskType, WeightLogEntry, WeightProgress, coerce_goals

GOAL_LABELS = {
    Goal.WEIGHT_LOSS: "Weight Loss",
    Goal.MUSCLE_GAIN: "Muscle Gain",
    Goal.BOTH: "Weight Loss & Muscle Gain",
}


def completion_rate(tasks: Iterable[DailyTask]) -> int:
    """Percentage of completed tasks, 0 when there are none."""
    tasks = list(tasks)
    if not tasks:
        return 0
    completed = sum(1 for task in tasks if task.is_completed)
    return round_half_up(completed / len(tasks) * 100)


def group_tasks_by_type(tasks: Iterable[DailyTask]) -> Dict[TaskType, List[DailyTask]]:
    """Group tasks by type, keeping first-seen type order and task order."""
    grouped: Dict[TaskType, List[DailyTask]] = {}
    for task in tasks:
        grouped.setdefault(task.task_type, []).append(task)
    return grouped


def summarize_weight_logs(logs: Iterable[WeightLogEntry],
                          target_weight: Optional[float] = None) -> Optional[WeightProgress]:
    """
    Summarize a series of weight logs.

    Args:
        logs: Weight log entries in any order
        target_weight: Goal weight; enables ``remaining_to_target``

    Returns:
        Weight statistics, or None when there are no logs
    """
    ordered = sorted(logs, key=lambda entry: entry.log_date)
    if not ordered:
        return None

    start = ordered[0].weight
    current = ordered[-1].weight

    return WeightProgress(
        start_weight=start,
        current_weight=current,
        weight_change=current - start,
        target_weight=target_weight,
        remaining_to_target=current - target_weight if target_weight is not None else None,
        entries=len(ordered),
    )


def describe_goals(goals: Optional[Iterable]) -> str:
    goals = coerce_goals(goals)
    if not goals:
        return "No goals set"
    return ", ".join(GOAL_LABELS[goal] for goal in goals)
