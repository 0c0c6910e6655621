"""Fitness plan generator: workouts, nutrition, sleep and daily checklists."""

__version__ = "0.1.0"
