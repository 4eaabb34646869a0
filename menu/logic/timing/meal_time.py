"""Meal time buckets.

The wall clock is read in exactly one place, `current_hour`; everything else
takes the hour as an argument so it can be tested with a fixed value.
"""
from __future__ import annotations
from datetime import datetime
from typing import Callable, NamedTuple

from menu.utilities.constants import (
    MORNING, LUNCH, DINNER,
    MORNING_START_HOUR, LUNCH_START_HOUR, DINNER_START_HOUR,
    THEME_CLASSES, DEFAULT_THEME_CLASSES,
)

Clock = Callable[[], datetime]


class Theme(NamedTuple):
    background: str
    text: str
    card: str

    @property
    def page_classes(self) -> str:
        return f"{self.background} {self.text}"


def meal_type_for_hour(hour: int) -> str:
    """Map a local hour (0-23) to "M", "L" or "D"."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be in 0..23, got {hour}")
    if MORNING_START_HOUR <= hour < LUNCH_START_HOUR:
        return MORNING
    if LUNCH_START_HOUR <= hour < DINNER_START_HOUR:
        return LUNCH
    return DINNER


def current_hour(clock: Clock = datetime.now) -> int:
    return clock().hour


def current_meal_type(clock: Clock = datetime.now) -> str:
    return meal_type_for_hour(current_hour(clock))


def theme_for_meal_type(meal_type: str) -> Theme:
    return Theme(*THEME_CLASSES.get(meal_type, DEFAULT_THEME_CLASSES))


__all__ = ['Theme', 'meal_type_for_hour', 'current_hour', 'current_meal_type', 'theme_for_meal_type']
