"""Expansion-state keys.

Keys are built from coordinates only (never positions), so reordering a list
never changes which cards are expanded:

  week  -> "<week#>"
  day   -> "<week#>-<day#>"
  meal  -> "<day#>-<mealId>"

The sets themselves are owned by the caller; every operation here returns a
new set and leaves its input untouched.
"""
from __future__ import annotations
from typing import AbstractSet, FrozenSet, Iterable

from nutriplan.utilities.constants import EXPANSION_KEY_SEPARATOR, KIND_DAY, KIND_MEAL, KIND_WEEK

_ARITY = {KIND_WEEK: 1, KIND_DAY: 2, KIND_MEAL: 2}


def key_for(kind: str, *coordinates) -> str:
    """Composite expansion key for a week, day or meal."""
    arity = _ARITY.get(kind)
    if arity is None:
        raise ValueError(f"No expansion key for node kind: {kind!r}")
    if len(coordinates) != arity:
        raise TypeError(f"{kind} keys take {arity} coordinates, got {len(coordinates)}")
    return EXPANSION_KEY_SEPARATOR.join(str(c) for c in coordinates)


def week_key(week_number: int) -> str:
    return key_for(KIND_WEEK, week_number)


def day_key(week_number: int, day_number: int) -> str:
    return key_for(KIND_DAY, week_number, day_number)


def meal_key(day_number: int, meal_id: str) -> str:
    return key_for(KIND_MEAL, day_number, meal_id)


def is_expanded(keys: AbstractSet[str], key: str) -> bool:
    return key in keys


def toggle(keys: AbstractSet[str], key: str) -> FrozenSet[str]:
    """Return a new set with ``key`` flipped; applying it twice restores the original."""
    if key in keys:
        return frozenset(k for k in keys if k != key)
    return frozenset(keys) | {key}


class ExpansionState:
    """Immutable expanded-key sets, one per level.

    Levels get separate sets so a day key and a meal key can never be mistaken
    for each other even when their text coincides.
    """

    def __init__(self, weeks: Iterable[str] = (), days: Iterable[str] = (), meals: Iterable[str] = ()):
        self.weeks = frozenset(weeks)
        self.days = frozenset(days)
        self.meals = frozenset(meals)

    def __eq__(self, other):
        if not isinstance(other, ExpansionState):
            return NotImplemented
        return (self.weeks, self.days, self.meals) == (other.weeks, other.days, other.meals)

    def __hash__(self):
        return hash((self.weeks, self.days, self.meals))

    def __repr__(self) -> str:
        return (f"ExpansionState(weeks={sorted(self.weeks)}, days={sorted(self.days)}, "
                f"meals={sorted(self.meals)})")

    def is_week_expanded(self, week_number: int) -> bool:
        return is_expanded(self.weeks, week_key(week_number))

    def is_day_expanded(self, week_number: int, day_number: int) -> bool:
        return is_expanded(self.days, day_key(week_number, day_number))

    def is_meal_expanded(self, day_number: int, meal_id: str) -> bool:
        return is_expanded(self.meals, meal_key(day_number, meal_id))

    def toggle_week(self, key: str) -> "ExpansionState":
        return ExpansionState(toggle(self.weeks, key), self.days, self.meals)

    def toggle_day(self, key: str) -> "ExpansionState":
        return ExpansionState(self.weeks, toggle(self.days, key), self.meals)

    def toggle_meal(self, key: str) -> "ExpansionState":
        return ExpansionState(self.weeks, self.days, toggle(self.meals, key))

    @classmethod
    def expand_all(cls, plan) -> "ExpansionState":
        """Every week, day and meal of ``plan`` expanded."""
        return cls(
            weeks=[week_key(w.week_number) for w in plan.weeks],
            days=[day_key(w.week_number, d.day_number) for w, d in plan.iter_days()],
            meals=[meal_key(d.day_number, m.id) for _, d, m in plan.iter_meals()],
        )


__all__ = [
    'key_for', 'week_key', 'day_key', 'meal_key', 'is_expanded', 'toggle', 'ExpansionState'
]
