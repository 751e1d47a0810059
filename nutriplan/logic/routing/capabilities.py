"""Capability records.

``PlanMutations`` is what the plan owner supplies: every entry point takes the
full coordinate of the node it changes. Optional capabilities default to
``None``, and ``None`` means "not offered" all the way down to the cards.

The ``*Handles`` records are what each card receives after routing: the
coordinate is already bound, so a card only reports its own change.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Callable, Optional

Callback = Callable[..., Any]

OPTIONAL_CAPABILITIES = (
    'add_day_from_template', 'save_week_as_template',
    'add_meal_from_template', 'save_day_as_template',
    'save_meal_as_template',
    'open_food_details', 'create_new_food',
    'reorder_weeks', 'reorder_days', 'reorder_meals', 'reorder_foods',
)


@dataclass(frozen=True)
class PlanMutations:
    # week level
    add_day: Callback                  # (week_number)
    remove_week: Callback              # (week_number)
    # day level
    add_meal: Callback                 # (day_number)
    remove_day: Callback               # (week_number, day_number)
    # meal level
    rename_meal: Callback              # (day_number, meal_id, name)
    remove_meal: Callback              # (day_number, meal_id)
    add_food: Callback                 # (day_number, meal_id)
    add_food_from_catalog: Callback    # (day_number, meal_id, food_item)
    # food level
    change_food_quantity: Callback     # (day_number, meal_id, food_id, quantity)
    remove_food: Callback              # (day_number, meal_id, food_id)
    # optional
    add_day_from_template: Optional[Callback] = None   # (week_number)
    save_week_as_template: Optional[Callback] = None   # (week_number)
    add_meal_from_template: Optional[Callback] = None  # (day_number)
    save_day_as_template: Optional[Callback] = None    # (week_number, day_number)
    save_meal_as_template: Optional[Callback] = None   # (day_number, meal_id)
    open_food_details: Optional[Callback] = None       # (food_item_id)
    create_new_food: Optional[Callback] = None         # ()
    reorder_weeks: Optional[Callback] = None           # (from_index, to_index)
    reorder_days: Optional[Callback] = None            # (week_number, from_index, to_index)
    reorder_meals: Optional[Callback] = None           # (day_number, from_index, to_index)
    reorder_foods: Optional[Callback] = None           # (day_number, meal_id, from_index, to_index)

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.name in OPTIONAL_CAPABILITIES:
                continue
            if not callable(value):
                raise TypeError(f"PlanMutations.{f.name} must be callable, got {value!r}")

    def offers(self, capability: str) -> bool:
        return getattr(self, capability, None) is not None


@dataclass(frozen=True)
class WeekHandles:
    add_child: Callback                           # add a day
    remove: Callback
    add_from_template: Optional[Callback] = None
    save_as_template: Optional[Callback] = None


@dataclass(frozen=True)
class DayHandles:
    add_child: Callback                           # add a meal
    remove: Callback
    add_from_template: Optional[Callback] = None
    save_as_template: Optional[Callback] = None


@dataclass(frozen=True)
class MealHandles:
    rename: Callback                              # (name)
    add_child: Callback                           # open the food picker
    add_from_catalog: Callback                    # (food_item)
    remove: Callback
    save_as_template: Optional[Callback] = None
    create_new_food: Optional[Callback] = None


@dataclass(frozen=True)
class FoodHandles:
    change_quantity: Callback                     # (quantity)
    remove: Callback
    open_details: Optional[Callback] = None


__all__ = [
    'Callback', 'OPTIONAL_CAPABILITIES', 'PlanMutations',
    'WeekHandles', 'DayHandles', 'MealHandles', 'FoodHandles',
]
