"""Hierarchy mutation router.

Turns node-local intents ("my name changed", "remove me") into
coordinate-bearing intents on ``PlanMutations``. Each scope closes over the
coordinate of its node and hands out scopes for its children:

    router = HierarchyMutationRouter(mutations)
    meal = router.week(1).day(3).meal("m1")
    meal.handles.rename("Brunch")      # -> mutations.rename_meal(3, "m1", "Brunch")

Optional capabilities the owner did not supply come out as ``None`` at every
level. Coordinates are not checked against any snapshot; an intent for a node
that no longer exists is forwarded as-is and the owner decides what to do.
"""
from __future__ import annotations
import logging
import math
from numbers import Real
from typing import Optional

from nutriplan.domain.Food import Food
from nutriplan.logic.routing.capabilities import (
    Callback, DayHandles, FoodHandles, MealHandles, PlanMutations, WeekHandles
)

logger = logging.getLogger(__name__)


def bind(intent: str, fn: Optional[Callback], *coordinates) -> Optional[Callback]:
    """Close ``fn`` over ``coordinates``; an absent capability stays absent."""
    if fn is None:
        return None

    def handle(*args):
        logger.debug(f"Intent {intent}{coordinates + args}")
        return fn(*coordinates, *args)

    handle.__name__ = intent
    handle.__qualname__ = intent
    return handle


def _bind_quantity(fn: Callback, day_number: int, meal_id: str, food_id: str) -> Callback:
    def change_quantity(quantity):
        if isinstance(quantity, bool) or not isinstance(quantity, Real) \
                or not math.isfinite(quantity) or quantity < 0:
            logger.warning(f"Dropping quantity {quantity!r} for food {food_id} in day {day_number} meal {meal_id}")
            return None
        logger.debug(f"Intent change_food_quantity{(day_number, meal_id, food_id, quantity)}")
        return fn(day_number, meal_id, food_id, quantity)

    return change_quantity


class FoodScope:
    def __init__(self, mutations: PlanMutations, day_number: int, meal_id: str, food: Food):
        self.day_number = day_number
        self.meal_id = meal_id
        self.food_id = food.id
        m = mutations
        open_details = None
        # The temp sentinel means there is nothing in the catalog to open
        if food.has_catalog_detail:
            open_details = bind('open_food_details', m.open_food_details, food.food_item_id)
        self.handles = FoodHandles(
            change_quantity=_bind_quantity(m.change_food_quantity, day_number, meal_id, food.id),
            remove=bind('remove_food', m.remove_food, day_number, meal_id, food.id),
            open_details=open_details,
        )


class MealScope:
    def __init__(self, mutations: PlanMutations, day_number: int, meal_id: str):
        self._mutations = mutations
        self.day_number = day_number
        self.meal_id = meal_id
        m = mutations
        self.handles = MealHandles(
            rename=bind('rename_meal', m.rename_meal, day_number, meal_id),
            add_child=bind('add_food', m.add_food, day_number, meal_id),
            add_from_catalog=bind('add_food_from_catalog', m.add_food_from_catalog, day_number, meal_id),
            remove=bind('remove_meal', m.remove_meal, day_number, meal_id),
            save_as_template=bind('save_meal_as_template', m.save_meal_as_template, day_number, meal_id),
            create_new_food=bind('create_new_food', m.create_new_food),
        )
        self.reorder_children = bind('reorder_foods', m.reorder_foods, day_number, meal_id)

    def food(self, food: Food) -> FoodScope:
        return FoodScope(self._mutations, self.day_number, self.meal_id, food)


class DayScope:
    def __init__(self, mutations: PlanMutations, week_number: int, day_number: int):
        self._mutations = mutations
        self.week_number = week_number
        self.day_number = day_number
        m = mutations
        self.handles = DayHandles(
            add_child=bind('add_meal', m.add_meal, day_number),
            remove=bind('remove_day', m.remove_day, week_number, day_number),
            add_from_template=bind('add_meal_from_template', m.add_meal_from_template, day_number),
            save_as_template=bind('save_day_as_template', m.save_day_as_template, week_number, day_number),
        )
        self.reorder_children = bind('reorder_meals', m.reorder_meals, day_number)

    def meal(self, meal_id: str) -> MealScope:
        return MealScope(self._mutations, self.day_number, meal_id)


class WeekScope:
    def __init__(self, mutations: PlanMutations, week_number: int):
        self._mutations = mutations
        self.week_number = week_number
        m = mutations
        self.handles = WeekHandles(
            add_child=bind('add_day', m.add_day, week_number),
            remove=bind('remove_week', m.remove_week, week_number),
            add_from_template=bind('add_day_from_template', m.add_day_from_template, week_number),
            save_as_template=bind('save_week_as_template', m.save_week_as_template, week_number),
        )
        self.reorder_children = bind('reorder_days', m.reorder_days, week_number)

    def day(self, day_number: int) -> DayScope:
        return DayScope(self._mutations, self.week_number, day_number)


class HierarchyMutationRouter:
    def __init__(self, mutations: PlanMutations):
        self.mutations = mutations
        self.reorder_children = bind('reorder_weeks', mutations.reorder_weeks)

    def week(self, week_number: int) -> WeekScope:
        return WeekScope(self.mutations, week_number)


__all__ = ['bind', 'HierarchyMutationRouter', 'WeekScope', 'DayScope', 'MealScope', 'FoodScope']
