"""Render pass: plan snapshot -> nested card contracts.

Each card record carries what the presentation layer needs to draw one node
and wire its controls: the node itself, expansion flag and toggle, routed
handles, drag identifier and payload, the affordances to show, and (only when
expanded) the cards of its children. Markup is someone else's concern.

A render never mutates the plan or the expansion state; every user action
goes out through a handle or a toggle and comes back as a new snapshot.
"""
from __future__ import annotations
from typing import Callable, List, Optional

from nutriplan.domain.Day import Day
from nutriplan.domain.Food import Food
from nutriplan.domain.Meal import Meal
from nutriplan.domain.Plan import Plan
from nutriplan.domain.Week import Week
from nutriplan.logic.expansion.keys import ExpansionState
from nutriplan.logic.quantity.input import QuantityInput
from nutriplan.logic.reorder.collection import (
    ReorderableCollection, SortableEntry, day_collection, food_collection, meal_collection, week_collection
)
from nutriplan.logic.routing.capabilities import DayHandles, FoodHandles, MealHandles, PlanMutations, WeekHandles
from nutriplan.logic.routing.router import DayScope, HierarchyMutationRouter, MealScope, WeekScope
from nutriplan.utilities.config import ENABLE_DRAG_DROP

Toggle = Callable[[str], object]


def _toggle(on_toggle: Optional[Toggle], key: str):
    if on_toggle is None:
        return None
    return lambda: on_toggle(key)


class FoodCard:
    def __init__(self, food: Food, handles: FoodHandles, entry: SortableEntry):
        self.food = food
        self.key = entry.key
        self.handles = handles
        self.drag_id = entry.drag_id
        self.drag_data = entry.drag_data
        self.draggable = entry.drag_id is not None
        self.can_open_details = handles.open_details is not None
        self.quantity_input = QuantityInput(food.quantity, handles.change_quantity)


class MealCard:
    def __init__(self, meal: Meal, day_number: int, handles: MealHandles, entry: SortableEntry,
                 is_expanded: bool, toggle, foods: ReorderableCollection, food_cards: List[FoodCard]):
        self.meal = meal
        self.day_number = day_number
        self.key = entry.key
        self.handles = handles
        self.drag_id = entry.drag_id
        self.drag_data = entry.drag_data
        self.draggable = entry.drag_id is not None
        self.is_expanded = is_expanded
        self.toggle = toggle
        self.calories = round(meal.total_macros.calories)
        self.show_save_as_template = bool(meal.foods) and handles.save_as_template is not None
        self.show_create_new_food = handles.create_new_food is not None
        self.foods = foods
        self.food_cards = food_cards


class DayCard:
    def __init__(self, day: Day, week_number: int, handles: DayHandles, entry: SortableEntry,
                 is_expanded: bool, toggle, meals: ReorderableCollection, meal_cards: List[MealCard]):
        self.day = day
        self.week_number = week_number
        self.key = entry.key
        self.handles = handles
        self.drag_id = entry.drag_id
        self.drag_data = entry.drag_data
        self.draggable = entry.drag_id is not None
        self.is_expanded = is_expanded
        self.toggle = toggle
        self.show_add_from_template = handles.add_from_template is not None
        self.show_save_as_template = bool(day.meals) and handles.save_as_template is not None
        self.meals = meals
        self.meal_cards = meal_cards


class WeekCard:
    def __init__(self, week: Week, handles: WeekHandles, entry: SortableEntry,
                 is_expanded: bool, toggle, days: ReorderableCollection, day_cards: List[DayCard]):
        self.week = week
        self.key = entry.key
        self.handles = handles
        self.drag_id = entry.drag_id
        self.drag_data = entry.drag_data
        self.draggable = entry.drag_id is not None
        self.is_expanded = is_expanded
        self.toggle = toggle
        self.show_add_from_template = handles.add_from_template is not None
        self.show_save_as_template = bool(week.days) and handles.save_as_template is not None
        self.days = days
        self.day_cards = day_cards


class PlanRenderer:
    """One render pass over a plan snapshot."""

    def __init__(self, mutations: PlanMutations, expansion: Optional[ExpansionState] = None, *,
                 on_toggle_week: Optional[Toggle] = None, on_toggle_day: Optional[Toggle] = None,
                 on_toggle_meal: Optional[Toggle] = None, enable_drag_drop: bool = ENABLE_DRAG_DROP):
        self.router = HierarchyMutationRouter(mutations)
        self.expansion = expansion if expansion is not None else ExpansionState()
        self.on_toggle_week = on_toggle_week
        self.on_toggle_day = on_toggle_day
        self.on_toggle_meal = on_toggle_meal
        self.enable_drag_drop = enable_drag_drop

    def render(self, plan: Plan) -> List[WeekCard]:
        weeks = week_collection(plan, self.enable_drag_drop)
        return [self._week(entry) for entry in weeks]

    def _week(self, entry: SortableEntry) -> WeekCard:
        week = entry.node
        scope = self.router.week(week.week_number)
        expanded = entry.key in self.expansion.weeks
        days = day_collection(week, self.enable_drag_drop)
        cards = [self._day(scope, e) for e in days] if expanded else []
        return WeekCard(week, scope.handles, entry, expanded, _toggle(self.on_toggle_week, entry.key), days, cards)

    def _day(self, week_scope: WeekScope, entry: SortableEntry) -> DayCard:
        day = entry.node
        scope = week_scope.day(day.day_number)
        expanded = entry.key in self.expansion.days
        meals = meal_collection(day, self.enable_drag_drop)
        cards = [self._meal(scope, e) for e in meals] if expanded else []
        return DayCard(day, scope.week_number, scope.handles, entry, expanded,
                       _toggle(self.on_toggle_day, entry.key), meals, cards)

    def _meal(self, day_scope: DayScope, entry: SortableEntry) -> MealCard:
        meal = entry.node
        scope = day_scope.meal(meal.id)
        expanded = entry.key in self.expansion.meals
        foods = food_collection(scope.day_number, meal, self.enable_drag_drop)
        cards = [self._food(scope, e) for e in foods] if expanded else []
        return MealCard(meal, scope.day_number, scope.handles, entry, expanded,
                        _toggle(self.on_toggle_meal, entry.key), foods, cards)

    def _food(self, meal_scope: MealScope, entry: SortableEntry) -> FoodCard:
        return FoodCard(entry.node, meal_scope.food(entry.node).handles, entry)


def render_plan(plan: Plan, mutations: PlanMutations, expansion: Optional[ExpansionState] = None,
                **options) -> List[WeekCard]:
    """Shorthand for ``PlanRenderer(mutations, expansion, **options).render(plan)``."""
    return PlanRenderer(mutations, expansion, **options).render(plan)


__all__ = ['FoodCard', 'MealCard', 'DayCard', 'WeekCard', 'PlanRenderer', 'render_plan']
