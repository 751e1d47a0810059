"""Reorderable collections: one tree level laid out for a sortable list.

Given the children of one node, a builder returns the children in order, each
paired with its drag identifier and the coordinate payload the sortable list
hands back on drop. Identifiers come from the memoized whole-level encoders,
so an insert or remove anywhere in the level recomputes all of them.

With drag and drop disabled the builders take a separate path that only
pairs nodes with their render keys and never touches the identity codec.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

from nutriplan.logic.expansion.keys import day_key, meal_key, week_key
from nutriplan.logic.identity.codec import day_drag_ids, food_drag_ids, meal_drag_ids, week_drag_ids
from nutriplan.utilities.constants import KIND_DAY, KIND_FOOD, KIND_MEAL, KIND_WEEK


class SortableEntry(NamedTuple):
    node: Any
    key: str                                    # stable render key
    drag_id: Optional[str] = None
    drag_data: Optional[Dict[str, Any]] = None


class ReorderableCollection:
    """Ordered children of one node; ``drag_ids[i]`` always belongs to ``entries[i]``."""

    def __init__(self, level: str, parent: tuple, entries: Sequence[SortableEntry],
                 drag_ids: Tuple[str, ...] = (), enabled: bool = False):
        self.level = level
        self.parent = parent
        self.entries = tuple(entries)
        self.drag_ids = drag_ids
        self.enabled = enabled

    def __len__(self):
        return len(self.entries)

    def __iter__(self) -> Iterator[SortableEntry]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"ReorderableCollection({self.level}, parent={self.parent}, size={len(self)}, enabled={self.enabled})"

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def index_of(self, drag_id: str) -> Optional[int]:
        try:
            return self.drag_ids.index(drag_id)
        except ValueError:
            return None


def _plain(level: str, parent: tuple, nodes, key: Callable[[Any], str]) -> ReorderableCollection:
    return ReorderableCollection(level, parent, [SortableEntry(n, key(n)) for n in nodes])


def _sortable(level: str, parent: tuple, nodes, drag_ids: Tuple[str, ...],
              key: Callable[[Any], str], payload: Callable[[Any], Dict[str, Any]]) -> ReorderableCollection:
    entries = [SortableEntry(n, key(n), drag_id, payload(n)) for n, drag_id in zip(nodes, drag_ids)]
    return ReorderableCollection(level, parent, entries, drag_ids, enabled=True)


def week_collection(plan, enable_drag_drop: bool = False) -> ReorderableCollection:
    weeks = plan.weeks
    key = lambda w: week_key(w.week_number)
    if not enable_drag_drop:
        return _plain(KIND_WEEK, (), weeks, key)
    ids = week_drag_ids(tuple(w.week_number for w in weeks))
    return _sortable(KIND_WEEK, (), weeks, ids, key, lambda w: {'weekNumber': w.week_number})


def day_collection(week, enable_drag_drop: bool = False) -> ReorderableCollection:
    week_number = week.week_number
    parent = (week_number,)
    key = lambda d: day_key(week_number, d.day_number)
    if not enable_drag_drop:
        return _plain(KIND_DAY, parent, week.days, key)
    ids = day_drag_ids(week_number, tuple(d.day_number for d in week.days))
    return _sortable(KIND_DAY, parent, week.days, ids, key,
                     lambda d: {'weekNumber': week_number, 'dayNumber': d.day_number})


def meal_collection(day, enable_drag_drop: bool = False) -> ReorderableCollection:
    day_number = day.day_number
    parent = (day_number,)
    key = lambda m: meal_key(day_number, m.id)
    if not enable_drag_drop:
        return _plain(KIND_MEAL, parent, day.meals, key)
    ids = meal_drag_ids(day_number, tuple(m.id for m in day.meals))
    return _sortable(KIND_MEAL, parent, day.meals, ids, key,
                     lambda m: {'dayNumber': day_number, 'mealId': m.id})


def food_collection(day_number: int, meal, enable_drag_drop: bool = False) -> ReorderableCollection:
    meal_id = meal.id
    parent = (day_number, meal_id)
    key = lambda f: f.id
    if not enable_drag_drop:
        return _plain(KIND_FOOD, parent, meal.foods, key)
    ids = food_drag_ids(day_number, meal_id, tuple(f.id for f in meal.foods))
    return _sortable(KIND_FOOD, parent, meal.foods, ids, key,
                     lambda f: {'dayNumber': day_number, 'mealId': meal_id, 'foodId': f.id})


__all__ = [
    'SortableEntry', 'ReorderableCollection',
    'week_collection', 'day_collection', 'meal_collection', 'food_collection',
]
