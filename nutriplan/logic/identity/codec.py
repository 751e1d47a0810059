"""Drag identifiers for plan nodes.

An identifier is derived only from the node's coordinate path and embeds the
node kind, so:

  - the same coordinate always yields the same identifier;
  - two nodes of the same kind with different coordinates never share one;
  - a day and a meal never share one even when their scalars coincide.

Format: ``<kind>:<coord>[:<coord>...]``, e.g. ``day:1:3``, ``meal:3:m1``,
``food:3:m1:f1``. String coordinates are percent-escaped so a ``:`` inside a
meal or food id cannot shift the split points on decode.

The codec is coordinate-agnostic: it never checks a coordinate against a plan
snapshot. Callers validate.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple
from urllib.parse import quote, unquote

from nutriplan.utilities.config import ID_CACHE_SIZE
from nutriplan.utilities.constants import (
    DRAG_ID_SEPARATOR, KIND_DAY, KIND_FOOD, KIND_MEAL, KIND_WEEK
)

logger = logging.getLogger(__name__)

# Coordinate shape per kind: True = integer number, False = string id
_SCHEMA = {
    KIND_WEEK: (True,),
    KIND_DAY: (True, True),
    KIND_MEAL: (True, False),
    KIND_FOOD: (True, False, False),
}


class DragCoordinate(NamedTuple):
    """Decoded hierarchical position of one drag identifier."""
    kind: str
    week_number: Optional[int] = None
    day_number: Optional[int] = None
    meal_id: Optional[str] = None
    food_id: Optional[str] = None

    @property
    def parent(self) -> tuple:
        """Coordinate of the list this node is sorted within."""
        if self.kind == KIND_WEEK:
            return ()
        if self.kind == KIND_DAY:
            return (self.week_number,)
        if self.kind == KIND_MEAL:
            return (self.day_number,)
        return (self.day_number, self.meal_id)


def _escape(value) -> str:
    return quote(str(value), safe='')


def encode(kind: str, *coordinates) -> str:
    """Build the drag identifier of a node from its kind and coordinates."""
    if kind not in _SCHEMA:
        raise ValueError(f"Unknown node kind: {kind!r}")
    expected = len(_SCHEMA[kind])
    if len(coordinates) != expected:
        raise TypeError(f"{kind} identifiers take {expected} coordinates, got {len(coordinates)}")
    return DRAG_ID_SEPARATOR.join([kind] + [_escape(c) for c in coordinates])


def decode(drag_id: str) -> Optional[DragCoordinate]:
    """Parse a drag identifier back into its coordinate; None for foreign or malformed ids."""
    if not isinstance(drag_id, str):
        return None
    kind, *raw = drag_id.split(DRAG_ID_SEPARATOR)
    schema = _SCHEMA.get(kind)
    if schema is None or len(raw) != len(schema):
        logger.warning(f"Cannot decode drag identifier: {drag_id!r}")
        return None
    values = []
    for is_number, part in zip(schema, raw):
        value = unquote(part)
        if is_number:
            if not (value.isascii() and value.isdigit()):
                logger.warning(f"Cannot decode drag identifier: {drag_id!r}")
                return None
            value = int(value)
        values.append(value)
    if kind == KIND_WEEK:
        return DragCoordinate(kind, week_number=values[0])
    if kind == KIND_DAY:
        return DragCoordinate(kind, week_number=values[0], day_number=values[1])
    if kind == KIND_MEAL:
        return DragCoordinate(kind, day_number=values[0], meal_id=values[1])
    return DragCoordinate(kind, day_number=values[0], meal_id=values[1], food_id=values[2])


def week_drag_id(week_number: int) -> str:
    return encode(KIND_WEEK, week_number)


def day_drag_id(week_number: int, day_number: int) -> str:
    return encode(KIND_DAY, week_number, day_number)


def meal_drag_id(day_number: int, meal_id: str) -> str:
    return encode(KIND_MEAL, day_number, meal_id)


def food_drag_id(day_number: int, meal_id: str, food_id: str) -> str:
    return encode(KIND_FOOD, day_number, meal_id, food_id)


# --- Whole-level encoders ---------------------------------------------------
# Memoized on the coordinate tuple of the level: structurally equal snapshots
# share one result, and any insert/remove/reorder produces a new key so the
# whole level is recomputed.

@lru_cache(maxsize=ID_CACHE_SIZE)
def week_drag_ids(week_numbers: Tuple[int, ...]) -> Tuple[str, ...]:
    logger.debug(f"Computing week drag ids for {week_numbers}")
    return tuple(week_drag_id(w) for w in week_numbers)


@lru_cache(maxsize=ID_CACHE_SIZE)
def day_drag_ids(week_number: int, day_numbers: Tuple[int, ...]) -> Tuple[str, ...]:
    logger.debug(f"Computing day drag ids for week {week_number}: {day_numbers}")
    return tuple(day_drag_id(week_number, d) for d in day_numbers)


@lru_cache(maxsize=ID_CACHE_SIZE)
def meal_drag_ids(day_number: int, meal_ids: Tuple[str, ...]) -> Tuple[str, ...]:
    logger.debug(f"Computing meal drag ids for day {day_number}: {meal_ids}")
    return tuple(meal_drag_id(day_number, m) for m in meal_ids)


@lru_cache(maxsize=ID_CACHE_SIZE)
def food_drag_ids(day_number: int, meal_id: str, food_ids: Tuple[str, ...]) -> Tuple[str, ...]:
    logger.debug(f"Computing food drag ids for day {day_number} meal {meal_id}: {food_ids}")
    return tuple(food_drag_id(day_number, meal_id, f) for f in food_ids)


def clear_caches() -> None:
    for fn in (week_drag_ids, day_drag_ids, meal_drag_ids, food_drag_ids):
        fn.cache_clear()


__all__ = [
    'DragCoordinate', 'encode', 'decode',
    'week_drag_id', 'day_drag_id', 'meal_drag_id', 'food_drag_id',
    'week_drag_ids', 'day_drag_ids', 'meal_drag_ids', 'food_drag_ids', 'clear_caches',
]
