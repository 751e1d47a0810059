"""Turning sortable-list events into reorder intents.

The sortable list owns the drag state machine
(idle -> dragging -> dropped | canceled -> idle). Only a ``drop`` whose active
and over items are both in the collection, at different positions, becomes a
reorder intent; everything else (drag start/over, cancel, dropping an item on
itself, ids from another list) yields nothing. The intent carries indices only;
moving the items is the plan owner's job.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, NamedTuple, Optional

from nutriplan.logic.reorder.collection import ReorderableCollection
from nutriplan.logic.routing.capabilities import PlanMutations
from nutriplan.logic.routing.router import bind
from nutriplan.utilities.constants import KIND_DAY, KIND_FOOD, KIND_MEAL, KIND_WEEK

logger = logging.getLogger(__name__)

DRAG_START = "dragStart"
DRAG_OVER = "dragOver"
DROP = "drop"
CANCEL = "cancel"

_REORDER_CAPABILITY = {
    KIND_WEEK: 'reorder_weeks',
    KIND_DAY: 'reorder_days',
    KIND_MEAL: 'reorder_meals',
    KIND_FOOD: 'reorder_foods',
}


class DragEvent(NamedTuple):
    type: str
    active_id: str
    over_id: Optional[str] = None


class ReorderIntent(NamedTuple):
    level: str
    parent: tuple
    from_index: int
    to_index: int
    drag_data: Optional[Dict[str, Any]] = None


def resolve_drop(collection: ReorderableCollection, event: DragEvent) -> Optional[ReorderIntent]:
    """Reorder intent for a finished drag over ``collection``, or None."""
    if event.type != DROP or not collection.enabled or event.over_id is None:
        return None
    from_index = collection.index_of(event.active_id)
    to_index = collection.index_of(event.over_id)
    if from_index is None or to_index is None:
        # Ids from other lists, or not drag ids at all
        return None
    if from_index == to_index:
        return None
    return ReorderIntent(
        collection.level, collection.parent, from_index, to_index,
        collection.entries[from_index].drag_data,
    )


class ReorderDispatcher:
    """Forwards resolved drops to the plan owner's reorder capabilities."""

    def __init__(self, mutations: PlanMutations):
        self.mutations = mutations

    def handles(self, level: str) -> bool:
        return self.mutations.offers(_REORDER_CAPABILITY[level])

    def dispatch(self, collection: ReorderableCollection, event: DragEvent) -> Optional[ReorderIntent]:
        intent = resolve_drop(collection, event)
        if intent is None:
            return None
        capability = _REORDER_CAPABILITY[intent.level]
        handle = bind(capability, getattr(self.mutations, capability), *intent.parent)
        if handle is None:
            logger.debug(f"No {capability} capability; drop on {collection} not forwarded")
            return None
        handle(intent.from_index, intent.to_index)
        return intent


__all__ = [
    'DRAG_START', 'DRAG_OVER', 'DROP', 'CANCEL',
    'DragEvent', 'ReorderIntent', 'resolve_drop', 'ReorderDispatcher',
]
