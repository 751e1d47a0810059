"""Event helper utilities.

This module builds a PlanMutations whose entry points publish intents on an
event bus, for plan owners that would rather subscribe than pass callables.

Quick import:
    from nutriplan.events.event_helpers import bus_mutations, INTENT_ARGS

    mutations = bus_mutations(GLOBAL_EVENT_BUS, optional={'save_meal_as_template'})
"""
from __future__ import annotations
from typing import Iterable, Optional
from .Event_Bus import GLOBAL_EVENT_BUS, EventBus, intent_event
from nutriplan.logic.routing.capabilities import OPTIONAL_CAPABILITIES, PlanMutations

__all__ = ['INTENT_ARGS', 'publish_intent', 'bus_mutations', 'intent_events']

# Argument names of every PlanMutations entry point, in call order
INTENT_ARGS = {
    'add_day': ('week_number',),
    'remove_week': ('week_number',),
    'add_meal': ('day_number',),
    'remove_day': ('week_number', 'day_number'),
    'rename_meal': ('day_number', 'meal_id', 'name'),
    'remove_meal': ('day_number', 'meal_id'),
    'add_food': ('day_number', 'meal_id'),
    'add_food_from_catalog': ('day_number', 'meal_id', 'food_item'),
    'change_food_quantity': ('day_number', 'meal_id', 'food_id', 'quantity'),
    'remove_food': ('day_number', 'meal_id', 'food_id'),
    'add_day_from_template': ('week_number',),
    'save_week_as_template': ('week_number',),
    'add_meal_from_template': ('day_number',),
    'save_day_as_template': ('week_number', 'day_number'),
    'save_meal_as_template': ('day_number', 'meal_id'),
    'open_food_details': ('food_item_id',),
    'create_new_food': (),
    'reorder_weeks': ('from_index', 'to_index'),
    'reorder_days': ('week_number', 'from_index', 'to_index'),
    'reorder_meals': ('day_number', 'from_index', 'to_index'),
    'reorder_foods': ('day_number', 'meal_id', 'from_index', 'to_index'),
}


def publish_intent(bus: EventBus, capability: str, *args):
    """Publish a plan.<capability> event with a named payload."""
    names = INTENT_ARGS[capability]
    if len(args) != len(names):
        raise TypeError(f"{capability} takes {len(names)} arguments, got {len(args)}")
    bus.publish(intent_event(capability), dict(zip(names, args)))


def _publisher(bus: EventBus, capability: str):
    def publish(*args):
        publish_intent(bus, capability, *args)
    publish.__name__ = capability
    return publish


def bus_mutations(bus: Optional[EventBus] = None, optional: Iterable[str] = ()) -> PlanMutations:
    """PlanMutations publishing on ``bus``; only the optional capabilities named in ``optional`` are offered."""
    bus = bus or GLOBAL_EVENT_BUS
    offered = set(optional)
    unknown = offered - set(OPTIONAL_CAPABILITIES)
    if unknown:
        raise ValueError(f"Not optional capabilities: {sorted(unknown)}")
    callbacks = {
        name: _publisher(bus, name)
        for name in INTENT_ARGS
        if name not in OPTIONAL_CAPABILITIES or name in offered
    }
    return PlanMutations(**callbacks)


def intent_events(mutations: PlanMutations):
    """Event names a subscriber should listen to for everything ``mutations`` offers."""
    return [intent_event(name) for name in INTENT_ARGS if mutations.offers(name)]
