"""Simple Event Bus / Observer implementation for plan mutation intents.

Event names are "plan.<capability>", one per PlanMutations entry point:
  plan.rename_meal -> payload {"day_number": int, "meal_id": str, "name": str}
  plan.change_food_quantity -> payload {"day_number", "meal_id", "food_id", "quantity"}
  ...

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
INTENT_PREFIX = "plan."
PLAN_ADD_DAY = "plan.add_day"
PLAN_REMOVE_WEEK = "plan.remove_week"
PLAN_ADD_MEAL = "plan.add_meal"
PLAN_REMOVE_DAY = "plan.remove_day"
PLAN_RENAME_MEAL = "plan.rename_meal"
PLAN_REMOVE_MEAL = "plan.remove_meal"
PLAN_ADD_FOOD = "plan.add_food"
PLAN_ADD_FOOD_FROM_CATALOG = "plan.add_food_from_catalog"
PLAN_CHANGE_FOOD_QUANTITY = "plan.change_food_quantity"
PLAN_REMOVE_FOOD = "plan.remove_food"


def intent_event(capability: str) -> str:
	return f"{INTENT_PREFIX}{capability}"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not keep the intent from the others
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"[EventBus] Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'INTENT_PREFIX', 'intent_event',
	'PLAN_ADD_DAY', 'PLAN_REMOVE_WEEK', 'PLAN_ADD_MEAL', 'PLAN_REMOVE_DAY',
	'PLAN_RENAME_MEAL', 'PLAN_REMOVE_MEAL', 'PLAN_ADD_FOOD', 'PLAN_ADD_FOOD_FROM_CATALOG',
	'PLAN_CHANGE_FOOD_QUANTITY', 'PLAN_REMOVE_FOOD',
]
