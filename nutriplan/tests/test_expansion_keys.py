import unittest
from nutriplan.domain.Week import Week
from nutriplan.logic.expansion.keys import (
    ExpansionState, day_key, is_expanded, key_for, meal_key, toggle, week_key
)
from nutriplan.logic.reorder.collection import day_collection
from nutriplan.utilities.constants import KIND_DAY, KIND_FOOD, KIND_MEAL
from plan_test_support import breakfast_plan, week_dict


class TestExpansionKeys(unittest.TestCase):

    def test_key_scheme(self):
        self.assertEqual(key_for(KIND_DAY, 2, 3), "2-3")
        self.assertEqual(key_for(KIND_MEAL, 3, "m1"), "3-m1")
        self.assertEqual(week_key(4), "4")
        self.assertEqual(day_key(2, 3), "2-3")
        self.assertEqual(meal_key(3, "m1"), "3-m1")

    def test_day_and_meal_keys_do_not_collide(self):
        self.assertNotEqual(day_key(2, 3), meal_key(3, "m1"))
        # Separate sets per level: a day key never expands a meal
        state = ExpansionState(days=[day_key(3, 1)])
        self.assertTrue(state.is_day_expanded(3, 1))
        self.assertFalse(state.is_meal_expanded(3, "1"))

    def test_no_key_for_foods(self):
        with self.assertRaises(ValueError):
            key_for(KIND_FOOD, 1, "m1", "f1")

    def test_toggle_twice_restores_membership(self):
        keys = frozenset({"1-1", "1-2"})
        for key in ("1-1", "1-3"):
            with self.subTest(key=key):
                once = toggle(keys, key)
                self.assertNotEqual(is_expanded(once, key), is_expanded(keys, key))
                self.assertEqual(toggle(once, key), keys)

    def test_toggle_returns_new_set(self):
        keys = {"1-1"}
        result = toggle(keys, "1-2")
        self.assertEqual(keys, {"1-1"})
        self.assertEqual(result, frozenset({"1-1", "1-2"}))

    def test_state_toggles_are_immutable(self):
        state = ExpansionState()
        toggled = state.toggle_day(day_key(1, 1)).toggle_meal(meal_key(1, "m1")).toggle_week(week_key(1))
        self.assertEqual(state, ExpansionState())
        self.assertTrue(toggled.is_week_expanded(1))
        self.assertTrue(toggled.is_day_expanded(1, 1))
        self.assertTrue(toggled.is_meal_expanded(1, "m1"))

    def test_expand_all(self):
        state = ExpansionState.expand_all(breakfast_plan())
        self.assertEqual(state.weeks, {"1"})
        self.assertEqual(state.days, {"1-1"})
        self.assertEqual(state.meals, {"1-m1"})

    def test_reordering_days_keeps_expansion(self):
        week = Week.from_dict(week_dict(1, [1, 2, 3, 4, 5]))
        reordered = Week.from_dict(week_dict(1, [4, 1, 5, 3, 2]))
        state = ExpansionState(days=[day_key(1, 2), day_key(1, 4)])

        def membership(w):
            return {e.node.day_number: is_expanded(state.days, e.key) for e in day_collection(w, True)}

        self.assertEqual(membership(week), membership(reordered))
        self.assertEqual(membership(reordered), {1: False, 2: True, 3: False, 4: True, 5: False})
