import unittest
from unittest import mock
from nutriplan.domain.Day import Day
from nutriplan.domain.Week import Week
from nutriplan.logic.identity import codec
from nutriplan.logic.identity.codec import day_drag_id, food_drag_id, meal_drag_id, week_drag_id
from nutriplan.logic.reorder.collection import (
    day_collection, food_collection, meal_collection, week_collection
)
from plan_test_support import breakfast_plan, multi_week_plan, week_dict


class TestReorderableCollection(unittest.TestCase):

    def setUp(self):
        codec.clear_caches()
        self.week = Week.from_dict(week_dict(1, [1, 2, 3]))

    def test_day_ids_are_paired_with_days(self):
        days = day_collection(self.week, enable_drag_drop=True)
        self.assertTrue(days.enabled)
        self.assertEqual(days.drag_ids, tuple(day_drag_id(1, n) for n in (1, 2, 3)))
        for entry, drag_id in zip(days, days.drag_ids):
            self.assertEqual(entry.drag_id, drag_id)
            self.assertEqual(entry.drag_id, day_drag_id(1, entry.node.day_number))

    def test_drag_payloads(self):
        day = self.week.days[0]
        meal = day.meals[0]
        self.assertEqual(week_collection(multi_week_plan(), True).entries[1].drag_data, {'weekNumber': 2})
        self.assertEqual(day_collection(self.week, True).entries[0].drag_data,
                         {'weekNumber': 1, 'dayNumber': 1})
        self.assertEqual(meal_collection(day, True).entries[1].drag_data,
                         {'dayNumber': 1, 'mealId': 'm2'})
        self.assertEqual(food_collection(1, meal, True).entries[0].drag_data,
                         {'dayNumber': 1, 'mealId': 'm1', 'foodId': 'f1'})

    def test_identifiers_for_every_level(self):
        plan = breakfast_plan()
        week = plan.weeks[0]
        day = week.days[0]
        meal = day.meals[0]
        self.assertEqual(week_collection(plan, True).drag_ids, (week_drag_id(1),))
        self.assertEqual(meal_collection(day, True).drag_ids, (meal_drag_id(1, "m1"),))
        self.assertEqual(food_collection(1, meal, True).drag_ids, (food_drag_id(1, "m1", "f1"),))

    def test_render_keys(self):
        day = self.week.days[1]
        self.assertEqual([e.key for e in day_collection(self.week)], ["1-1", "1-2", "1-3"])
        self.assertEqual([e.key for e in meal_collection(day)], ["2-m1", "2-m2"])
        self.assertEqual([e.key for e in food_collection(2, day.meals[0])], ["f1", "f2"])

    def test_order_follows_node_sequence(self):
        reordered = Week(1, [self.week.days[2], self.week.days[0], self.week.days[1]])
        days = day_collection(reordered, True)
        self.assertEqual([e.node.day_number for e in days], [3, 1, 2])
        self.assertEqual(days.drag_ids, (day_drag_id(1, 3), day_drag_id(1, 1), day_drag_id(1, 2)))

    def test_structurally_equal_snapshots_share_identifiers(self):
        other = Week.from_dict(week_dict(1, [1, 2, 3]))
        self.assertIsNot(other, self.week)
        first = day_collection(self.week, True).drag_ids
        second = day_collection(other, True).drag_ids
        self.assertIs(first, second)

    def test_insert_and_remove_recompute_the_level(self):
        before = day_collection(self.week, True).drag_ids
        inserted = Week(1, [Day(7)] + list(self.week.days))
        after = day_collection(inserted, True)
        self.assertIsNot(after.drag_ids, before)
        self.assertEqual(after.drag_ids, (day_drag_id(1, 7),) + before)
        removed = day_collection(Week(1, self.week.days[1:]), True)
        self.assertEqual(removed.drag_ids, before[1:])
        self.assertEqual([e.node.day_number for e in removed], [2, 3])

    def test_index_of(self):
        days = day_collection(self.week, True)
        self.assertEqual(days.index_of(day_drag_id(1, 3)), 2)
        self.assertIsNone(days.index_of(day_drag_id(2, 3)))
        self.assertIsNone(days.index_of("nonsense"))

    def test_plain_mode_never_touches_the_codec(self):
        day = self.week.days[0]
        with mock.patch('nutriplan.logic.reorder.collection.day_drag_ids') as days_ids, \
                mock.patch('nutriplan.logic.reorder.collection.meal_drag_ids') as meal_ids, \
                mock.patch('nutriplan.logic.reorder.collection.food_drag_ids') as food_ids, \
                mock.patch('nutriplan.logic.reorder.collection.week_drag_ids') as week_ids:
            collections = [
                week_collection(breakfast_plan()),
                day_collection(self.week),
                meal_collection(day),
                food_collection(1, day.meals[0]),
            ]
        for fake in (days_ids, meal_ids, food_ids, week_ids):
            fake.assert_not_called()
        for collection in collections:
            self.assertFalse(collection.enabled)
            self.assertEqual(collection.drag_ids, ())
            self.assertTrue(all(e.drag_id is None and e.drag_data is None for e in collection))
        self.assertEqual(len(collections[1]), 3)

    def test_empty_level(self):
        days = day_collection(Week(5), True)
        self.assertTrue(days.is_empty)
        self.assertEqual(days.drag_ids, ())
