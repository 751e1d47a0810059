import unittest
from nutriplan.domain.Plan import Plan
from nutriplan.logic.expansion.keys import ExpansionState
from nutriplan.logic.identity.codec import day_drag_id, food_drag_id
from nutriplan.logic.cards.render import PlanRenderer, render_plan
from nutriplan.logic.reorder.drop import DROP, DRAG_START, DragEvent, ReorderDispatcher
from nutriplan.logic.routing.capabilities import OPTIONAL_CAPABILITIES
from plan_test_support import breakfast_plan, recording_mutations, week_dict


class TestRenderCards(unittest.TestCase):

    def setUp(self):
        self.plan = breakfast_plan()
        self.expanded = ExpansionState.expand_all(self.plan)

    def _food_card(self, cards):
        return cards[0].day_cards[0].meal_cards[0].food_cards[0]

    def test_quantity_edit_emits_one_coordinate_bearing_intent(self):
        mutations, calls = recording_mutations()
        cards = render_plan(self.plan, mutations, self.expanded)
        food = self._food_card(cards)
        self.assertEqual(food.quantity_input.display, "150")
        food.quantity_input.change("200")
        self.assertEqual(calls, [('change_food_quantity', 1, 'm1', 'f1', 200)])

    def test_dragging_the_only_food_emits_no_reorder(self):
        mutations, calls = recording_mutations(optional=OPTIONAL_CAPABILITIES)
        cards = render_plan(self.plan, mutations, self.expanded, enable_drag_drop=True)
        meal = cards[0].day_cards[0].meal_cards[0]
        food = self._food_card(cards)
        self.assertEqual(food.drag_id, food_drag_id(1, "m1", "f1"))
        dispatcher = ReorderDispatcher(mutations)
        dispatcher.dispatch(meal.foods, DragEvent(DRAG_START, food.drag_id))
        dispatcher.dispatch(meal.foods, DragEvent(DROP, food.drag_id, food.drag_id))
        self.assertEqual(calls, [])

    def test_temp_food_has_no_details_affordance(self):
        plan = breakfast_plan(food_item_id="temp-f1")
        for optional in ((), ('open_food_details',)):
            with self.subTest(optional=optional):
                mutations, _ = recording_mutations(optional=optional)
                food = self._food_card(render_plan(plan, mutations, self.expanded))
                self.assertFalse(food.can_open_details)
                self.assertIsNone(food.handles.open_details)

    def test_catalog_food_opens_details_when_offered(self):
        mutations, calls = recording_mutations(optional={'open_food_details'})
        food = self._food_card(render_plan(self.plan, mutations, self.expanded))
        self.assertTrue(food.can_open_details)
        food.handles.open_details()
        self.assertEqual(calls, [('open_food_details', 'apple-1')])

    def test_meal_card_summary(self):
        mutations, _ = recording_mutations(optional={'save_meal_as_template'})
        meal = render_plan(self.plan, mutations, self.expanded)[0].day_cards[0].meal_cards[0]
        self.assertEqual(meal.calories, 450)
        self.assertEqual(meal.key, "1-m1")
        self.assertTrue(meal.is_expanded)
        self.assertTrue(meal.show_save_as_template)
        self.assertFalse(meal.show_create_new_food)

    def test_save_as_template_needs_children(self):
        plan = Plan.from_dict({"weeks": [{"weekNumber": 1, "days": [
            {"dayNumber": 1, "meals": [{"id": "m1", "name": "Empty"}]},
            {"dayNumber": 2},
        ]}]})
        mutations, _ = recording_mutations(optional=OPTIONAL_CAPABILITIES)
        week = render_plan(plan, mutations, ExpansionState.expand_all(plan))[0]
        self.assertTrue(week.show_save_as_template)
        self.assertTrue(week.day_cards[0].show_save_as_template)
        self.assertFalse(week.day_cards[1].show_save_as_template)
        self.assertFalse(week.day_cards[0].meal_cards[0].show_save_as_template)
        self.assertTrue(week.show_add_from_template)

    def test_absent_capabilities_hide_affordances(self):
        mutations, _ = recording_mutations()
        week = render_plan(self.plan, mutations, self.expanded)[0]
        day = week.day_cards[0]
        self.assertFalse(week.show_add_from_template)
        self.assertFalse(week.show_save_as_template)
        self.assertFalse(day.show_add_from_template)
        self.assertFalse(day.show_save_as_template)
        self.assertFalse(day.meal_cards[0].show_save_as_template)

    def test_collapsed_cards_do_not_render_children(self):
        mutations, _ = recording_mutations()
        week = render_plan(self.plan, mutations)[0]
        self.assertFalse(week.is_expanded)
        self.assertEqual(week.day_cards, [])
        self.assertEqual(len(week.days), 1)

    def test_toggles_report_coordinate_keys(self):
        toggled = []
        mutations, _ = recording_mutations()
        renderer = PlanRenderer(mutations, self.expanded,
                                on_toggle_week=toggled.append,
                                on_toggle_day=toggled.append,
                                on_toggle_meal=toggled.append)
        week = renderer.render(self.plan)[0]
        week.toggle()
        week.day_cards[0].toggle()
        week.day_cards[0].meal_cards[0].toggle()
        self.assertEqual(toggled, ["1", "1-1", "1-m1"])

    def test_plain_render_has_no_drag_identity(self):
        mutations, _ = recording_mutations()
        week = render_plan(self.plan, mutations, self.expanded, enable_drag_drop=False)[0]
        food = self._food_card([week])
        for card in (week, week.day_cards[0], week.day_cards[0].meal_cards[0], food):
            self.assertFalse(card.draggable)
            self.assertIsNone(card.drag_id)

    def test_drag_render_pairs_cards_with_ids(self):
        plan = Plan.from_dict({"weeks": [week_dict(1, [3, 1, 2])]})
        mutations, calls = recording_mutations(optional={'reorder_days'})
        week = render_plan(plan, mutations, ExpansionState.expand_all(plan), enable_drag_drop=True)[0]
        self.assertEqual([c.drag_id for c in week.day_cards],
                         [day_drag_id(1, 3), day_drag_id(1, 1), day_drag_id(1, 2)])
        self.assertEqual(week.day_cards[0].drag_data, {'weekNumber': 1, 'dayNumber': 3})
        ReorderDispatcher(mutations).dispatch(
            week.days, DragEvent(DROP, day_drag_id(1, 2), day_drag_id(1, 3)))
        self.assertEqual(calls, [('reorder_days', 1, 2, 0)])

    def test_render_does_not_mutate_inputs(self):
        mutations, _ = recording_mutations()
        snapshot = self.plan.to_dict()
        state = self.expanded
        render_plan(self.plan, mutations, state)
        self.assertEqual(self.plan.to_dict(), snapshot)
        self.assertEqual(state, ExpansionState.expand_all(self.plan))
