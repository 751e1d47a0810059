import math
import unittest
from nutriplan.logic.quantity.input import QuantityInput, display_value, parse, sanitize


class TestQuantityInput(unittest.TestCase):

    def setUp(self):
        self.emitted = []
        self.field = QuantityInput(150, self.emitted.append)

    def test_initial_display(self):
        self.assertEqual(self.field.display, "150")
        self.assertEqual(display_value(150.0), "150")
        self.assertEqual(display_value(2.5), "2.5")
        self.assertEqual(display_value(0), "")
        self.assertEqual(display_value(None), "")

    def test_leading_zeros_are_dropped(self):
        self.assertEqual(self.field.change("007"), 7)
        self.assertEqual(self.field.display, "7")
        self.assertEqual(self.emitted, [7])

    def test_empty_input_emits_zero(self):
        self.field.change("")
        self.assertEqual(self.emitted, [0])
        self.assertFalse(any(math.isnan(v) for v in self.emitted))

    def test_garbage_is_stripped(self):
        self.field.change("abc")
        self.field.change("-5")
        self.field.change("1.2.3")
        self.field.change("0.5")
        self.assertEqual(self.emitted, [0, 5, 1.23, 0.5])
        self.assertEqual(self.field.display, "0.5")
        self.assertTrue(all(v >= 0 for v in self.emitted))

    def test_lone_decimal_point(self):
        self.assertEqual(self.field.change("."), 0)
        self.assertEqual(self.field.display, ".")
        self.assertEqual(self.field.blur(), "")

    def test_blur_normalizes_partial_number(self):
        self.field.change("12.")
        self.assertEqual(self.emitted, [12])
        self.assertEqual(self.field.blur(), "12")
        self.field.change("0")
        self.assertEqual(self.field.blur(), "0")

    def test_sync_waits_until_editing_ends(self):
        self.field.focus()
        self.field.change("20")
        self.field.sync(300)
        self.assertEqual(self.field.display, "20")
        self.field.blur()
        self.field.sync(300)
        self.assertEqual(self.field.display, "300")

    def test_sanitize_and_parse(self):
        self.assertEqual(sanitize("0012.50"), "12.50")
        self.assertEqual(sanitize("1,5"), "15")
        self.assertEqual(sanitize("00.5"), "0.5")
        self.assertIsNone(parse(""))
        self.assertIsNone(parse("."))
        self.assertEqual(parse("12.5"), 12.5)
        self.assertEqual(parse("4"), 4)
