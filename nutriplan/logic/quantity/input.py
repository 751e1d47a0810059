"""Quantity text field of a food card.

Free text typed by the user is cleaned up as it is typed and turned into a
quantity intent. Invalid intermediate input never reaches the plan owner as a
negative number or NaN: an empty field (or a lone ".") reports 0, and leaving
the field snaps the text back to the last valid number.
"""
from __future__ import annotations
import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_LEADING_ZEROS = re.compile(r'^0+(?=\d)')
_NOT_NUMERIC = re.compile(r'[^0-9.]')


def _number(value: float):
    """7.0 -> 7, 7.5 -> 7.5"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _format(value) -> str:
    return _LEADING_ZEROS.sub('', str(_number(value)))


def display_value(quantity) -> str:
    """Text shown for a stored quantity; zero or missing shows an empty field."""
    if quantity is None or quantity == 0:
        return ''
    return _format(quantity)


def sanitize(text: str) -> str:
    """Keep digits and a single decimal point, drop leading zeros."""
    value = _NOT_NUMERIC.sub('', _LEADING_ZEROS.sub('', text or ''))
    parts = value.split('.')
    if len(parts) > 2:
        value = parts[0] + '.' + ''.join(parts[1:])
    return _LEADING_ZEROS.sub('', value)


def parse(text: str) -> Optional[float]:
    """Non-negative number for sanitized text, None when there is no number yet."""
    if text in ('', '.'):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return _number(value) if value >= 0 else None


class QuantityInput:
    """Display state of one quantity field plus the intent it emits."""

    def __init__(self, quantity, on_quantity_change: Callable[[float], object]):
        self.quantity = quantity
        self.display = display_value(quantity)
        self.editing = False
        self._on_quantity_change = on_quantity_change

    def __repr__(self) -> str:
        return f"QuantityInput(display={self.display!r}, quantity={self.quantity!r})"

    def focus(self) -> None:
        self.editing = True

    def change(self, text: str):
        """User typed ``text``; returns the quantity that was emitted."""
        self.editing = True
        cleaned = sanitize(text)
        if cleaned != text:
            logger.debug(f"Quantity input {text!r} cleaned to {cleaned!r}")
        self.display = cleaned
        value = parse(cleaned)
        if value is None:
            # Empty field or lone decimal point while typing
            value = 0
        self.quantity = value
        self._on_quantity_change(value)
        return value

    def blur(self) -> str:
        """User left the field; snap the text to the last valid number."""
        self.editing = False
        value = parse(self.display)
        if value is None:
            self.display = display_value(self.quantity)
        else:
            self.display = _format(value)
        return self.display

    def sync(self, quantity) -> None:
        """The plan owner produced a new quantity; only repaint when not editing."""
        self.quantity = quantity
        new_display = display_value(quantity)
        if not self.editing and new_display != self.display:
            self.display = new_display


__all__ = ['display_value', 'sanitize', 'parse', 'QuantityInput']
