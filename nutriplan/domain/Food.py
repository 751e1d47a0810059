"""Food domain entity: one line of a meal (quantity, unit, macros, catalog reference)."""
from typing import Optional

from nutriplan.domain.Macros import Macros
from nutriplan.utilities.constants import DEFAULT_UNIT, TEMP_ID_PREFIX
from nutriplan.utilities.validators import FoodInput


def temp_food_item_id(food_id: str) -> str:
    """Sentinel carried by a food that has not been resolved against the catalog."""
    return f"{TEMP_ID_PREFIX}{food_id}"


class Food:
    def __init__(self, id: str, food_item_id: Optional[str] = None, name: str = "",
                 quantity: float = 0, unit: str = DEFAULT_UNIT, macros: Optional[Macros] = None):
        self.id = id
        self.food_item_id = food_item_id
        self.name = name
        self.quantity = quantity
        self.unit = unit or DEFAULT_UNIT
        self.macros = macros if macros is not None else Macros()

    @property
    def has_catalog_detail(self) -> bool:
        '''False when there is no catalog entry to open (missing id or the temp sentinel).'''
        return bool(self.food_item_id) and self.food_item_id != temp_food_item_id(self.id)

    def __eq__(self, other):
        if not isinstance(other, Food):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        return Food._from_input(FoodInput.model_validate(data))

    @staticmethod
    def _from_input(model):
        return Food(
            id=model.id,
            food_item_id=model.food_item_id,
            name=model.name,
            quantity=model.quantity,
            unit=model.unit,
            macros=Macros._from_input(model.macros),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "foodItemId": self.food_item_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "macros": self.macros.to_dict(),
        }
