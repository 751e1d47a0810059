"""FoodItem: a catalog entry the user picked; forwarded to the plan owner untouched."""
from typing import Optional

from nutriplan.domain.Macros import Macros
from nutriplan.utilities.validators import FoodItemInput


class FoodItem:
    def __init__(self, id: str, name: str = "", unit: Optional[str] = None, macros: Optional[Macros] = None):
        self.id = id
        self.name = name
        self.unit = unit
        self.macros = macros

    def __eq__(self, other):
        if not isinstance(other, FoodItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    def __repr__(self) -> str:
        return f"FoodItem({self.id!r}, {self.name!r})"

    @staticmethod
    def from_dict(data):
        model = FoodItemInput.model_validate(data)
        macros = Macros._from_input(model.macros) if model.macros is not None else None
        return FoodItem(model.id, model.name, model.unit, macros)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "unit": self.unit,
            "macros": self.macros.to_dict() if self.macros else None,
        }
