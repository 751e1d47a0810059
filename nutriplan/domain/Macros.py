"""Macros value object: calories, protein, carbs, fats as supplied by the plan owner."""
from nutriplan.utilities.constants import EMPTY_MACROS, MACRO_FIELDS
from nutriplan.utilities.validators import MacrosInput


class Macros:
    def __init__(self, calories: float = 0, protein: float = 0, carbs: float = 0, fats: float = 0):
        self.calories = calories
        self.protein = protein
        self.carbs = carbs
        self.fats = fats

    def __eq__(self, other):
        if not isinstance(other, Macros):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(self.to_dict().values()))

    def __str__(self) -> str:
        return (f"{round(self.calories)} kcal - Protein: {self.protein}g, "
                f"Carbs: {self.carbs}g, Fats: {self.fats}g")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates Macros from a dictionary; missing or None macros read as zero.'''
        return Macros._from_input(MacrosInput.model_validate(data or EMPTY_MACROS))

    @staticmethod
    def _from_input(model):
        if model is None:
            return Macros()
        return Macros(model.calories, model.protein, model.carbs, model.fats)

    def to_dict(self):
        return {field: getattr(self, field) for field in MACRO_FIELDS}
