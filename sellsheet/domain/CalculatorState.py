"""CalculatorState: the working snapshot the user edits and the store persists.

Wire shape (also the JSON stored under STORAGE_KEY):
    {
      "ingredients": [ {id, name, quantity, unit, cost}, ... ],
      "margin": <number>,
      "customSellingPrice": <number, 0 = use suggested price>,
      "businessExpenses": { operatingExpenses, interestExpenses, taxes, ... },
      "showAdvancedMode": <bool>,
      "lastUpdated": <ISO timestamp or null>
    }
"""
from typing import List, Optional

from sellsheet.domain.BusinessExpenses import BusinessExpenses
from sellsheet.domain.Ingredient import Ingredient
from sellsheet.utilities.constants import DEFAULT_MARGIN
from sellsheet.utilities.numbers import parse_number, parse_or_zero


class CalculatorState:
    def __init__(self, ingredients: Optional[List[Ingredient]] = None, margin: float = DEFAULT_MARGIN,
                 custom_selling_price: float = 0, business_expenses: Optional[BusinessExpenses] = None,
                 show_advanced_mode: bool = False, last_updated: Optional[str] = None):
        self.ingredients = ingredients[:] if ingredients else [Ingredient()]
        self.margin = margin
        self.custom_selling_price = custom_selling_price
        self.business_expenses = business_expenses or BusinessExpenses()
        self.show_advanced_mode = show_advanced_mode
        self.last_updated = last_updated

    def __repr__(self) -> str:
        return (f"CalculatorState({len(self.ingredients)} ingredients, margin={self.margin}, "
                f"custom_selling_price={self.custom_selling_price}, advanced={self.show_advanced_mode})")

    def copy(self) -> "CalculatorState":
        return CalculatorState.from_dict(self.to_dict())

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        raw_ingredients = d.get("ingredients")
        ingredients = [Ingredient.from_dict(i) for i in raw_ingredients] if isinstance(raw_ingredients, list) else []
        raw_margin = d.get("margin")
        # blank or junk margin keeps the default instead of silently becoming 0
        margin = parse_number(raw_margin)
        if margin is None or (isinstance(raw_margin, str) and not raw_margin.strip()):
            margin = DEFAULT_MARGIN
        advanced = d.get("showAdvancedMode")
        return CalculatorState(
            ingredients=ingredients,
            margin=margin,
            custom_selling_price=parse_or_zero(d.get("customSellingPrice")),
            business_expenses=BusinessExpenses.from_dict(d.get("businessExpenses")),
            show_advanced_mode=bool(advanced) if advanced is not None else False,
            last_updated=d.get("lastUpdated") if isinstance(d.get("lastUpdated"), str) else None,
        )

    def to_dict(self):
        return {
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "margin": self.margin,
            "customSellingPrice": self.custom_selling_price,
            "businessExpenses": self.business_expenses.to_dict(),
            "showAdvancedMode": self.show_advanced_mode,
            "lastUpdated": self.last_updated,
        }
