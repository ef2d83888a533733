"""Ingredient domain entity: one recipe line with name, quantity, unit and total cost."""
from typing import Optional
import secrets
import string

from sellsheet.utilities.constants import DEFAULT_UNIT, UNITS
from sellsheet.utilities.numbers import parse_or_zero


ID_ALPHABET = string.digits + string.ascii_lowercase


def new_ingredient_id() -> str:
    """Random 9-character base-36 id."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(9))


class Ingredient:
    def __init__(self, name: str = "", quantity: float = 1, unit: str = DEFAULT_UNIT,
                 cost: float = 0, ingredient_id: Optional[str] = None):
        self.id = ingredient_id or new_ingredient_id()
        self.name = name
        self.quantity = quantity
        self.unit = unit
        # Total cost for the stated quantity, not a per-unit price
        self.cost = cost

    def cost_per_unit(self) -> Optional[float]:
        '''Cost of one unit, or None unless both quantity and cost are positive.'''
        if self.cost > 0 and self.quantity > 0:
            return self.cost / self.quantity
        return None

    def __str__(self) -> str:
        return f"{self.name or '<unnamed>'} - {self.quantity} {self.unit} - {self.cost}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from the persisted shape. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        name = d.get("name")
        unit = d.get("unit")
        quantity = d.get("quantity", 1)
        return Ingredient(
            name=name if isinstance(name, str) else "",
            quantity=parse_or_zero(quantity),
            unit=unit if unit in UNITS else DEFAULT_UNIT,
            cost=parse_or_zero(d.get("cost")),
            ingredient_id=str(d["id"]) if d.get("id") else None,
        )

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "cost": self.cost,
        }
