"""SavedRecipe domain entity: a named copy of the calculator state."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from sellsheet.domain.CalculatorState import CalculatorState


class SavedRecipe:
    def __init__(self, name: str = "", state: Optional[CalculatorState] = None, servings: int = 1,
                 recipe_id: Optional[str] = None, created_at: Optional[str] = None):
        self.id = recipe_id or str(uuid4())
        self.name = name
        self.servings = servings
        self.state = state or CalculatorState()
        self.created_at = created_at or datetime.now().isoformat(timespec="seconds")

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.state.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            servings = int(d.get("servings", 1))
        except (TypeError, ValueError):
            servings = 1
        return SavedRecipe(
            name=str(d.get("name", "")).strip(),
            state=CalculatorState.from_dict(d.get("state")),
            servings=servings if servings > 0 else 1,
            recipe_id=d.get("id"),
            created_at=d.get("createdAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "servings": self.servings,
            "createdAt": self.created_at,
            "state": self.state.to_dict(),
        }
