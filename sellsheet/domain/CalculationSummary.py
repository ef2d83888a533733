"""Everything one screen of the calculator shows, derived from a CalculatorState."""
from dataclasses import dataclass
from typing import Optional, Tuple

from sellsheet.domain.ProfitAnalysis import ProfitAnalysis


@dataclass(frozen=True)
class UnitCost:
    """Per-row hint: what one unit of an ingredient costs, None until both values are positive."""
    ingredient_id: str
    unit: str
    cost_per_unit: Optional[float]

    def to_dict(self):
        return {"id": self.ingredient_id, "unit": self.unit, "costPerUnit": self.cost_per_unit}


@dataclass(frozen=True)
class CalculationSummary:
    total_cost: float
    suggested_price: float
    selling_price: float
    analysis: ProfitAnalysis
    servings: int = 1
    cost_per_serving: Optional[float] = None
    unit_costs: Tuple[UnitCost, ...] = ()

    def to_dict(self):
        return {
            "totalCost": self.total_cost,
            "suggestedPrice": self.suggested_price,
            "sellingPrice": self.selling_price,
            "servings": self.servings,
            "costPerServing": self.cost_per_serving,
            "unitCosts": [u.to_dict() for u in self.unit_costs],
            "analysis": self.analysis.to_dict(),
        }
