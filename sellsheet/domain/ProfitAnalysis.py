"""ProfitAnalysis: read-only result of one engine run."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ProfitAnalysis:
    total_revenue: float
    cogs: float
    gross_profit: float
    gross_profit_margin: float
    total_expenses: float
    net_profit: float
    net_profit_margin: float

    # Simple-mode names for callers that do not distinguish gross from net
    @property
    def ingredients_cost(self) -> float:
        return self.cogs

    @property
    def total_profit(self) -> float:
        return self.net_profit

    @property
    def profit_margin(self) -> float:
        return self.net_profit_margin

    def to_dict(self):
        return {
            "totalRevenue": self.total_revenue,
            "cogs": self.cogs,
            "grossProfit": self.gross_profit,
            "grossProfitMargin": self.gross_profit_margin,
            "totalExpenses": self.total_expenses,
            "netProfit": self.net_profit,
            "netProfitMargin": self.net_profit_margin,
            "ingredientsCost": self.ingredients_cost,
            "totalProfit": self.total_profit,
            "profitMargin": self.profit_margin,
        }
