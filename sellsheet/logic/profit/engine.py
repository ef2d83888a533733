"""Profit analysis engine.

Pure functions from ingredient costs and business expenses to cost totals, a
suggested price and a gross/net profit breakdown. Every function accepts the
domain objects or the plain mappings of the persisted snapshot, e.g.

    ingredients = [{"name": "Flour", "quantity": 1, "unit": "kg", "cost": 2}]
    expenses = {"operatingExpenses": 1, "taxes": 1}

Two margins appear here and they are not the same thing:
  - the input margin is a markup on cost (100% doubles cost to get price);
  - the result margins are profit as a share of revenue, and are 0 whenever
    revenue is not strictly positive.
"""
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from sellsheet.domain.BusinessExpenses import EXPENSE_FIELDS, BusinessExpenses
from sellsheet.domain.Ingredient import Ingredient
from sellsheet.domain.ProfitAnalysis import ProfitAnalysis
from sellsheet.utilities.numbers import as_number, parse_or_zero


def _field(record: Any, attr: str, key: Optional[str] = None, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        if key is not None and key in record:
            return record[key]
        return record.get(attr, default)
    return getattr(record, attr, default)


def _expenses_sum(expenses: Any) -> float:
    if isinstance(expenses, BusinessExpenses):
        return expenses.total()
    return sum(parse_or_zero(_field(expenses, attr, key)) for attr, key in EXPENSE_FIELDS.items())


def default_ingredient(ingredient_id: Optional[str] = None) -> Ingredient:
    return Ingredient(ingredient_id=ingredient_id)


def default_business_expenses() -> BusinessExpenses:
    return BusinessExpenses()


def total_cost(ingredients: Iterable[Any], expenses: Any = None, include_expenses: bool = False) -> float:
    '''Sum of ingredient costs, plus every expense category when include_expenses is set.

    Costs that are missing or not numeric count as 0. Negative costs are summed
    as-is; filter with validate_ingredient first when that matters.
    '''
    ingredients_cost = sum((parse_or_zero(_field(ing, "cost")) for ing in ingredients), 0.0)
    if include_expenses and expenses is not None:
        return ingredients_cost + _expenses_sum(expenses)
    return ingredients_cost


def suggested_price(total: float, margin_percent: float) -> float:
    return total * (1 + margin_percent / 100)


def gross_profit(revenue: float, cogs: float) -> float:
    return revenue - cogs


def gross_profit_margin(profit: float, revenue: float) -> float:
    return (profit / revenue) * 100 if revenue > 0 else 0


def total_expenses(cogs: float, expenses: Any) -> float:
    return cogs + _expenses_sum(expenses)


def net_profit(revenue: float, expenses_total: float) -> float:
    return revenue - expenses_total


def net_profit_margin(profit: float, revenue: float) -> float:
    return (profit / revenue) * 100 if revenue > 0 else 0


def comprehensive_profit_analysis(ingredients: Iterable[Any], selling_price: float, expenses: Any = None,
                                  include_expenses: bool = False) -> ProfitAnalysis:
    """Full gross/net breakdown at the given selling price.

    COGS is always ingredients only; business expenses only ever enter
    total_expenses, and only in advanced mode.
    """
    cogs = total_cost(ingredients)
    revenue = selling_price
    gross = gross_profit(revenue, cogs)
    if include_expenses and expenses is not None:
        expenses_total = total_expenses(cogs, expenses)
    else:
        expenses_total = cogs
    net = net_profit(revenue, expenses_total)
    return ProfitAnalysis(
        total_revenue=revenue,
        cogs=cogs,
        gross_profit=gross,
        gross_profit_margin=gross_profit_margin(gross, revenue),
        total_expenses=expenses_total,
        net_profit=net,
        net_profit_margin=net_profit_margin(net, revenue),
    )


def validate_ingredient(ingredient: Any) -> bool:
    """True when the row is complete enough to export: a name, quantity > 0, cost >= 0."""
    name = _field(ingredient, "name")
    quantity = as_number(_field(ingredient, "quantity"))
    cost = as_number(_field(ingredient, "cost"))
    if not isinstance(name, str) or quantity is None or cost is None:
        return False
    return name.strip() != "" and quantity > 0 and cost >= 0


__all__ = [
    "total_cost", "suggested_price", "gross_profit", "gross_profit_margin",
    "total_expenses", "net_profit", "net_profit_margin",
    "comprehensive_profit_analysis", "validate_ingredient",
    "default_ingredient", "default_business_expenses",
]
