"""Wires a CalculatorState through the engine the way the calculator screen does."""
from sellsheet.domain.CalculationSummary import CalculationSummary, UnitCost
from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.logic.profit.engine import comprehensive_profit_analysis, suggested_price, total_cost


def resolve_selling_price(custom_selling_price: float, suggested: float) -> float:
    '''A custom price of 0 (or less) means "unset": fall back to the suggested price.'''
    return custom_selling_price if custom_selling_price > 0 else suggested


def calculate_summary(state: CalculatorState, servings: int = 1) -> CalculationSummary:
    advanced = state.show_advanced_mode
    expenses = state.business_expenses
    total = total_cost(state.ingredients, expenses, advanced)
    suggested = suggested_price(total, state.margin)
    selling = resolve_selling_price(state.custom_selling_price, suggested)
    analysis = comprehensive_profit_analysis(state.ingredients, selling, expenses, advanced)
    return CalculationSummary(
        total_cost=total,
        suggested_price=suggested,
        selling_price=selling,
        analysis=analysis,
        servings=servings,
        cost_per_serving=total / servings if servings > 0 else None,
        unit_costs=tuple(UnitCost(ing.id, ing.unit, ing.cost_per_unit()) for ing in state.ingredients),
    )


__all__ = ["calculate_summary", "resolve_selling_price"]
