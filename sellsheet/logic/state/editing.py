"""Pure editing operations on the calculator state.

Each function returns a new CalculatorState and leaves its argument untouched,
so callers (the API, the store) decide when a change gets persisted.
"""
from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.domain.Ingredient import Ingredient
from sellsheet.utilities.constants import UNITS
from sellsheet.utilities.numbers import parse_or_zero

EDITABLE_FIELDS = ("name", "quantity", "unit", "cost")


def add_ingredient(state: CalculatorState) -> CalculatorState:
    new_state = state.copy()
    new_state.ingredients.append(Ingredient())
    return new_state


def update_ingredient(state: CalculatorState, index: int, field: str, value) -> CalculatorState:
    '''Set one field of the row at index. Numbers go through parse-or-zero.'''
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Unknown ingredient field: {field}")
    if not 0 <= index < len(state.ingredients):
        raise IndexError(f"No ingredient at position {index}")
    new_state = state.copy()
    row = new_state.ingredients[index]
    if field in ("quantity", "cost"):
        setattr(row, field, parse_or_zero(value))
    elif field == "unit":
        if value not in UNITS:
            raise ValueError(f"Unknown unit: {value}")
        row.unit = value
    else:
        row.name = "" if value is None else str(value)
    return new_state


def remove_ingredient(state: CalculatorState, index: int) -> CalculatorState:
    '''Drop the row at index; the last remaining row is never removed.'''
    if len(state.ingredients) <= 1:
        return state.copy()
    if not 0 <= index < len(state.ingredients):
        raise IndexError(f"No ingredient at position {index}")
    new_state = state.copy()
    del new_state.ingredients[index]
    return new_state


def clear_form() -> CalculatorState:
    return CalculatorState()


__all__ = ["add_ingredient", "update_ingredient", "remove_ingredient", "clear_form", "EDITABLE_FIELDS"]
