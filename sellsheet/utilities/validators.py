"""
Input validation schemas using Pydantic for request bodies.

Field names follow Python style; aliases accept the camelCase keys of the
persisted snapshot, so a saved sheet can be posted back unchanged.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sellsheet.domain.BusinessExpenses import BusinessExpenses
from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.domain.Ingredient import Ingredient
from sellsheet.utilities.constants import DEFAULT_MARGIN, DEFAULT_UNIT, MAX_MARGIN, MIN_MARGIN, UNITS
from sellsheet.utilities.numbers import parse_or_zero


class IngredientInput(BaseModel):
    """Schema for one ingredient row. Blank rows are allowed while editing."""
    id: Optional[str] = None
    name: str = Field("", max_length=100)
    quantity: float = 1
    unit: str = DEFAULT_UNIT
    cost: float = 0

    @field_validator('name', mode='before')
    @classmethod
    def name_as_text(cls, v):
        return "" if v is None else v

    @field_validator('quantity', 'cost', mode='before')
    @classmethod
    def coerce_number(cls, v):
        """Junk or missing numbers become 0 instead of failing the request."""
        return parse_or_zero(v)

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v):
        if v not in UNITS:
            raise ValueError(f"Unit must be one of: {', '.join(UNITS)}")
        return v

    def to_domain(self) -> Ingredient:
        return Ingredient(name=self.name, quantity=self.quantity, unit=self.unit,
                          cost=self.cost, ingredient_id=self.id)


class BusinessExpensesInput(BaseModel):
    """Schema for the seven expense categories."""
    model_config = ConfigDict(populate_by_name=True)

    operating_expenses: float = Field(0, alias='operatingExpenses')
    interest_expenses: float = Field(0, alias='interestExpenses')
    taxes: float = 0
    other_expenses: float = Field(0, alias='otherExpenses')
    labor_cost: float = Field(0, alias='laborCost')
    overhead_cost: float = Field(0, alias='overheadCost')
    packaging_cost: float = Field(0, alias='packagingCost')

    @field_validator('*', mode='before')
    @classmethod
    def coerce_number(cls, v):
        return parse_or_zero(v)

    def to_domain(self) -> BusinessExpenses:
        return BusinessExpenses(**self.model_dump())


class CalculatorStateInput(BaseModel):
    """Schema for the whole sheet, in the persisted snapshot shape."""
    model_config = ConfigDict(populate_by_name=True)

    ingredients: List[IngredientInput] = Field(default_factory=list)
    margin: float = Field(DEFAULT_MARGIN, ge=MIN_MARGIN, le=MAX_MARGIN)
    custom_selling_price: float = Field(0, alias='customSellingPrice')
    business_expenses: BusinessExpensesInput = Field(default_factory=BusinessExpensesInput, alias='businessExpenses')
    show_advanced_mode: bool = Field(False, alias='showAdvancedMode')

    @field_validator('custom_selling_price', mode='before')
    @classmethod
    def coerce_price(cls, v):
        return parse_or_zero(v)

    def to_domain(self) -> CalculatorState:
        return CalculatorState(
            ingredients=[ing.to_domain() for ing in self.ingredients],
            margin=self.margin,
            custom_selling_price=self.custom_selling_price,
            business_expenses=self.business_expenses.to_domain(),
            show_advanced_mode=self.show_advanced_mode,
        )


class IngredientUpdateInput(BaseModel):
    """Schema for editing a single field of one row."""
    field: str = Field(..., pattern=r'^(name|quantity|unit|cost)$')
    value: Any = None


class SavedRecipeInput(BaseModel):
    """Schema for saving the current (or a posted) sheet under a name."""
    name: str = Field(..., min_length=1, max_length=200)
    servings: int = Field(1, ge=1, le=1000)
    state: Optional[CalculatorStateInput] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()
