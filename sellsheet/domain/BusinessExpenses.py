"""Business expense categories folded into total cost in advanced mode."""
from sellsheet.utilities.numbers import parse_or_zero

# attribute name -> persisted (camelCase) key
EXPENSE_FIELDS = {
    "operating_expenses": "operatingExpenses",  # rent, salaries, marketing, utilities
    "interest_expenses": "interestExpenses",    # loan and credit card interest
    "taxes": "taxes",
    "other_expenses": "otherExpenses",
    "labor_cost": "laborCost",
    "overhead_cost": "overheadCost",
    "packaging_cost": "packagingCost",
}


class BusinessExpenses:
    def __init__(self, operating_expenses: float = 0, interest_expenses: float = 0,
                 taxes: float = 0, other_expenses: float = 0, labor_cost: float = 0,
                 overhead_cost: float = 0, packaging_cost: float = 0):
        self.operating_expenses = operating_expenses
        self.interest_expenses = interest_expenses
        self.taxes = taxes
        self.other_expenses = other_expenses
        self.labor_cost = labor_cost
        self.overhead_cost = overhead_cost
        self.packaging_cost = packaging_cost

    def total(self) -> float:
        return sum(parse_or_zero(getattr(self, attr)) for attr in EXPENSE_FIELDS)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BusinessExpenses):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        parts = ", ".join(f"{attr}={getattr(self, attr)}" for attr in EXPENSE_FIELDS)
        return f"BusinessExpenses({parts})"

    @staticmethod
    def from_dict(data):
        '''Accepts camelCase or snake_case keys; missing or junk values become 0.'''
        d = dict(data) if isinstance(data, dict) else {}
        values = {}
        for attr, key in EXPENSE_FIELDS.items():
            raw = d.get(key, d.get(attr))
            values[attr] = parse_or_zero(raw)
        return BusinessExpenses(**values)

    def to_dict(self):
        return {key: getattr(self, attr) for attr, key in EXPENSE_FIELDS.items()}
