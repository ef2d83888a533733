import unittest
from sellsheet.domain.CalculatorState import CalculatorState


class TestCalculatorState(unittest.TestCase):

    def test_defaults(self):
        state = CalculatorState()
        self.assertEqual(len(state.ingredients), 1)
        self.assertEqual(state.ingredients[0].name, "")
        self.assertEqual(state.margin, 100)
        self.assertEqual(state.custom_selling_price, 0)
        self.assertEqual(state.business_expenses.total(), 0)
        self.assertFalse(state.show_advanced_mode)

    def test_from_snapshot_shape(self):
        state = CalculatorState.from_dict({
            "ingredients": [{"id": "a1", "name": "Flour", "quantity": 2, "unit": "kg", "cost": 3}],
            "margin": 60,
            "customSellingPrice": 12.5,
            "businessExpenses": {"laborCost": 4, "taxes": "1.5"},
            "showAdvancedMode": True,
            "lastUpdated": "2026-10-01T10:00:00",
        })
        self.assertEqual(state.ingredients[0].name, "Flour")
        self.assertEqual(state.margin, 60)
        self.assertEqual(state.custom_selling_price, 12.5)
        self.assertEqual(state.business_expenses.labor_cost, 4)
        self.assertEqual(state.business_expenses.taxes, 1.5)
        self.assertTrue(state.show_advanced_mode)
        self.assertEqual(state.last_updated, "2026-10-01T10:00:00")

    def test_empty_ingredients_get_one_blank_row(self):
        state = CalculatorState.from_dict({"ingredients": []})
        self.assertEqual(len(state.ingredients), 1)

    def test_missing_or_junk_margin_keeps_default(self):
        self.assertEqual(CalculatorState.from_dict({}).margin, 100)
        self.assertEqual(CalculatorState.from_dict({"margin": "lots"}).margin, 100)
        self.assertEqual(CalculatorState.from_dict({"margin": "  "}).margin, 100)
        self.assertEqual(CalculatorState.from_dict({"margin": 0}).margin, 0)

    def test_not_a_dict(self):
        state = CalculatorState.from_dict(["nope"])
        self.assertEqual(state.margin, 100)
        self.assertEqual(len(state.ingredients), 1)

    def test_round_trip_and_copy_independent(self):
        state = CalculatorState.from_dict({
            "ingredients": [{"name": "Cocoa", "quantity": 0.5, "unit": "kg", "cost": 6}],
            "margin": 150, "showAdvancedMode": True,
            "businessExpenses": {"packagingCost": 0.75},
        })
        again = CalculatorState.from_dict(state.to_dict())
        self.assertEqual(again.to_dict(), state.to_dict())
        clone = state.copy()
        clone.ingredients[0].name = "Changed"
        self.assertEqual(state.ingredients[0].name, "Cocoa")


if __name__ == '__main__':
    unittest.main()
