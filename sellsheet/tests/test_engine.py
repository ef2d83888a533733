import unittest
from sellsheet.domain.BusinessExpenses import BusinessExpenses
from sellsheet.domain.Ingredient import Ingredient
from sellsheet.logic.profit.engine import (
    comprehensive_profit_analysis,
    default_business_expenses,
    default_ingredient,
    suggested_price,
    total_cost,
    validate_ingredient,
)


class TestTotalCost(unittest.TestCase):

    def setUp(self):
        self.ingredients = [
            Ingredient("Flour", 1, "kg", 2),
            Ingredient("Sugar", 1, "kg", 3),
        ]

    def test_sums_ingredient_costs(self):
        self.assertEqual(total_cost(self.ingredients), 5)

    def test_empty_list_is_zero(self):
        self.assertEqual(total_cost([]), 0)

    def test_junk_costs_count_as_zero(self):
        rows = [{"cost": "abc"}, {"cost": None}, {"name": "no cost"}, {"cost": "2.5"}, {"cost": 4}]
        self.assertEqual(total_cost(rows), 6.5)

    def test_negative_cost_reduces_sum(self):
        rows = [{"cost": 10}, {"cost": -4}]
        self.assertEqual(total_cost(rows), 6)

    def test_expenses_only_added_when_requested(self):
        expenses = BusinessExpenses(operating_expenses=1, taxes=1, labor_cost=2, packaging_cost=0.5)
        self.assertEqual(total_cost(self.ingredients, expenses), 5)
        self.assertEqual(total_cost(self.ingredients, expenses, False), 5)
        self.assertEqual(total_cost(self.ingredients, expenses, True), 9.5)
        self.assertEqual(total_cost(self.ingredients, None, True), 5)

    def test_accepts_snapshot_mappings(self):
        expenses = {"operatingExpenses": 1, "interestExpenses": 1, "taxes": 1, "otherExpenses": 1,
                    "laborCost": 1, "overheadCost": 1, "packagingCost": 1}
        rows = [ing.to_dict() for ing in self.ingredients]
        self.assertEqual(total_cost(rows, expenses, True), 12)


class TestSuggestedPrice(unittest.TestCase):

    def test_markup_on_cost(self):
        self.assertEqual(suggested_price(5, 100), 10)
        self.assertEqual(suggested_price(8, 50), 12)

    def test_zero_margin_returns_cost(self):
        self.assertEqual(suggested_price(7.25, 0), 7.25)

    def test_negative_margin_prices_below_cost(self):
        self.assertEqual(suggested_price(10, -50), 5)


class TestComprehensiveProfitAnalysis(unittest.TestCase):

    def setUp(self):
        self.ingredients = [{"name": "A", "quantity": 1, "cost": 2}, {"name": "B", "quantity": 1, "cost": 3}]

    def test_simple_mode(self):
        price = suggested_price(total_cost(self.ingredients), 100)
        self.assertEqual(price, 10)
        result = comprehensive_profit_analysis(self.ingredients, price, default_business_expenses())
        self.assertEqual(result.total_revenue, 10)
        self.assertEqual(result.cogs, 5)
        self.assertEqual(result.gross_profit, 5)
        self.assertAlmostEqual(result.gross_profit_margin, 50.0)
        self.assertEqual(result.total_expenses, 5)
        self.assertEqual(result.net_profit, 5)
        self.assertAlmostEqual(result.net_profit_margin, 50.0)

    def test_advanced_mode_with_override_price(self):
        expenses = BusinessExpenses(operating_expenses=1, taxes=1)
        result = comprehensive_profit_analysis(self.ingredients, 10, expenses, include_expenses=True)
        self.assertEqual(result.cogs, 5)
        self.assertEqual(result.total_expenses, 7)
        self.assertEqual(result.net_profit, 3)
        self.assertAlmostEqual(result.net_profit_margin, 30.0)
        self.assertEqual(result.gross_profit, 5)
        self.assertAlmostEqual(result.gross_profit_margin, 50.0)

    def test_all_seven_categories_count_toward_total_expenses(self):
        expenses = {"operatingExpenses": 1, "interestExpenses": 1, "taxes": 1, "otherExpenses": 1,
                    "laborCost": 1, "overheadCost": 1, "packagingCost": 1}
        result = comprehensive_profit_analysis(self.ingredients, 20, expenses, include_expenses=True)
        self.assertEqual(result.total_expenses, 12)
        self.assertEqual(result.net_profit, 8)

    def test_expenses_ignored_outside_advanced_mode(self):
        expenses = BusinessExpenses(labor_cost=100)
        result = comprehensive_profit_analysis(self.ingredients, 10, expenses)
        self.assertEqual(result.total_expenses, 5)
        self.assertEqual(result.net_profit, 5)

    def test_zero_revenue_guards_margins(self):
        result = comprehensive_profit_analysis([], 0, default_business_expenses())
        self.assertEqual(result.cogs, 0)
        self.assertEqual(result.total_revenue, 0)
        self.assertEqual(result.gross_profit_margin, 0)
        self.assertEqual(result.net_profit_margin, 0)

    def test_negative_revenue_guards_margins(self):
        expenses = BusinessExpenses(taxes=3)
        result = comprehensive_profit_analysis(self.ingredients, -4, expenses, include_expenses=True)
        self.assertEqual(result.gross_profit, -9)
        self.assertEqual(result.net_profit, -12)
        self.assertEqual(result.gross_profit_margin, 0)
        self.assertEqual(result.net_profit_margin, 0)

    def test_empty_ingredients_full_gross_margin(self):
        result = comprehensive_profit_analysis([], 12, default_business_expenses())
        self.assertEqual(result.cogs, 0)
        self.assertAlmostEqual(result.gross_profit_margin, 100.0)

    def test_aliases_follow_canonical_fields(self):
        expenses = BusinessExpenses(overhead_cost=1.5)
        for include in (False, True):
            result = comprehensive_profit_analysis(self.ingredients, 9, expenses, include)
            self.assertEqual(result.ingredients_cost, result.cogs)
            self.assertEqual(result.total_profit, result.net_profit)
            self.assertEqual(result.profit_margin, result.net_profit_margin)
            data = result.to_dict()
            self.assertEqual(data["ingredientsCost"], data["cogs"])
            self.assertEqual(data["totalProfit"], data["netProfit"])
            self.assertEqual(data["profitMargin"], data["netProfitMargin"])

    def test_same_inputs_same_result(self):
        expenses = BusinessExpenses(operating_expenses=1.1, taxes=0.7)
        first = comprehensive_profit_analysis(self.ingredients, 13.37, expenses, True)
        second = comprehensive_profit_analysis(self.ingredients, 13.37, expenses, True)
        self.assertEqual(first, second)

    def test_result_is_read_only(self):
        result = comprehensive_profit_analysis(self.ingredients, 10, None)
        with self.assertRaises(AttributeError):
            result.net_profit = 0


class TestValidateIngredient(unittest.TestCase):

    def test_valid_row(self):
        self.assertTrue(validate_ingredient(Ingredient("Butter", 250, "g", 2.4)))
        self.assertTrue(validate_ingredient({"name": "Salt", "quantity": 1, "cost": 0}))

    def test_blank_row_is_invalid_but_still_costed(self):
        row = {"name": "", "quantity": 0, "cost": 5}
        self.assertFalse(validate_ingredient(row))
        self.assertEqual(total_cost([row]), 5)

    def test_whitespace_name(self):
        self.assertFalse(validate_ingredient(Ingredient("   ", 1, "g", 1)))

    def test_quantity_must_be_positive(self):
        self.assertFalse(validate_ingredient(Ingredient("Milk", 0, "ml", 1)))
        self.assertFalse(validate_ingredient(Ingredient("Milk", -1, "ml", 1)))

    def test_negative_cost(self):
        self.assertFalse(validate_ingredient(Ingredient("Milk", 1, "ml", -0.01)))

    def test_non_numeric_fields(self):
        self.assertFalse(validate_ingredient({"name": "Milk", "quantity": "2", "cost": 1}))
        self.assertFalse(validate_ingredient({"name": "Milk", "quantity": 2, "cost": "abc"}))
        self.assertFalse(validate_ingredient({"name": None, "quantity": 2, "cost": 1}))


class TestDefaults(unittest.TestCase):

    def test_default_ingredient(self):
        ing = default_ingredient()
        self.assertEqual((ing.name, ing.quantity, ing.unit, ing.cost), ("", 1, "g", 0))
        self.assertEqual(len(ing.id), 9)
        self.assertNotEqual(ing.id, default_ingredient().id)
        self.assertEqual(default_ingredient("row-1").id, "row-1")

    def test_default_business_expenses(self):
        expenses = default_business_expenses()
        self.assertEqual(expenses.total(), 0)
        self.assertEqual(set(expenses.to_dict().values()), {0})
        self.assertEqual(len(expenses.to_dict()), 7)


if __name__ == '__main__':
    unittest.main()
