"""
Export and Import functionality for the calculator sheet and saved recipes.
"""
import csv
import io
import json
import logging
import math
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from sellsheet.domain.CalculationSummary import CalculationSummary
from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.domain.SavedRecipe import SavedRecipe
from sellsheet.infra.Recipe_Repository import RecipeRepository
from sellsheet.logic.profit.engine import validate_ingredient

logger = logging.getLogger(__name__)

CSV_HEADER = ['Ingredient Name', 'Quantity', 'Unit', 'Cost']


def format_plain_number(value) -> str:
    '''Render a number the way a browser prints it: 1 not 1.0, 0.5 stays 0.5.'''
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, float) and math.isnan(value):
        return 'NaN'
    return repr(value) if isinstance(value, float) else str(value)


def build_csv_rows(state: CalculatorState, summary: CalculationSummary) -> List[List[str]]:
    """Ingredient rows (valid ones only) followed by a summary block.

    Money values stay raw numbers; the profit margin is written as a fraction
    (0.5 for 50%) so spreadsheets can format it as a percentage.
    """
    rows = [list(CSV_HEADER)]
    for ing in state.ingredients:
        if not validate_ingredient(ing):
            continue
        rows.append([ing.name, format_plain_number(ing.quantity), ing.unit, format_plain_number(ing.cost or 0)])
    analysis = summary.analysis
    rows.extend([
        ['', '', '', ''],
        ['Summary', '', '', ''],
        ['Selling Price', '', '', format_plain_number(summary.selling_price)],
        ['Total Cost', '', '', format_plain_number(summary.total_cost)],
        ['Profit', '', '', format_plain_number(analysis.total_profit)],
        ['Profit Margin', '', '', format_plain_number(analysis.profit_margin / 100)],
    ])
    return rows


def export_to_csv(state: CalculatorState, summary: CalculationSummary) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\r\n')
    writer.writerows(build_csv_rows(state, summary))
    return buf.getvalue()


class DataExporter:
    """Export calculator data to files."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def export_saved_recipes(self, recipes: List[SavedRecipe], output_path: Path = None) -> Optional[Path]:
        """Export saved recipes to a JSON file."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = self.data_dir / f"saved_recipes_export_{timestamp}.json"

        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump([r.to_dict() for r in recipes], f, indent=2, ensure_ascii=False)
            logger.info(f"Exported {len(recipes)} saved recipes to {output_path}")
            return Path(output_path)
        except OSError as e:
            logger.error(f"Export failed: {e}")
            return None

    def export_to_csv(self, state: CalculatorState, summary: CalculationSummary,
                      output_path: Path = None) -> Optional[Path]:
        """Write the sheet CSV to disk for Excel compatibility."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = self.data_dir / f"sellsheet_export_{timestamp}.csv"

        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', newline='', encoding='utf-8') as f:
                f.write(export_to_csv(state, summary))
            logger.info(f"Exported sheet to CSV: {output_path}")
            return Path(output_path)
        except OSError as e:
            logger.error(f"CSV export failed: {e}")
            return None


class DataImporter:
    """Import saved recipes exported by DataExporter."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def import_saved_recipes(self, input_path: Path, merge: bool = True, repository=None) -> bool:
        """
        Import saved recipes from a JSON file.

        Args:
            input_path: Path to JSON file containing a list of saved recipes
            merge: If True, keep existing recipes and add new names; if False, replace
        """
        repo = repository or RecipeRepository(self.data_dir / "saved_recipes.json")
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Import failed: {e}")
            return False
        if not isinstance(raw, list):
            logger.error(f"Import failed: {input_path} does not hold a list")
            return False

        incoming = [SavedRecipe.from_dict(entry) for entry in raw if isinstance(entry, dict)]
        final = repo.list_recipes() if merge else []
        # Names stay unique (case-insensitive) and ids stay unique across the store
        taken_names = {r.name.lower() for r in final}
        taken_ids = {r.id for r in final}
        skipped = 0
        for recipe in incoming:
            if not recipe.name or recipe.name.lower() in taken_names or recipe.id in taken_ids:
                skipped += 1
                continue
            final.append(recipe)
            taken_names.add(recipe.name.lower())
            taken_ids.add(recipe.id)
        mode = "merge" if merge else "replace"
        logger.info(f"Imported {len(incoming) - skipped} saved recipes ({mode} mode, {skipped} skipped)")
        repo.replace_all(final)
        return True


def main(argv=None) -> int:
    """Command line entry: ``python -m sellsheet.utilities.export_import csv|backup|restore``."""
    import argparse
    from sellsheet.infra.paths import DATA_DIR
    from sellsheet.infra.State_Repository import StateRepository
    from sellsheet.logic.profit.summary import calculate_summary

    parser = argparse.ArgumentParser(description='Move SellSheet data in and out of files')
    commands = parser.add_subparsers(dest='command', required=True)
    csv_cmd = commands.add_parser('csv', help='Write the working sheet as CSV')
    csv_cmd.add_argument('-o', '--output', type=Path)
    backup_cmd = commands.add_parser('backup', help='Write all saved recipes as JSON')
    backup_cmd.add_argument('-o', '--output', type=Path)
    restore_cmd = commands.add_parser('restore', help='Load saved recipes from a JSON backup')
    restore_cmd.add_argument('source', type=Path)
    restore_cmd.add_argument('--replace', action='store_true', help='Drop existing saved recipes first')
    args = parser.parse_args(argv)

    if args.command == 'restore':
        ok = DataImporter(DATA_DIR).import_saved_recipes(args.source, merge=not args.replace)
        print(f"Restored saved recipes from {args.source}" if ok else "Restore failed")
        return 0 if ok else 1

    exporter = DataExporter(DATA_DIR)
    if args.command == 'csv':
        state = StateRepository().load()
        written = exporter.export_to_csv(state, calculate_summary(state), args.output)
    else:
        written = exporter.export_saved_recipes(RecipeRepository().list_recipes(), args.output)
    if written is None:
        print("Export failed")
        return 1
    print(f"Wrote {written}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
