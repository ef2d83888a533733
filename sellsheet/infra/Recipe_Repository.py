"""Saved recipes repository: named snapshots kept in one JSON list."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.domain.SavedRecipe import SavedRecipe
from sellsheet.infra.json_store import atomic_write_json, read_json
from sellsheet.infra.paths import SAVED_RECIPES_FILE

logger = logging.getLogger(__name__)


class DuplicateRecipeError(ValueError):
    """A saved recipe with the same name (case-insensitive) already exists."""


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else SAVED_RECIPES_FILE

    def _load_raw(self) -> list:
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in saved recipes file: {e}")
            return []
        if not isinstance(data, list):
            logger.error(f"Saved recipes file {self.path} does not hold a list")
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    def list_recipes(self) -> List[SavedRecipe]:
        return [SavedRecipe.from_dict(entry) for entry in self._load_raw()]

    def get_recipe(self, recipe_id: str) -> Optional[SavedRecipe]:
        for recipe in self.list_recipes():
            if recipe.id == recipe_id:
                return recipe
        return None

    def save_recipe(self, name: str, state: CalculatorState, servings: int = 1) -> SavedRecipe:
        name = name.strip()
        if not name:
            raise ValueError("Recipe name cannot be empty")
        recipes = self.list_recipes()
        if any(r.name.lower() == name.lower() for r in recipes):
            raise DuplicateRecipeError(f"Recipe with this name already exists: {name}")
        recipe = SavedRecipe(name=name, state=state.copy(), servings=servings)
        recipes.append(recipe)
        self._write(recipes)
        logger.info(f"Saved recipe '{name}' ({recipe.id})")
        return recipe

    def delete_recipe(self, recipe_id: str) -> bool:
        recipes = self.list_recipes()
        remaining = [r for r in recipes if r.id != recipe_id]
        if len(remaining) == len(recipes):
            logger.warning(f"Saved recipe not found for delete: {recipe_id}")
            return False
        self._write(remaining)
        logger.info(f"Deleted saved recipe {recipe_id}")
        return True

    def replace_all(self, recipes: List[SavedRecipe]) -> None:
        self._write(recipes)

    def _write(self, recipes: List[SavedRecipe]) -> None:
        atomic_write_json(self.path, [r.to_dict() for r in recipes])
