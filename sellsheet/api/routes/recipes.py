import logging

from fastapi import APIRouter, HTTPException, Query

from sellsheet.infra.Recipe_Repository import DuplicateRecipeError, RecipeRepository
from sellsheet.infra.State_Repository import StateRepository
from sellsheet.infra.paths import SAVED_RECIPES_FILE, STATE_FILE
from sellsheet.logic.profit.summary import calculate_summary
from sellsheet.utilities.validators import SavedRecipeInput
from sellsheet.events.event_helpers import (
    publish_recipe_deleted,
    publish_recipe_saved,
    publish_state_changed,
)

router = APIRouter(prefix="/api/recipes")
logger = logging.getLogger(__name__)


def recipe_repository() -> RecipeRepository:
    return RecipeRepository(SAVED_RECIPES_FILE)


def state_repository() -> StateRepository:
    return StateRepository(STATE_FILE)


def _with_summary(recipe):
    data = recipe.to_dict()
    data["summary"] = calculate_summary(recipe.state, recipe.servings).to_dict()
    return data


@router.get("")
def list_saved_recipes(include_summary: bool = Query(default=True)):
    """All saved recipes, each with its own profit summary."""
    saved = recipe_repository().list_recipes()
    items = [_with_summary(r) if include_summary else r.to_dict() for r in saved]
    return {"count": len(items), "recipes": items}


@router.post("")
def save_recipe(payload: SavedRecipeInput):
    """Save the posted sheet, or the current working sheet when none is posted."""
    state = payload.state.to_domain() if payload.state is not None else state_repository().load()
    try:
        recipe = recipe_repository().save_recipe(payload.name, state, payload.servings)
    except DuplicateRecipeError:
        raise HTTPException(status_code=400, detail="Recipe with this name already exists")
    publish_recipe_saved(recipe)
    return {"status": "success", "recipe": _with_summary(recipe)}


@router.get("/{recipe_id}")
def get_saved_recipe(recipe_id: str):
    recipe = recipe_repository().get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return _with_summary(recipe)


@router.delete("/{recipe_id}")
def delete_saved_recipe(recipe_id: str):
    if not recipe_repository().delete_recipe(recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    publish_recipe_deleted(recipe_id)
    return {"status": "deleted", "id": recipe_id}


@router.post("/{recipe_id}/load")
def load_saved_recipe(recipe_id: str):
    """Copy a saved recipe into the working sheet."""
    recipe = recipe_repository().get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    saved = state_repository().save(recipe.state)
    publish_state_changed(saved, "load_recipe")
    logger.info("Loaded saved recipe %s into the working sheet", recipe_id)
    return saved.to_dict()
