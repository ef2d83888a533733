from fastapi import (
    FastAPI,
    Query,
    APIRouter,
    HTTPException,
    Response,
)

from typing import Optional
import logging

from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.infra.State_Repository import StateRepository
from sellsheet.infra.paths import STATE_FILE
from sellsheet.infra.pdf_utils import generate_pdf_for_analysis
from sellsheet.logic.profit.summary import calculate_summary
from sellsheet.logic.state.editing import add_ingredient, remove_ingredient, update_ingredient
from sellsheet.utilities.constants import (
    APP_NAME, APP_TAGLINE, CSV_FILENAME, DEFAULT_MARGIN, MAX_MARGIN, MIN_MARGIN,
    PDF_FILENAME, STORAGE_KEY, UNITS,
)
from sellsheet.utilities.export_import import export_to_csv
from sellsheet.utilities.validators import CalculatorStateInput, IngredientUpdateInput
from sellsheet.events.event_helpers import publish_state_changed, publish_state_cleared
from sellsheet.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from sellsheet.api.routes import recipes

# Logging
logger = logging.getLogger("sellsheet_app")

# Initialize FastAPI app
app = FastAPI(title=f"{APP_NAME} {APP_TAGLINE} API")
router = APIRouter()


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for the activity feed when the app starts."""
    start_event_observers()
    logger.info("Web observers for sheet events started")


# -------------------- Helpers --------------------
def state_repository() -> StateRepository:
    """Built per request so tests can point STATE_FILE somewhere else."""
    return StateRepository(STATE_FILE)


def _save_and_publish(state: CalculatorState, reason: str) -> CalculatorState:
    saved = state_repository().save(state)
    publish_state_changed(saved, reason)
    return saved


# -------------------- API: reference data --------------------
@app.get('/api/units')
def api_units():
    return {
        'units': list(UNITS),
        'default_margin': DEFAULT_MARGIN,
        'min_margin': MIN_MARGIN,
        'max_margin': MAX_MARGIN,
        'storage_key': STORAGE_KEY,
    }


# -------------------- API: working sheet --------------------
@router.get('/api/state')
def api_get_state():
    return state_repository().load().to_dict()


@router.put('/api/state')
def api_put_state(payload: CalculatorStateInput):
    saved = _save_and_publish(payload.to_domain(), "replace")
    return saved.to_dict()


@router.delete('/api/state')
def api_clear_state():
    cleared = state_repository().clear()
    publish_state_cleared(cleared)
    logger.info("Sheet cleared")
    return cleared.to_dict()


@router.post('/api/state/ingredients')
def api_add_ingredient():
    saved = _save_and_publish(add_ingredient(state_repository().load()), "add_ingredient")
    return saved.to_dict()


@router.patch('/api/state/ingredients/{index}')
def api_update_ingredient(index: int, payload: IngredientUpdateInput):
    state = state_repository().load()
    try:
        new_state = update_ingredient(state, index, payload.field, payload.value)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _save_and_publish(new_state, "update_ingredient").to_dict()


@router.delete('/api/state/ingredients/{index}')
def api_remove_ingredient(index: int):
    state = state_repository().load()
    try:
        new_state = remove_ingredient(state, index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _save_and_publish(new_state, "remove_ingredient").to_dict()


# -------------------- API: calculations --------------------
@router.get('/api/calculate')
def api_calculate_saved(servings: int = Query(default=1, ge=1)):
    state = state_repository().load()
    return calculate_summary(state, servings).to_dict()


@router.post('/api/calculate')
def api_calculate(payload: CalculatorStateInput, servings: int = Query(default=1, ge=1)):
    """Calculate for a posted sheet without persisting it."""
    return calculate_summary(payload.to_domain(), servings).to_dict()


# -------------------- API: activity feed --------------------
@router.get('/api/events')
def api_events(since: Optional[int] = Query(default=0, ge=0)):
    events = get_web_events(since or 0)
    return {'events': events, 'count': len(events), 'last_id': events[-1]['id'] if events else since}


# -------------------- Exports --------------------
@router.get("/export_pdf")
def export_pdf():
    state = state_repository().load()
    pdf_bytes = generate_pdf_for_analysis(state, calculate_summary(state))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={PDF_FILENAME}"},
    )


@router.get("/export_csv")
def export_csv():
    state = state_repository().load()
    return Response(
        content=export_to_csv(state, calculate_summary(state)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
    )


app.include_router(router)
app.include_router(recipes.router)
