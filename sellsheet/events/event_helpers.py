"""Event helper utilities.

Quick import:
    from sellsheet.events.event_helpers import (
        publish_state_changed, publish_state_cleared,
        publish_recipe_saved, publish_recipe_deleted,
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import (
    publish,
    STATE_CHANGED, STATE_CLEARED, RECIPE_SAVED, RECIPE_DELETED,
)

__all__ = [
    'publish_state_changed', 'publish_state_cleared',
    'publish_recipe_saved', 'publish_recipe_deleted',
]

def publish_state_changed(state: Any, reason: str = "update"):
    """Publish a state.changed event after the sheet was saved."""
    publish(STATE_CHANGED, {'state': state, 'reason': reason})

def publish_state_cleared(state: Any):
    publish(STATE_CLEARED, {'state': state})

def publish_recipe_saved(recipe: Any):
    publish(RECIPE_SAVED, {'recipe': recipe})

def publish_recipe_deleted(recipe_id: str):
    publish(RECIPE_DELETED, {'recipe_id': recipe_id})
