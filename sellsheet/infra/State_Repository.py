"""Working-state repository: one JSON snapshot stored under STORAGE_KEY."""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.infra.json_store import atomic_write_json, read_json
from sellsheet.infra.paths import STATE_FILE

logger = logging.getLogger(__name__)


class StateRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else STATE_FILE

    def load(self) -> CalculatorState:
        """Read the saved snapshot; anything unreadable falls back to a fresh state."""
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            logger.info(f"No saved state at {self.path}. Starting from defaults.")
            return CalculatorState()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in state file {self.path}: {e}")
            return CalculatorState()
        if not isinstance(data, dict):
            logger.error(f"Unexpected state content in {self.path}: {type(data).__name__}")
            return CalculatorState()
        return CalculatorState.from_dict(data)

    def save(self, state: CalculatorState) -> CalculatorState:
        stamped = state.copy()
        stamped.last_updated = datetime.now().isoformat()
        atomic_write_json(self.path, stamped.to_dict())
        logger.debug("State saved to %s (%d ingredients)", self.path, len(stamped.ingredients))
        return stamped

    def clear(self) -> CalculatorState:
        return self.save(CalculatorState())
