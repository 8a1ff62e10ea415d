"""Service to load and save the whole application state."""

import json
import logging
from pathlib import Path

from ..models.app_state import AppState
from ..models.storage import APP_KEY, Storage

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    """A snapshot file could not be read or written."""


class StateService:
    """Persists AppState snapshots to storage and to JSON files."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def load_state(self) -> AppState:
        """Load the last saved state, or a fresh one if nothing is stored."""
        data = self.storage.get_value(APP_KEY)
        if data is None:
            logger.info("No saved state found, starting empty")
            return AppState()

        state = AppState.from_snapshot(data)
        logger.info(f"Loaded {len(state.registry)} links from {self.storage.db_path}")
        return state

    def save_state(self, state: AppState):
        """Save the whole state under the application key."""
        self.storage.set_value(APP_KEY, state.to_snapshot())
        logger.info(f"Saved {len(state.registry)} links to {self.storage.db_path}")

    def read_snapshot_file(self, path: Path) -> AppState:
        """Load a state snapshot from a JSON file.

        Args:
            path: Path to the snapshot file

        Returns:
            AppState built from the file contents

        Raises:
            SnapshotError: if the file can't be read or isn't valid JSON
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
            raise SnapshotError(f"Error reading snapshot file {path}: {e}") from e

        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot file {path} does not contain an object")

        logger.info(f"Read snapshot from {path}")
        return AppState.from_snapshot(data)

    def write_snapshot_file(self, path: Path, state: AppState):
        """Write the state as a pretty-printed JSON snapshot file."""
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(state.to_snapshot(), f, indent=2, ensure_ascii=False)
        except IOError as e:
            raise SnapshotError(f"Error writing snapshot file {path}: {e}") from e

        logger.info(f"Wrote snapshot to {path}")
