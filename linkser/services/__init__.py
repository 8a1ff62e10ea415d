"""Services for state persistence."""

from .state_service import SnapshotError, StateService

__all__ = ["SnapshotError", "StateService"]
