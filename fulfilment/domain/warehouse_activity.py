from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class WarehouseActivityPolicy:
    """Defines what it means for a warehouse to be active.

    Semantics (intentionally centralized):
    - A warehouse is active if archived_at is None
    - Archival is terminal: an archived warehouse never counts towards the
      density ceiling of its location again.
    """

    def is_active(self, *, archived_at: datetime | None) -> bool:
        return archived_at is None

    def is_archived(self, *, archived_at: datetime | None) -> bool:
        return archived_at is not None

    def sqlalchemy_active_predicate(self, *, archived_col):
        """Build a SQLAlchemy predicate implementing the active rule.

        Kept here so repositories can translate the policy into SQL without
        redefining it.
        """
        return archived_col.is_(None)

    def sqlalchemy_inactive_predicate(self, *, archived_col):
        """Build a SQLAlchemy predicate implementing the archived rule."""
        return archived_col.isnot(None)
