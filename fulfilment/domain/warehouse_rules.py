from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import nullcontext
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fulfilment.domain.locking import LocationLocks
from fulfilment.domain.models import Warehouse
from fulfilment.domain.ports import LocationResolver, WarehouseStore
from fulfilment.domain.warehouse_activity import WarehouseActivityPolicy
from fulfilment.errors import (
    CapacityExceededError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class CreateWarehouseRule:
    """Admission of a new warehouse.

    Checks run in order and the first violation wins:
    1. The business-unit code is not taken (active or archived)   -> ConflictError
    2. The location resolves (resolver raises otherwise)          -> InvalidReferenceError
    3. Active warehouses at the location < max_number_of_warehouses -> CapacityExceededError
    4. capacity <= location.max_capacity                          -> CapacityExceededError
    5. stock <= capacity                                          -> InvalidStateError

    Nothing is persisted unless every check passes. When ``locks`` is given
    the checks and the insert run while the location's lock is held.
    """

    store: WarehouseStore
    locations: LocationResolver
    locks: LocationLocks | None = None
    clock: Callable[[], datetime] = field(default=_utcnow)
    policy: WarehouseActivityPolicy = field(default_factory=WarehouseActivityPolicy)

    def create(self, warehouse: Warehouse) -> None:
        guard = self.locks.hold(warehouse.location) if self.locks is not None else nullcontext()
        with guard:
            self._admit(warehouse)
            warehouse.created_at = self.clock()
            self.store.create(warehouse)
        logger.info(
            "Warehouse %s created at %s", warehouse.business_unit_code, warehouse.location
        )

    def _admit(self, warehouse: Warehouse) -> None:
        if self.store.find_by_business_unit_code(warehouse.business_unit_code) is not None:
            logger.warning("Rejected duplicate business unit code %s", warehouse.business_unit_code)
            raise ConflictError(
                f"Business unit code {warehouse.business_unit_code} already exists"
            )

        location = self.locations.resolve_by_identifier(warehouse.location)

        active_count = sum(
            1
            for existing in self.store.get_all()
            if existing.location == warehouse.location
            and self.policy.is_active(archived_at=existing.archived_at)
        )
        if active_count >= location.max_number_of_warehouses:
            logger.warning(
                "Rejected %s: location %s already holds %d active warehouses",
                warehouse.business_unit_code,
                location.identification,
                active_count,
            )
            raise CapacityExceededError(
                f"Maximum number of warehouses reached for location {location.identification}"
            )

        if warehouse.capacity > location.max_capacity:
            raise CapacityExceededError(
                f"Warehouse capacity {warehouse.capacity} exceeds the maximum capacity "
                f"{location.max_capacity} of location {location.identification}"
            )

        if warehouse.stock > warehouse.capacity:
            raise InvalidStateError(
                f"Stock {warehouse.stock} exceeds the warehouse capacity {warehouse.capacity}"
            )


@dataclass(frozen=True, slots=True)
class ReplaceWarehouseRule:
    """Replacement of an existing warehouse sharing its business-unit code.

    - The current record must exist                       -> NotFoundError
    - The new capacity must hold the *current* stock       -> InvalidStateError
    - The replacement must declare the current stock       -> InvalidStateError

    Location, capacity and stock are taken from the replacement; the
    business-unit code, created_at and archived_at of the current record are
    kept. The new location's ceilings are not re-checked and archived records
    are not rejected.
    """

    store: WarehouseStore

    def replace(self, warehouse: Warehouse) -> None:
        current = self.store.find_by_business_unit_code(warehouse.business_unit_code)
        if current is None:
            raise NotFoundError(f"Warehouse {warehouse.business_unit_code} not found")

        if warehouse.capacity < current.stock:
            raise InvalidStateError(
                f"New capacity {warehouse.capacity} cannot accommodate current stock {current.stock}"
            )

        if warehouse.stock != current.stock:
            raise InvalidStateError(
                f"Replacement stock {warehouse.stock} must match current stock {current.stock}"
            )

        warehouse.created_at = current.created_at
        warehouse.archived_at = current.archived_at
        self.store.update(warehouse)
        logger.info("Warehouse %s replaced", warehouse.business_unit_code)


@dataclass(frozen=True, slots=True)
class ArchiveWarehouseRule:
    """Soft-deletes an in-hand warehouse by stamping archived_at.

    Callers resolve the record first; no existence check happens here.
    """

    store: WarehouseStore
    clock: Callable[[], datetime] = field(default=_utcnow)

    def archive(self, warehouse: Warehouse) -> None:
        warehouse.archived_at = self.clock()
        self.store.update(warehouse)
        logger.info("Warehouse %s archived", warehouse.business_unit_code)
