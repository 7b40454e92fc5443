from sqlalchemy.orm import Session

import fulfilment.repositories.warehouse as warehouse_repo
from fulfilment.db.models.warehouse import Warehouse as WarehouseModel
from fulfilment.domain.locking import LocationLocks
from fulfilment.domain.models import Warehouse
from fulfilment.domain.ports import (
    ArchiveWarehouseOperation,
    CreateWarehouseOperation,
    LocationResolver,
    ReplaceWarehouseOperation,
)
from fulfilment.domain.warehouse_activity import WarehouseActivityPolicy
from fulfilment.domain.warehouse_rules import (
    ArchiveWarehouseRule,
    CreateWarehouseRule,
    ReplaceWarehouseRule,
)
from fulfilment.errors import NotFoundError


def get_warehouse(db: Session, business_unit_code: str) -> WarehouseModel:
    """
    Get a warehouse by business-unit code, archived or not.

    Raises:
        NotFoundError: If no warehouse has that code
    """
    warehouse = warehouse_repo.get_warehouse_by_business_unit_code(db, business_unit_code)
    if not warehouse:
        raise NotFoundError(f"Warehouse not found: {business_unit_code}")
    return warehouse


def create_warehouse(
    db: Session,
    locations: LocationResolver,
    business_unit_code: str,
    location: str,
    capacity: int,
    stock: int,
    locks: LocationLocks | None = None,
) -> WarehouseModel:
    """
    Admit a new warehouse through CreateWarehouseRule.

    Raises:
        ConflictError: If the business-unit code already exists
        InvalidReferenceError: If the location does not resolve
        CapacityExceededError: If a location ceiling would be exceeded
        InvalidStateError: If stock exceeds capacity
    """
    rule: CreateWarehouseOperation = CreateWarehouseRule(
        store=warehouse_repo.WarehouseRepository(db),
        locations=locations,
        locks=locks,
    )
    rule.create(
        Warehouse(
            business_unit_code=business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
        )
    )
    return get_warehouse(db, business_unit_code)


def replace_warehouse(
    db: Session,
    business_unit_code: str,
    location: str,
    capacity: int,
    stock: int,
) -> WarehouseModel:
    """
    Replace the warehouse holding ``business_unit_code`` through ReplaceWarehouseRule.

    Raises:
        NotFoundError: If the warehouse doesn't exist
        InvalidStateError: If capacity can't hold current stock or stock differs
    """
    rule: ReplaceWarehouseOperation = ReplaceWarehouseRule(store=warehouse_repo.WarehouseRepository(db))
    rule.replace(
        Warehouse(
            business_unit_code=business_unit_code,
            location=location,
            capacity=capacity,
            stock=stock,
        )
    )
    return get_warehouse(db, business_unit_code)


def archive_warehouse(db: Session, business_unit_code: str) -> WarehouseModel:
    """
    Archive a warehouse through ArchiveWarehouseRule.

    - Validates warehouse exists
    - An already archived warehouse is terminal and is returned untouched

    Raises:
        NotFoundError: If the warehouse doesn't exist
    """
    store = warehouse_repo.WarehouseRepository(db)
    warehouse = store.find_by_business_unit_code(business_unit_code)
    if warehouse is None:
        raise NotFoundError(f"Warehouse not found: {business_unit_code}")

    if WarehouseActivityPolicy().is_archived(archived_at=warehouse.archived_at):
        return get_warehouse(db, business_unit_code)

    rule: ArchiveWarehouseOperation = ArchiveWarehouseRule(store=store)
    rule.archive(warehouse)
    return get_warehouse(db, business_unit_code)
