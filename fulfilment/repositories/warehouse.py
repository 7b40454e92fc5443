import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fulfilment.db.models.warehouse import Warehouse as WarehouseModel
from fulfilment.domain.models import Warehouse
from fulfilment.domain.warehouse_activity import WarehouseActivityPolicy
from fulfilment.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def to_domain(db_warehouse: WarehouseModel) -> Warehouse:
    return Warehouse(
        business_unit_code=db_warehouse.business_unit_code,
        location=db_warehouse.location,
        capacity=db_warehouse.capacity,
        stock=db_warehouse.stock,
        created_at=db_warehouse.created_at,
        archived_at=db_warehouse.archived_at,
    )


def get_warehouse_by_business_unit_code(
    db: Session, business_unit_code: str
) -> WarehouseModel | None:
    """Get a warehouse by its business-unit code, archived or not."""
    return (
        db.query(WarehouseModel)
        .filter(WarehouseModel.business_unit_code == business_unit_code)
        .first()
    )


def get_all_warehouses(db: Session, active: bool | None = None) -> list[WarehouseModel]:
    """
    Get all warehouses ordered by business-unit code.

    Args:
        active: None returns every warehouse, True only active ones and
                False only archived ones. The "active" definition is a domain
                rule centralized in WarehouseActivityPolicy.
    """
    query = db.query(WarehouseModel)

    policy = WarehouseActivityPolicy()
    if active is True:
        query = query.filter(
            policy.sqlalchemy_active_predicate(archived_col=WarehouseModel.archived_at)
        )
    elif active is False:
        query = query.filter(
            policy.sqlalchemy_inactive_predicate(archived_col=WarehouseModel.archived_at)
        )

    return query.order_by(WarehouseModel.business_unit_code).all()


def create_warehouse(
    db: Session,
    business_unit_code: str,
    location: str,
    capacity: int,
    stock: int,
    created_at: datetime | None = None,
) -> WarehouseModel:
    """
    Create a new warehouse in the database. Pure data access - no business logic.

    Raises:
        ConflictError: If the unique index already holds the business-unit code
    """
    db_warehouse = WarehouseModel(
        business_unit_code=business_unit_code,
        location=location,
        capacity=capacity,
        stock=stock,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(db_warehouse)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Insert of warehouse %s rejected by the database", business_unit_code)
        raise ConflictError(f"Business unit code {business_unit_code} already exists") from exc
    db.refresh(db_warehouse)
    return db_warehouse


def update_warehouse(
    db: Session,
    business_unit_code: str,
    location: str,
    capacity: int,
    stock: int,
    archived_at: datetime | None,
) -> WarehouseModel:
    """
    Overwrite the mutable fields of a warehouse.

    The business-unit code and created_at are never changed.
    """
    warehouse = get_warehouse_by_business_unit_code(db, business_unit_code)
    if not warehouse:
        raise NotFoundError(f"Warehouse {business_unit_code} not found")

    warehouse.location = location
    warehouse.capacity = capacity
    warehouse.stock = stock
    warehouse.archived_at = archived_at

    db.commit()
    db.refresh(warehouse)
    return warehouse


def delete_warehouse(db: Session, business_unit_code: str) -> None:
    """Physically delete a warehouse. Pure data access - no business logic."""
    warehouse = get_warehouse_by_business_unit_code(db, business_unit_code)
    if not warehouse:
        raise NotFoundError(f"Warehouse {business_unit_code} not found")

    db.delete(warehouse)
    db.commit()


class WarehouseRepository:
    """WarehouseStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_all(self) -> Sequence[Warehouse]:
        return [to_domain(w) for w in get_all_warehouses(self.db)]

    def find_by_business_unit_code(self, business_unit_code: str) -> Warehouse | None:
        db_warehouse = get_warehouse_by_business_unit_code(self.db, business_unit_code)
        return to_domain(db_warehouse) if db_warehouse else None

    def create(self, warehouse: Warehouse) -> None:
        create_warehouse(
            self.db,
            business_unit_code=warehouse.business_unit_code,
            location=warehouse.location,
            capacity=warehouse.capacity,
            stock=warehouse.stock,
            created_at=warehouse.created_at,
        )

    def update(self, warehouse: Warehouse) -> None:
        update_warehouse(
            self.db,
            business_unit_code=warehouse.business_unit_code,
            location=warehouse.location,
            capacity=warehouse.capacity,
            stock=warehouse.stock,
            archived_at=warehouse.archived_at,
        )

    def remove(self, warehouse: Warehouse) -> None:
        delete_warehouse(self.db, warehouse.business_unit_code)
