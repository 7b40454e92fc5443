from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fulfilment.api.deps import get_db, get_location_locks, get_location_resolver
from fulfilment.domain.locking import LocationLocks
from fulfilment.domain.ports import LocationResolver
import fulfilment.repositories.warehouse as warehouse_repo
from fulfilment.schemas.warehouse import Warehouse, WarehouseCreate, WarehouseReplace
from fulfilment.services.warehouse import (
    archive_warehouse,
    create_warehouse,
    get_warehouse,
    replace_warehouse,
)

router = APIRouter(prefix="/warehouse", tags=["warehouses"])


@router.get("", response_model=list[Warehouse])
def list_warehouses(
    active: bool | None = Query(
        None, description="True: only active, False: only archived, omitted: all"
    ),
    db: Session = Depends(get_db),
):
    """
    List warehouse units ordered by business-unit code.
    """
    warehouses = warehouse_repo.get_all_warehouses(db, active=active)
    return [Warehouse.model_validate(w) for w in warehouses]


@router.post("", response_model=Warehouse, status_code=status.HTTP_201_CREATED)
def create_new_warehouse(
    warehouse_data: WarehouseCreate,
    db: Session = Depends(get_db),
    locations: LocationResolver = Depends(get_location_resolver),
    locks: LocationLocks | None = Depends(get_location_locks),
):
    """
    Create a new warehouse unit.

    The business-unit code must be new, the location must exist and have room
    for another active warehouse of this capacity, and stock must fit capacity.
    """
    warehouse = create_warehouse(
        db,
        locations,
        business_unit_code=warehouse_data.business_unit_code,
        location=warehouse_data.location,
        capacity=warehouse_data.capacity,
        stock=warehouse_data.stock,
        locks=locks,
    )
    return Warehouse.model_validate(warehouse)


@router.get("/{business_unit_code}", response_model=Warehouse)
def get_warehouse_by_code(business_unit_code: str, db: Session = Depends(get_db)):
    warehouse = get_warehouse(db, business_unit_code)
    return Warehouse.model_validate(warehouse)


@router.delete("/{business_unit_code}", status_code=status.HTTP_204_NO_CONTENT)
def archive_warehouse_by_code(business_unit_code: str, db: Session = Depends(get_db)):
    """
    Archive a warehouse unit. The record stays readable but no longer counts
    towards its location's warehouse limit.
    """
    archive_warehouse(db, business_unit_code)


@router.post("/{business_unit_code}/replacement", response_model=Warehouse)
def replace_current_warehouse(
    business_unit_code: str,
    warehouse_data: WarehouseReplace,
    db: Session = Depends(get_db),
):
    """
    Replace the warehouse holding this business-unit code.

    The code in the path wins over any code in the body. Stock must equal the
    current stock and the new capacity must hold it.
    """
    warehouse = replace_warehouse(
        db,
        business_unit_code=business_unit_code,
        location=warehouse_data.location,
        capacity=warehouse_data.capacity,
        stock=warehouse_data.stock,
    )
    return Warehouse.model_validate(warehouse)
