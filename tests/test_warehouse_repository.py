from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from fulfilment.domain.models import Warehouse
from fulfilment.errors import ConflictError, NotFoundError
from fulfilment.repositories.warehouse import (
    WarehouseRepository,
    create_warehouse,
    get_all_warehouses,
    get_warehouse_by_business_unit_code,
)


def test_find_by_business_unit_code_seed_data(db: Session):
    """The migration seeds MWH.001 at ZWOLLE-001."""
    found = WarehouseRepository(db).find_by_business_unit_code("MWH.001")

    assert found is not None
    assert found.location == "ZWOLLE-001"
    assert found.capacity == 100
    assert found.stock == 10
    assert found.created_at is not None
    assert found.archived_at is None


def test_find_by_business_unit_code_missing(db: Session):
    assert WarehouseRepository(db).find_by_business_unit_code("GHOST") is None


def test_get_all_includes_seed_data(db: Session):
    codes = [w.business_unit_code for w in WarehouseRepository(db).get_all()]

    assert codes == ["MWH.001", "MWH.012", "MWH.023"]


def test_create_and_retrieve(db: Session):
    repository = WarehouseRepository(db)
    created_at = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    repository.create(
        Warehouse(
            business_unit_code="BU-001",
            location="AMSTERDAM-002",
            capacity=500,
            stock=100,
            created_at=created_at,
        )
    )

    found = repository.find_by_business_unit_code("BU-001")
    assert found.location == "AMSTERDAM-002"
    assert found.capacity == 500
    assert found.stock == 100
    assert found.created_at == created_at


def test_timestamps_are_returned_in_utc(db: Session):
    """Seeded rows and offsets other than UTC both read back as aware UTC."""
    repository = WarehouseRepository(db)
    amsterdam = timezone(timedelta(hours=2))

    repository.create(
        Warehouse(
            business_unit_code="BU-003",
            location="EINDHOVEN-001",
            capacity=20,
            stock=5,
            created_at=datetime(2025, 6, 1, 14, 0, tzinfo=amsterdam),
        )
    )

    seeded = repository.find_by_business_unit_code("MWH.001")
    assert seeded.created_at == datetime(2024, 7, 1, tzinfo=timezone.utc)
    assert seeded.created_at.utcoffset() == timedelta(0)

    created = repository.find_by_business_unit_code("BU-003")
    assert created.created_at == datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
    assert created.created_at.utcoffset() == timedelta(0)


def test_create_duplicate_code_is_conflict(db: Session):
    """A code already in the unique index is a conflict, not a database error."""
    with pytest.raises(ConflictError, match="MWH.001 already exists"):
        create_warehouse(db, "MWH.001", "AMSTERDAM-002", capacity=10, stock=0)

    found = get_warehouse_by_business_unit_code(db, "MWH.001")
    assert found.location == "ZWOLLE-001"
    assert [w.business_unit_code for w in get_all_warehouses(db)] == [
        "MWH.001",
        "MWH.012",
        "MWH.023",
    ]


def test_create_without_created_at_defaults_to_now(db: Session):
    repository = WarehouseRepository(db)

    repository.create(Warehouse("BU-002", "HELMOND-001", capacity=10, stock=0))

    assert repository.find_by_business_unit_code("BU-002").created_at is not None


def test_update_overwrites_mutable_fields(db: Session):
    repository = WarehouseRepository(db)
    existing = repository.find_by_business_unit_code("MWH.012")
    original_created_at = existing.created_at

    existing.location = "AMSTERDAM-002"
    existing.capacity = 75
    existing.created_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
    repository.update(existing)

    updated = repository.find_by_business_unit_code("MWH.012")
    assert updated.location == "AMSTERDAM-002"
    assert updated.capacity == 75
    assert updated.stock == 5
    assert updated.created_at == original_created_at


def test_update_sets_archived_at(db: Session):
    repository = WarehouseRepository(db)
    existing = repository.find_by_business_unit_code("MWH.023")

    existing.archived_at = datetime(2025, 2, 1, tzinfo=timezone.utc)
    repository.update(existing)

    assert repository.find_by_business_unit_code("MWH.023").archived_at is not None


def test_update_missing_warehouse(db: Session):
    with pytest.raises(NotFoundError):
        WarehouseRepository(db).update(Warehouse("GHOST", "ZWOLLE-001", capacity=1, stock=0))


def test_remove_seeded(db: Session):
    repository = WarehouseRepository(db)
    to_remove = repository.find_by_business_unit_code("MWH.023")

    repository.remove(to_remove)

    assert repository.find_by_business_unit_code("MWH.023") is None
    assert get_warehouse_by_business_unit_code(db, "MWH.023") is None


def test_get_all_warehouses_active_filter(db: Session):
    repository = WarehouseRepository(db)
    archived = repository.find_by_business_unit_code("MWH.001")
    archived.archived_at = datetime(2025, 2, 1, tzinfo=timezone.utc)
    repository.update(archived)

    active_codes = [w.business_unit_code for w in get_all_warehouses(db, active=True)]
    archived_codes = [w.business_unit_code for w in get_all_warehouses(db, active=False)]
    all_codes = [w.business_unit_code for w in get_all_warehouses(db)]

    assert active_codes == ["MWH.012", "MWH.023"]
    assert archived_codes == ["MWH.001"]
    assert all_codes == ["MWH.001", "MWH.012", "MWH.023"]
