from fulfilment.core.config import settings
from fulfilment.db import SessionLocal
from fulfilment.domain.locking import LocationLocks
from fulfilment.domain.ports import LocationResolver
from fulfilment.repositories.location import LocationGateway

_location_gateway = LocationGateway()
_location_locks = LocationLocks()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_location_resolver() -> LocationResolver:
    """Location reference data used to admit new warehouses."""
    return _location_gateway


def get_location_locks() -> LocationLocks | None:
    """Per-location creation locks, or None when serialization is disabled."""
    if not settings.serialize_creation_per_location:
        return None
    return _location_locks
