from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Warehouse:
    """A fulfilment unit identified by its business-unit code.

    ``archived_at`` being None means the warehouse is active.
    """

    business_unit_code: str
    location: str
    capacity: int
    stock: int
    created_at: datetime | None = None
    archived_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class Location:
    """Read-only constraints of a physical site."""

    identification: str
    max_number_of_warehouses: int
    max_capacity: int
