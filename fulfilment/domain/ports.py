"""Ports consumed and exposed by the warehouse rules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fulfilment.domain.models import Location, Warehouse


class WarehouseStore(Protocol):
    def get_all(self) -> Sequence[Warehouse]: ...

    def find_by_business_unit_code(self, business_unit_code: str) -> Warehouse | None: ...

    def create(self, warehouse: Warehouse) -> None: ...

    def update(self, warehouse: Warehouse) -> None: ...

    def remove(self, warehouse: Warehouse) -> None: ...


class LocationResolver(Protocol):
    def resolve_by_identifier(self, identifier: str) -> Location:
        """Return the location or raise InvalidReferenceError."""
        ...


class CreateWarehouseOperation(Protocol):
    def create(self, warehouse: Warehouse) -> None: ...


class ReplaceWarehouseOperation(Protocol):
    def replace(self, warehouse: Warehouse) -> None: ...


class ArchiveWarehouseOperation(Protocol):
    def archive(self, warehouse: Warehouse) -> None: ...
