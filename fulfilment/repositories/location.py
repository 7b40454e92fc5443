from fulfilment.domain.models import Location
from fulfilment.errors import InvalidReferenceError

# Reference data: identification, max number of warehouses, max capacity.
LOCATIONS: tuple[Location, ...] = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class LocationGateway:
    """LocationResolver over static, read-only reference data."""

    def __init__(self, locations: tuple[Location, ...] = LOCATIONS) -> None:
        self._by_identifier = {loc.identification: loc for loc in locations}

    def resolve_by_identifier(self, identifier: str) -> Location:
        location = self._by_identifier.get(identifier)
        if location is None:
            raise InvalidReferenceError(f"Location not found: {identifier}")
        return location
