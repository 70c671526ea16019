"""Client entity — a customer waiting to be assigned to a manager."""

from dataclasses import dataclass

from distributor.domain.value_objects.coordinate import Coordinate
from distributor.domain.value_objects.enums import GeoStatus


@dataclass(eq=False)
class Client:
    id: str
    country: str
    city: str
    is_vip: bool = False
    location: Coordinate | None = None
    geo_status: GeoStatus = GeoStatus.PENDING

    def has_city(self) -> bool:
        return bool(self.city and self.city.strip())

    def is_located(self) -> bool:
        return self.location is not None

    def record_location(self, location: Coordinate | None) -> None:
        """Store the lookup outcome. A client's location is settled only once."""
        if self.geo_status != GeoStatus.PENDING:
            raise ValueError(f"Location of client {self.id!r} is already settled ({self.geo_status.value})")
        self.location = location
        self.geo_status = GeoStatus.RESOLVED if location is not None else GeoStatus.FAILED
