"""OfficeSelectionPolicy — pick the nearest office with a known location."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from distributor.domain.entities.office import Office
from distributor.domain.errors import NoLocatedOfficesError
from distributor.domain.value_objects.coordinate import Coordinate, distance_km


@dataclass(frozen=True)
class OfficeSelection:
    """Result of the office selection policy."""

    office: Office
    distance_km: float
    reason: str


def select_nearest_office(
    client_location: Coordinate,
    offices: Sequence[Office],
    client_id: str | None = None,
) -> OfficeSelection:
    """Select the geographically nearest office that has a known location.

    Offices without a location count as infinitely far away. On equal
    distances the office listed first wins.

    Raises:
        NoLocatedOfficesError: if no office has a known location.
    """
    best_office: Office | None = None
    best_distance = math.inf
    for office in offices:
        if office.location is None:
            continue
        distance = distance_km(client_location, office.location)
        if distance < best_distance:
            best_office, best_distance = office, distance

    if best_office is None:
        raise NoLocatedOfficesError(client_id)

    return OfficeSelection(
        office=best_office,
        distance_km=round(best_distance, 2),
        reason=f"Nearest office: {best_office.id} ({best_distance:.1f} km)",
    )
