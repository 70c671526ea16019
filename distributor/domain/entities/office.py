"""Office entity — a business unit with a physical location."""

from __future__ import annotations

from dataclasses import dataclass, field

from distributor.domain.entities.manager import Manager
from distributor.domain.value_objects.coordinate import Coordinate


@dataclass(eq=False)
class Office:
    id: str
    location: Coordinate | None = None
    managers: list[Manager] = field(default_factory=list)
