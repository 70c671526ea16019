"""Allocation entities — the outcome of distributing clients to managers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from distributor.domain.entities.manager import Manager
from distributor.domain.value_objects.enums import AssignmentTier


@dataclass(frozen=True)
class AssignmentRecord:
    """How a single client was routed during a run."""

    client_id: str
    manager_id: str
    tier: AssignmentTier
    office_id: str | None = None
    distance_km: float | None = None  # proximity tier only


@dataclass(frozen=True)
class ClientAllocation:
    manager_id: str
    client_id: str
    client_count: int


def collect_allocations(managers: Iterable[Manager]) -> list[ClientAllocation]:
    """Flatten manager state into (manager, client, final load) triples."""
    return [
        ClientAllocation(
            manager_id=manager.id,
            client_id=client.id,
            client_count=manager.client_count,
        )
        for manager in managers
        for client in manager.clients
    ]
