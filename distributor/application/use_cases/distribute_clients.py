"""DistributeClientsUseCase — full pipeline: pools → geocode → assign."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from distributor.application.location_resolver import (
    CityLookups,
    LocationResolver,
    cancel_pending,
)
from distributor.domain.entities.allocation import (
    AssignmentRecord,
    ClientAllocation,
    collect_allocations,
)
from distributor.domain.entities.client import Client
from distributor.domain.entities.manager import Manager
from distributor.domain.entities.office import Office
from distributor.domain.policies.least_loaded import pick_least_loaded
from distributor.domain.policies.manager_pools import (
    FOREIGN_POOL,
    VIP_POOL,
    ManagerPools,
    build_manager_pools,
)
from distributor.domain.policies.office_selection import select_nearest_office
from distributor.domain.value_objects.enums import AssignmentTier, GeoStatus

logger = logging.getLogger(__name__)


class ClientDistributor:
    """Assigns clients to managers in a single greedy pass.

    Routing rules, in priority order:
      1. VIP client  →  least-loaded manager of the VIP pool.
      2. Foreign client, blank city or unresolved location
         →  least-loaded manager of the foreign-client pool.
      3. Otherwise  →  nearest office, then its least-loaded manager.

    Manager state is mutated in place; the returned records only describe
    what happened.
    """

    def __init__(self, resolver: LocationResolver, pools: ManagerPools):
        self._resolver = resolver
        self._pools = pools

    async def distribute(self, clients: Sequence[Client]) -> list[AssignmentRecord]:
        lookups = self._resolver.fetch_city_locations(clients)
        records: list[AssignmentRecord] = []
        try:
            for client in clients:
                records.append(await self._assign(client, lookups))
        finally:
            # A configuration error stops the run with lookups still in flight
            cancel_pending(lookups)
        return records

    async def _assign(self, client: Client, lookups: CityLookups) -> AssignmentRecord:
        if client.is_vip:
            manager = pick_least_loaded(self._pools.vip, VIP_POOL, client.id)
            manager.assign(client)
            logger.debug("Client %s → VIP manager %s", client.id, manager.id)
            return AssignmentRecord(
                client_id=client.id, manager_id=manager.id, tier=AssignmentTier.VIP,
            )

        await self._settle_location(client, lookups)

        if (
            not self._resolver.is_home_country(client.country)
            or not client.has_city()
            or client.location is None
        ):
            manager = pick_least_loaded(self._pools.foreign, FOREIGN_POOL, client.id)
            manager.assign(client)
            logger.debug(
                "Client %s → foreign-client manager %s (%s)",
                client.id, manager.id, client.geo_status.value,
            )
            return AssignmentRecord(
                client_id=client.id, manager_id=manager.id, tier=AssignmentTier.FOREIGN,
            )

        office_sel = select_nearest_office(client.location, self._pools.offices, client.id)
        manager = pick_least_loaded(
            office_sel.office.managers, f"office:{office_sel.office.id}", client.id,
        )
        manager.assign(client)
        logger.debug("Client %s → manager %s (%s)", client.id, manager.id, office_sel.reason)
        return AssignmentRecord(
            client_id=client.id,
            manager_id=manager.id,
            tier=AssignmentTier.PROXIMITY,
            office_id=office_sel.office.id,
            distance_km=office_sel.distance_km,
        )

    async def _settle_location(self, client: Client, lookups: CityLookups) -> None:
        if client.geo_status != GeoStatus.PENDING or client.location is not None:
            return

        # A foreign client may share its city with a domestic one
        lookup = lookups.get(client.city)
        if lookup is not None:
            client.record_location(await lookup)

        if not self._resolver.is_home_country(client.country):
            client.geo_status = GeoStatus.ABROAD
        elif not client.has_city():
            client.geo_status = GeoStatus.NO_CITY


@dataclass
class DistributionResult:
    """Summary of one distribution run."""

    records: list[AssignmentRecord]
    allocations: list[ClientAllocation]
    tier_counts: dict[str, int] = field(default_factory=dict)


class DistributeClientsUseCase:
    """Build manager pools and distribute a batch of clients."""

    def __init__(self, resolver: LocationResolver, foreign_office_ids: Iterable[str]):
        self._resolver = resolver
        self._foreign_office_ids = list(foreign_office_ids)

    async def execute(
        self,
        clients: Sequence[Client],
        managers: Sequence[Manager],
        offices: Sequence[Office],
    ) -> DistributionResult:
        logger.info(
            "Distributing %d clients across %d managers in %d offices",
            len(clients), len(managers), len(offices),
        )
        pools = build_manager_pools(managers, offices, self._foreign_office_ids)
        records = await ClientDistributor(self._resolver, pools).distribute(clients)

        tier_counts = Counter(r.tier.value for r in records)
        logger.info(
            "Distribution complete: %d VIP, %d foreign, %d by proximity",
            tier_counts[AssignmentTier.VIP.value],
            tier_counts[AssignmentTier.FOREIGN.value],
            tier_counts[AssignmentTier.PROXIMITY.value],
        )
        return DistributionResult(
            records=records,
            allocations=collect_allocations(managers),
            tier_counts={tier.value: tier_counts[tier.value] for tier in AssignmentTier},
        )
