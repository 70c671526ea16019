"""ManagerPools — split managers into office, VIP and foreign-client pools."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from distributor.domain.entities.manager import Manager
from distributor.domain.entities.office import Office
from distributor.domain.errors import DuplicateOfficeError, UnknownOfficeError

logger = logging.getLogger(__name__)

VIP_POOL = "vip"
FOREIGN_POOL = "foreign"


def office_key(office_id: str) -> str:
    """Case-insensitive, locale-independent key for office identifiers.

    Only letter case is ignored: surrounding whitespace is significant and
    no full case folding is applied ("Straße" and "STRASSE" stay distinct).
    """
    return office_id.lower()


@dataclass
class ManagerPools:
    offices: list[Office]
    office_map: dict[str, Office]
    vip: list[Manager] = field(default_factory=list)
    foreign: list[Manager] = field(default_factory=list)

    def get_office(self, office_id: str) -> Office | None:
        return self.office_map.get(office_key(office_id))

    @property
    def managers(self) -> list[Manager]:
        """Every manager exactly once, in office order."""
        return [m for office in self.offices for m in office.managers]


def _append_once(pool: list[Manager], manager: Manager) -> None:
    if not any(m is manager for m in pool):
        pool.append(manager)


def build_manager_pools(
    managers: Iterable[Manager],
    offices: Sequence[Office],
    foreign_office_ids: Iterable[str],
) -> ManagerPools:
    """Attach managers to their home offices and collect the special pools.

    Every manager goes to its own office's pool. VIP managers also go to the
    VIP pool, managers of the foreign-client offices to the foreign pool.
    Calling this again with the same objects does not duplicate membership.

    Raises:
        DuplicateOfficeError: if two offices share an identifier.
        UnknownOfficeError: if a manager's office is not among ``offices``.
    """
    office_map: dict[str, Office] = {}
    for office in offices:
        key = office_key(office.id)
        if key in office_map:
            raise DuplicateOfficeError(office.id, office_map[key].id)
        office_map[key] = office

    foreign_keys = {office_key(o) for o in foreign_office_ids}
    pools = ManagerPools(offices=list(offices), office_map=office_map)

    for manager in managers:
        office = office_map.get(office_key(manager.office_id))
        if office is None:
            raise UnknownOfficeError(manager.id, manager.office_id)

        _append_once(office.managers, manager)
        if manager.is_vip:
            _append_once(pools.vip, manager)
        if office_key(manager.office_id) in foreign_keys:
            _append_once(pools.foreign, manager)

    logger.info(
        "Manager pools: %d offices, %d VIP managers, %d foreign-client managers",
        len(office_map), len(pools.vip), len(pools.foreign),
    )
    for office in offices:
        if office.location is None:
            logger.warning(
                "Office '%s' has no coordinates — it will be excluded from nearest-office selection",
                office.id,
            )
    return pools
