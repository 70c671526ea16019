"""LeastLoadedPolicy — greedy load-balanced manager selection."""

from __future__ import annotations

from collections.abc import Sequence

from distributor.domain.entities.manager import Manager
from distributor.domain.errors import EmptyPoolError


def pick_least_loaded(
    candidates: Sequence[Manager],
    pool_name: str,
    client_id: str | None = None,
) -> Manager:
    """Pick the manager with the smallest current client count.

    Ties go to the manager that comes first in pool order, so the result is
    deterministic for a given input ordering.

    Args:
        candidates: managers of the selected pool.
        pool_name: used in the error message only.
        client_id: client being assigned, used in the error message only.

    Raises:
        EmptyPoolError: if the pool has no managers.
    """
    if not candidates:
        raise EmptyPoolError(pool_name, client_id)

    # min() keeps the first of equal keys
    return min(candidates, key=lambda m: m.client_count)
