"""JSON writer — serializes client allocations for downstream consumers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter

from distributor.domain.entities.allocation import ClientAllocation

logger = logging.getLogger(__name__)


class ClientAllocationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    manager_id: str
    client_id: str
    client_count: int


_allocations_adapter = TypeAdapter(list[ClientAllocationSchema])


def to_schemas(allocations: Iterable[ClientAllocation]) -> list[ClientAllocationSchema]:
    return [ClientAllocationSchema.model_validate(a) for a in allocations]


def dump_allocations(allocations: Iterable[ClientAllocation], indent: int | None = None) -> str:
    """Serialize allocations to a JSON array, keeping non-ASCII ids readable."""
    return _allocations_adapter.dump_json(to_schemas(allocations), indent=indent).decode("utf-8")


def write_allocations(allocations: Iterable[ClientAllocation], path: Path) -> int:
    """Write allocations to ``path``. Returns the number of records written."""
    schemas = to_schemas(allocations)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_allocations_adapter.dump_json(schemas))
    logger.info("Wrote %d allocations to %s", len(schemas), path)
    return len(schemas)
