"""Distribution endpoint — run a batch over the configured CSV data."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from distributor.adapters.output.json_writer import ClientAllocationSchema, to_schemas
from distributor.application.use_cases.distribute_clients import DistributeClientsUseCase
from distributor.config import settings
from distributor.domain.errors import ConfigurationError
from distributor.infrastructure.api.dependencies import get_distribute_uc
from distributor.tools.distribute import run_distribution

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distribution", tags=["distribution"])


class DistributionResponse(BaseModel):
    status: str
    total_assigned: int
    by_tier: dict[str, int]
    result_path: str | None
    allocations: list[ClientAllocationSchema]


@router.post("", response_model=DistributionResponse)
async def distribute_all(
    write_result: bool = True,
    use_case: DistributeClientsUseCase = Depends(get_distribute_uc),
):
    """Distribute all clients from the data directory and return the allocations."""
    data_dir = Path(settings.csv_data_path)
    output = Path(settings.result_path) if write_result else None

    try:
        result = await run_distribution(data_dir, use_case, output)
    except FileNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConfigurationError as e:
        logger.exception("Distribution aborted")
        raise HTTPException(status_code=422, detail=str(e))

    return DistributionResponse(
        status="ok",
        total_assigned=len(result.records),
        by_tier=result.tier_counts,
        result_path=str(output) if output else None,
        allocations=to_schemas(result.allocations),
    )
