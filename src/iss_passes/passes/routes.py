"""API routes for ISS pass lookups."""

import asyncio
from typing import Annotated

import requests
from fastapi import APIRouter, Depends, HTTPException, Request, status

from iss_passes.exceptions import MalformedResponseError, UpstreamStatusError
from iss_passes.passes.schemas import PassesResponse
from iss_passes.passes.service import PassService

router = APIRouter(prefix="/api/v1", tags=["passes"])


def get_pass_service(request: Request) -> PassService:
    """FastAPI dependency that retrieves the PassService from app state."""
    service: PassService = request.app.state.pass_service
    return service


@router.get("/passes", response_model=PassesResponse, summary="Next ISS passes overhead")
async def next_passes(
    service: Annotated[PassService, Depends(get_pass_service)],
) -> PassesResponse:
    """Return the next ISS passes over the location of this server's public IP.

    Args:
        service: Injected PassService instance.

    Returns:
        A PassesResponse with the pass records from the prediction service.
    """
    loop = asyncio.get_running_loop()

    try:
        passes = await loop.run_in_executor(None, service.next_passes_for_my_location)
    except (UpstreamStatusError, MalformedResponseError) as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc
    except requests.Timeout as exc:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=str(exc),
        ) from exc
    except requests.RequestException as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    return PassesResponse(passes=passes)
