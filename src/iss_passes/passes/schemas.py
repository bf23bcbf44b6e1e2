"""Pydantic schemas for upstream responses and the passes API.

Upstream schemas are strict: a mistyped field is rejected rather than coerced.
"""

from pydantic import BaseModel, ConfigDict, Field


class IPLookupResponse(BaseModel):
    """Body returned by the IP echo service."""

    model_config = ConfigDict(strict=True)

    ip: str = Field(min_length=1)


class Coordinates(BaseModel):
    """Approximate location resolved from an IP address."""

    model_config = ConfigDict(strict=True)

    latitude: float
    longitude: float


class GeoIPResponse(BaseModel):
    """Body returned by the geo-IP service; only ``data`` is read."""

    model_config = ConfigDict(strict=True)

    data: Coordinates


class PassTime(BaseModel):
    """A single predicted overhead pass."""

    model_config = ConfigDict(strict=True)

    risetime: int
    duration: int


class PassTimesResponse(BaseModel):
    """Body returned by the pass-prediction service."""

    model_config = ConfigDict(strict=True)

    response: list[PassTime]


class PassesResponse(BaseModel):
    """Response schema for the passes endpoint."""

    passes: list[PassTime]
