"""ISS pass lookup service chaining IP, geo-IP and pass-prediction requests."""

import logging
from enum import Enum
from typing import TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from iss_passes.config import Settings
from iss_passes.exceptions import MalformedResponseError, UpstreamStatusError
from iss_passes.passes.schemas import (
    Coordinates,
    GeoIPResponse,
    IPLookupResponse,
    PassTime,
    PassTimesResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PipelineState(str, Enum):
    """Progress of a single pipeline run."""

    IDLE = "idle"
    AWAITING_IP = "awaiting_ip"
    AWAITING_COORDINATES = "awaiting_coordinates"
    AWAITING_PASSES = "awaiting_passes"
    DONE = "done"
    FAILED = "failed"


def _transition(previous: PipelineState, state: PipelineState) -> PipelineState:
    """Log a pipeline state change and return the new state."""
    level = logging.INFO if state is PipelineState.FAILED else logging.DEBUG
    logger.log(
        level,
        "Pipeline state changed",
        extra={"previous_state": previous.value, "state": state.value},
    )
    return state


class PassService:
    """Service for finding upcoming ISS passes over the caller's location.

    Each lookup is a single blocking GET through a shared ``requests.Session``.
    The service holds no per-run state, so one instance can serve concurrent
    callers.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self._settings = settings
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def _get_json(
        self,
        step: str,
        url: str,
        schema: type[ModelT],
        params: dict[str, str | float] | None = None,
    ) -> ModelT:
        """Issue a GET request and decode the body into ``schema``.

        Raises:
            requests.RequestException: If the request could not complete.
            UpstreamStatusError: If the status code is not exactly 200.
            MalformedResponseError: If the body does not match ``schema``.
        """
        try:
            response = self._session.get(
                url, params=params, timeout=self._settings.request_timeout
            )
        except requests.RequestException as exc:
            logger.error(
                "Transport error during lookup",
                extra={"step": step, "url": url, "error": str(exc)},
            )
            raise

        if response.status_code != 200:
            logger.warning(
                "Unexpected status from upstream",
                extra={"step": step, "status_code": response.status_code},
            )
            raise UpstreamStatusError(step, response.status_code, response.text)

        try:
            return schema.model_validate_json(response.text)
        except ValidationError as exc:
            raise MalformedResponseError(step, str(exc)) from exc

    def fetch_my_ip(self) -> str:
        """Look up the caller's public IP address.

        Returns:
            The IP address as a string, e.g. '162.245.144.188'.
        """
        body = self._get_json(
            "IP", self._settings.ip_lookup_url, IPLookupResponse, params={"format": "json"}
        )
        logger.info("Resolved public IP", extra={"ip": body.ip})
        return body.ip

    def fetch_coordinates(self, ip: str) -> Coordinates:
        """Resolve an IP address to approximate coordinates.

        Args:
            ip: Address to look up. It is URL-encoded before use as a path segment.

        Returns:
            The latitude and longitude reported by the geo-IP service.
        """
        url = f"{self._settings.geoip_base_url.rstrip('/')}/{quote(ip, safe='')}"
        body = self._get_json("coordinates", url, GeoIPResponse)
        logger.info(
            "Resolved coordinates",
            extra={"latitude": body.data.latitude, "longitude": body.data.longitude},
        )
        return body.data

    def fetch_pass_times(self, coordinates: Coordinates) -> list[PassTime]:
        """Fetch predicted ISS passes for the given coordinates.

        Returns:
            Pass records in the order the upstream service returned them.
        """
        body = self._get_json(
            "ISS pass times",
            self._settings.pass_service_url,
            PassTimesResponse,
            params={"lat": coordinates.latitude, "lon": coordinates.longitude},
        )
        return body.response

    def next_passes_for_my_location(self) -> list[PassTime]:
        """Find the next ISS passes over the caller's current location.

        Runs the IP, coordinate and pass lookups in order. The first failure is
        raised unchanged and no later lookup is attempted.

        Returns:
            The pass records from the pass-prediction service, unmodified.

        Raises:
            requests.RequestException: If any request could not complete.
            UpstreamStatusError: If any service answers with a non-200 status.
            MalformedResponseError: If any body lacks the expected fields.
        """
        state = PipelineState.IDLE
        try:
            state = _transition(state, PipelineState.AWAITING_IP)
            ip = self.fetch_my_ip()
            state = _transition(state, PipelineState.AWAITING_COORDINATES)
            coordinates = self.fetch_coordinates(ip)
            state = _transition(state, PipelineState.AWAITING_PASSES)
            passes = self.fetch_pass_times(coordinates)
        except Exception:
            _transition(state, PipelineState.FAILED)
            raise

        _transition(state, PipelineState.DONE)
        logger.info("Pass lookup complete", extra={"pass_count": len(passes)})
        return passes

    def close(self) -> None:
        """Close the HTTP session if this service created it."""
        if self._owns_session:
            self._session.close()
