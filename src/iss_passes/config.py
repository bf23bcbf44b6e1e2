"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    """Upstream service endpoints and request settings."""

    ip_lookup_url: str
    geoip_base_url: str
    pass_service_url: str
    request_timeout: float

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Returns:
            A frozen Settings instance with values from the environment.
        """
        return cls(
            ip_lookup_url=os.getenv("IP_LOOKUP_URL", "https://api.ipify.org"),
            geoip_base_url=os.getenv("GEOIP_BASE_URL", "https://ipvigilante.com"),
            pass_service_url=os.getenv(
                "PASS_SERVICE_URL", "http://api.open-notify.org/iss-pass.json"
            ),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10")),
        )
