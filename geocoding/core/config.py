"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(slots=True)
class GeocoderSettings:
    """Centralised container for the geocoding credentials and request options."""

    google_maps_api_key: Optional[str] = None
    geocoding_language: Optional[str] = None
    geocoding_region: Optional[str] = None

    @classmethod
    def from_env(cls) -> "GeocoderSettings":
        """Load settings from environment variables."""

        return cls(
            google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY"),
            geocoding_language=os.getenv("GEOCODING_LANGUAGE"),
            geocoding_region=os.getenv("GEOCODING_REGION"),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value

    def request_options(self) -> Dict[str, Any]:
        """Extra query parameters sent with every request."""

        return {
            "language": self.geocoding_language,
            "region": self.geocoding_region,
        }
