"""External service integrations for geocoding.

- Google: geocoding and reverse geocoding through the Maps geocoding endpoint

Each service module exports:
    - create_*_client: Factory to create the API client
    - Input and response schemas: Pydantic models for the request variants and the response body

Example Usage:
    >>> from geocoding.services.google import create_geocoder_client
    >>> from geocoding.core.config import GeocoderSettings
    >>>
    >>> settings = GeocoderSettings.from_env()
    >>> geocoder = create_geocoder_client(settings)
    >>> body = await geocoder.from_(48.8566, 2.3522)
"""

from geocoding.services.google import (
    Geocoder,
    create_geocoder_client,
    normalize_params,
    GeocoderResponse,
)

__all__ = [
    "Geocoder",
    "create_geocoder_client",
    "normalize_params",
    "GeocoderResponse",
]
