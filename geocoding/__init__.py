"""Async client for Google's geocoding and reverse geocoding endpoint."""
from geocoding.core import (
    ErrorKind,
    FetchingError,
    GeocoderError,
    GeocoderSettings,
    InvalidParametersError,
    NotInitiatedError,
    ParsingError,
    ServerError,
)
from geocoding.services.google import (
    Geocoder,
    GeocoderResponse,
    create_geocoder_client,
)

__all__ = [
    "Geocoder",
    "GeocoderResponse",
    "GeocoderSettings",
    "create_geocoder_client",
    "ErrorKind",
    "GeocoderError",
    "NotInitiatedError",
    "InvalidParametersError",
    "FetchingError",
    "ParsingError",
    "ServerError",
]
