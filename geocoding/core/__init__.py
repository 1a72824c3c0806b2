"""Configuration and error types shared by the geocoding services."""
from geocoding.core.config import GeocoderSettings
from geocoding.core.errors import (
    ErrorKind,
    FetchingError,
    GeocoderError,
    InvalidParametersError,
    NotInitiatedError,
    ParsingError,
    ServerError,
)

__all__ = [
    "GeocoderSettings",
    "ErrorKind",
    "GeocoderError",
    "NotInitiatedError",
    "InvalidParametersError",
    "FetchingError",
    "ParsingError",
    "ServerError",
]
