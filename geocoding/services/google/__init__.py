"""Google geocoding API integration.

This module provides the async client for Google's geocoding and reverse
geocoding endpoint, plus the argument normalizer it relies on.

Public API:
    - Geocoder: Async HTTP client for the geocoding endpoint
    - create_geocoder_client: Factory function to create the client from settings
    - normalize_params: Map a call shape to its query variant
    - to_query_params: Serialize a query mapping into a query string
    - GeocoderResponse: Pydantic model of the service response
"""
from geocoding.services.google.client import (
    GEOCODING_ENDPOINT,
    Geocoder,
    create_geocoder_client,
)
from geocoding.services.google.params import (
    encode_bounds,
    encode_component,
    normalize_params,
    to_query_params,
)
from geocoding.services.google.schemas import (
    Address,
    AddressWithBounds,
    Bounds,
    CoordinatePair,
    Coordinates,
    GeocodeQuery,
    GeocoderResponse,
    GeocodingResult,
    LatLng,
    LatLngObject,
)

__all__ = [
    "GEOCODING_ENDPOINT",
    "Geocoder",
    "create_geocoder_client",
    "encode_bounds",
    "encode_component",
    "normalize_params",
    "to_query_params",
    "Address",
    "AddressWithBounds",
    "Bounds",
    "CoordinatePair",
    "Coordinates",
    "GeocodeQuery",
    "GeocoderResponse",
    "GeocodingResult",
    "LatLng",
    "LatLngObject",
]
