import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import httpx

from geocoding.core.config import GeocoderSettings
from geocoding.core.errors import (
    FetchingError,
    GeocoderError,
    NotInitiatedError,
    ParsingError,
    ServerError,
)
from geocoding.services.google.params import normalize_params, to_query_params
from geocoding.services.google.schemas import GeocoderResponse

logger = logging.getLogger(__name__)

GEOCODING_ENDPOINT = "https://maps.google.com/maps/api/geocode/json"


class Geocoder:
    """Thin async wrapper around Google's geocoding & reverse geocoding endpoint.

    ``options`` are sent with every request (``language``, ``region``, ...).
    See https://developers.google.com/maps/documentation/geocoding/requests-geocoding
    """

    def __init__(
        self,
        api_key: Optional[str],
        options: Optional[Mapping[str, Any]] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key or ""
        self._options = MappingProxyType(dict(options or {}))
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(headers={"accept": "application/json"})

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def is_init(self) -> bool:
        """True if the geocoder has an API key."""

        return bool(self._api_key)

    async def aclose(self) -> None:
        """Close the underlying HTTPX client if this geocoder created it."""

        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Geocoder":
        """Support async context-manager usage."""

        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Ensure an owned HTTP client is closed when leaving a context."""

        await self.aclose()

    def build_url(self, *params: Any) -> str:
        """Return the request URL for the given call shape, without sending it."""

        if not self.is_init:
            raise NotInitiatedError()

        query = normalize_params(*params).to_query()
        merged: Dict[str, Any] = {"key": self._api_key, **self._options, **query}
        return f"{GEOCODING_ENDPOINT}?{to_query_params(merged)}"

    async def from_(self, *params: Any) -> Dict[str, Any]:
        """Geocode an address or reverse geocode a coordinate.

        Accepted parameters:

        * ``from_(latitude, longitude)``
        * ``from_([latitude, longitude])``
        * ``from_({"latitude": ..., "longitude": ...})`` or ``from_({"lat": ..., "lng": ...})``
        * ``from_(address, {"southwest": {"lat", "lng"}, "northeast": {"lat", "lng"}})``
        * ``from_(address)``

        Returns the response body unchanged once its ``status`` is ``OK``.
        Raises a :class:`GeocoderError` subclass otherwise.
        """

        try:
            url = self.build_url(*params)
        except GeocoderError as exc:
            logger.error(f"Geocoding request rejected: {exc.code.name}")
            raise

        logger.debug(f"GET {url.replace(self._api_key, '***')}")
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            logger.error(f"Transport error while geocoding: {exc!r}")
            raise FetchingError(exc) from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error(f"Could not parse geocoding response (HTTP {response.status_code})")
            raise ParsingError(response) from exc

        status = data.get("status") if isinstance(data, dict) else None
        if status != "OK":
            logger.warning(f"Geocoding service answered status={status}")
            raise ServerError(data)

        return data

    async def from_typed(self, *params: Any) -> GeocoderResponse:
        """Same as :meth:`from_`, validated into :class:`GeocoderResponse`."""

        data = await self.from_(*params)
        return GeocoderResponse.model_validate(data)


def create_geocoder_client(
    settings: GeocoderSettings,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Geocoder:
    """Instantiate the geocoder using project settings."""

    api_key = settings.ensure("google_maps_api_key")
    return Geocoder(api_key, settings.request_options(), http_client=http_client)
