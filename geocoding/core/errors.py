"""Error taxonomy for geocoding requests.

Every failure raised by :class:`geocoding.services.google.Geocoder` is a
:class:`GeocoderError` whose ``code`` tells the caller at which stage the call
failed.  ``origin`` carries whatever the stage had in hand when it failed
(transport exception, raw response, parsed body).
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional


class ErrorKind(IntEnum):
    """Stage at which a geocoding call failed."""

    NOT_INITIATED = 0
    INVALID_PARAMETERS = 1
    FETCHING = 2
    PARSING = 3
    SERVER = 4


class GeocoderError(Exception):
    """Base class for every classified geocoding failure."""

    code: ErrorKind

    def __init__(self, message: str, *, origin: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.origin = origin

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.name}, message={self.message!r})"


class NotInitiatedError(GeocoderError):
    """Raised when the client has no API key."""

    code = ErrorKind.NOT_INITIATED

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "Geocoder isn't initialized. Create it with your app's api key as first parameter."
        )


class InvalidParametersError(GeocoderError):
    """Raised when the arguments match none of the accepted call shapes.

    ``origin`` holds the raw argument tuple.
    """

    code = ErrorKind.INVALID_PARAMETERS


class FetchingError(GeocoderError):
    """Raised when the HTTP request could not be completed."""

    code = ErrorKind.FETCHING

    def __init__(self, origin: Exception) -> None:
        super().__init__("Error while fetching. Check your network.", origin=origin)


class ParsingError(GeocoderError):
    """Raised when the response body is not valid JSON.

    ``origin`` holds the unparsed ``httpx.Response``.
    """

    code = ErrorKind.PARSING

    def __init__(self, origin: Any) -> None:
        super().__init__(
            "Error while parsing response's body into JSON. "
            "The response is in the error's 'origin' field. Try to parse it yourself.",
            origin=origin,
        )


class ServerError(GeocoderError):
    """Raised when the service answers with a status other than ``OK``."""

    code = ErrorKind.SERVER

    def __init__(self, origin: Any) -> None:
        super().__init__(
            "Error from the server while geocoding. "
            "The received data is in the error's 'origin' field. Check it for more information.",
            origin=origin,
        )

    @property
    def status(self) -> Optional[str]:
        if isinstance(self.origin, dict):
            return self.origin.get("status")
        return None

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.origin, dict):
            return self.origin.get("error_message")
        return None
