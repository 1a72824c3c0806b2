"""Argument normalization and query-string encoding for the geocoding endpoint."""
from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from pydantic import ValidationError

from geocoding.core.errors import InvalidParametersError
from geocoding.services.google.schemas import (
    Address,
    AddressWithBounds,
    Bounds,
    CoordinatePair,
    Coordinates,
    GeocodeQuery,
    LatLngObject,
    format_coordinate,
)

logger = logging.getLogger(__name__)

# Characters left untouched by JavaScript's encodeURIComponent, on top of
# the alphanumerics and "_.-~" that quote() never escapes.
_COMPONENT_SAFE = "!*'()"


def _is_numeric(value: Any) -> bool:
    """True for finite numbers and for strings that parse as one."""

    if isinstance(value, bool):
        return False
    if isinstance(value, Real):
        return math.isfinite(value)
    if isinstance(value, str) and value.strip():
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def _read_field(source: Any, *names: str) -> Optional[Any]:
    """Return the first of ``names`` present on a mapping or object."""

    for name in names:
        if isinstance(source, Mapping):
            value = source.get(name)
        else:
            value = getattr(source, name, None)
        if value is not None:
            return value
    return None


def _invalid(params: Tuple[Any, ...]) -> InvalidParametersError:
    dumped = json.dumps(list(params), indent=2, default=str)
    return InvalidParametersError(f"Invalid parameters : \n{dumped}", origin=params)


def normalize_params(*params: Any) -> GeocodeQuery:
    """Map one of the accepted call shapes to its query variant.

    Accepted shapes, checked in this order:

    * ``(latitude, longitude)``
    * ``([latitude, longitude])``
    * ``({"lat", "lng"})`` or ``({"latitude", "longitude"})``, mapping or object
    * ``(address, bounds)``
    * ``(address)``

    Raises :class:`InvalidParametersError` when nothing matches.
    """

    first = params[0] if len(params) > 0 else None
    second = params[1] if len(params) > 1 else None

    try:
        if len(params) >= 2 and _is_numeric(first) and _is_numeric(second):
            return Coordinates(lat=first, lng=second)

        if isinstance(first, Sequence) and not isinstance(first, (str, bytes)):
            if len(first) >= 2:
                return CoordinatePair(pair=list(first))
            raise _invalid(params)

        if first is not None and not isinstance(first, (str, bytes, Real)):
            lat = _read_field(first, "lat", "latitude")
            lng = _read_field(first, "lng", "longitude")
            if lat is not None and lng is not None:
                return LatLngObject(lat=lat, lng=lng)
            raise _invalid(params)

        if isinstance(first, str) and isinstance(second, (Mapping, Bounds)):
            bounds = second if isinstance(second, Bounds) else Bounds.model_validate(dict(second))
            return AddressWithBounds(address=first, bounds=bounds)

        if isinstance(first, str):
            return Address(address=first)
    except ValidationError as exc:
        logger.warning(f"Rejected geocoding parameters: {exc.error_count()} validation error(s)")
        raise _invalid(params) from exc

    raise _invalid(params)


def encode_bounds(bounds: Any) -> str:
    """Encode a bounds value as ``sw.lat,sw.lng|ne.lat,ne.lng``."""

    if not isinstance(bounds, Bounds):
        bounds = Bounds.model_validate(bounds)
    sw, ne = bounds.southwest, bounds.northeast
    parts = [sw.lat, sw.lng, ne.lat, ne.lng]
    encoded = [quote(format_coordinate(value), safe=_COMPONENT_SAFE) for value in parts]
    return f"{encoded[0]},{encoded[1]}|{encoded[2]},{encoded[3]}"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Real):
        return format_coordinate(float(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def encode_component(key: str, value: Any) -> str:
    """Percent-encode one query value; ``bounds`` gets its own format."""

    if key == "bounds":
        return encode_bounds(value)
    return quote(_stringify(value), safe=_COMPONENT_SAFE)


def to_query_params(values: Dict[str, Any]) -> str:
    """Serialize a mapping into a query string, skipping falsy values."""

    return "&".join(
        f"{key}={encode_component(key, value)}"
        for key, value in values.items()
        if value
    )
