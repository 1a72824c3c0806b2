import math
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


CoordinateValue = Union[float, str]
"""A coordinate as a number, or a numeric string passed through verbatim."""


def format_coordinate(value: CoordinateValue) -> str:
    """Render a coordinate the way it appears in the query string.

    Numbers follow JavaScript's number-to-string rules: shortest round-trip
    digits, plain notation for 1e-7 <= |x| < 1e21 and ``1e-7`` / ``1e+21``
    style exponents outside that range.
    """

    if isinstance(value, str):
        return value
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


class LatLng(BaseModel):
    """A latitude/longitude pair."""
    lat: float
    lng: float

    model_config = ConfigDict(extra="allow")


class Bounds(BaseModel):
    """Rectangular region given by its south-west and north-east corners."""
    southwest: LatLng
    northeast: LatLng

    model_config = ConfigDict(extra="allow")


# Query variants: one per accepted call shape of ``Geocoder.from_``.


class Coordinates(BaseModel):
    """``from_(latitude, longitude)``"""
    lat: CoordinateValue
    lng: CoordinateValue

    def to_query(self) -> Dict[str, Any]:
        return {"latlng": f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"}


class CoordinatePair(BaseModel):
    """``from_([latitude, longitude])``"""
    pair: List[CoordinateValue] = Field(min_length=2)

    def to_query(self) -> Dict[str, Any]:
        lat, lng = self.pair[0], self.pair[1]
        return {"latlng": f"{format_coordinate(lat)},{format_coordinate(lng)}"}


class LatLngObject(BaseModel):
    """``from_({"lat": ..., "lng": ...})`` or ``from_({"latitude": ..., "longitude": ...})``"""
    lat: CoordinateValue
    lng: CoordinateValue

    def to_query(self) -> Dict[str, Any]:
        return {"latlng": f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"}


class AddressWithBounds(BaseModel):
    """``from_(address, bounds)``"""
    address: str
    bounds: Bounds

    def to_query(self) -> Dict[str, Any]:
        return {"address": self.address, "bounds": self.bounds}


class Address(BaseModel):
    """``from_(address)``"""
    address: str

    def to_query(self) -> Dict[str, Any]:
        return {"address": self.address}


GeocodeQuery = Union[Coordinates, CoordinatePair, LatLngObject, AddressWithBounds, Address]


# Response models. The service owns this schema, so unknown fields are kept.


class PlusCode(BaseModel):
    """Open Location Code attached to a result or to the whole response."""
    compound_code: Optional[str] = None
    global_code: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class AddressComponent(BaseModel):
    long_name: str
    short_name: str
    types: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class Geometry(BaseModel):
    location: LatLng
    location_type: Optional[str] = Field(default=None, description="APPROXIMATE, ROOFTOP, ...")
    viewport: Optional[Bounds] = None
    bounds: Optional[Bounds] = None

    model_config = ConfigDict(extra="allow")


class GeocodingResult(BaseModel):
    """Single entry of the ``results`` array."""
    address_components: List[AddressComponent] = Field(default_factory=list)
    formatted_address: Optional[str] = None
    geometry: Geometry
    place_id: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    plus_code: Optional[PlusCode] = None

    model_config = ConfigDict(extra="allow")


class GeocoderResponse(BaseModel):
    """Typed view over the body returned by the geocoding endpoint."""
    status: str
    results: List[GeocodingResult] = Field(default_factory=list)
    plus_code: Optional[PlusCode] = None
    error_message: Optional[str] = None

    model_config = ConfigDict(extra="allow")
