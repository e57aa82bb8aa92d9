"""Geocoding used to fill in coordinates the client did not send.

Two implementations share the ``Geocoder`` interface:

* ``StaticGeocoder`` never resolves anything, so every address gets the
  configured default coordinates. It is used when no API key is configured.
* ``GoogleGeocoder`` asks the Google Geocoding API. If the lookup fails it also
  falls back to the defaults, so creating an address never fails because the
  geocoding provider is down.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, NamedTuple, Optional

import httpx

from ..core.config import settings
from ..models.address import Address

logger = logging.getLogger(__name__)


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


def format_address_query(address: Address) -> str:
    """One-line query such as ``"Main St 12, Centre, Springfield, IL, 62701, US"``."""

    street = " ".join(str(part).strip() for part in (address.street_name, address.number) if part)
    parts = [street, address.neighbourhood, address.city, address.state, address.zipcode, address.country]
    return ", ".join(str(part).strip() for part in parts if part and str(part).strip())


class Geocoder(ABC):
    def __init__(self, default: Coordinates) -> None:
        self.default = default

    @abstractmethod
    def geocode(self, query: str) -> Optional[Coordinates]:
        """Resolve ``query`` to coordinates, or ``None`` when it cannot."""

    def locate(self, address: Address) -> Coordinates:
        query = format_address_query(address)
        coordinates = self.geocode(query) if query else None
        if coordinates is None:
            logger.debug("Using default coordinates for %r", query)
            return self.default
        return coordinates


class StaticGeocoder(Geocoder):
    def geocode(self, query: str) -> Optional[Coordinates]:
        return None


def _raise_for_status(response: httpx.Response, context: str) -> None:
    if response.status_code in {401, 403}:
        logger.warning("Google Maps authentication failed for %s", context)
    elif response.status_code >= 500:
        logger.error("Google service error %s during %s", response.status_code, context)
    elif response.status_code >= 400:
        logger.error("Google request error %s during %s", response.status_code, context)
    response.raise_for_status()


def _parse_location(data: dict[str, Any]) -> Optional[Coordinates]:
    results = data.get("results") or []
    if not results:
        return None
    location = (results[0].get("geometry") or {}).get("location") or {}
    lat = location.get("lat")
    lng = location.get("lng")
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return Coordinates(float(lat), float(lng))


class GoogleGeocoder(Geocoder):
    def __init__(
        self,
        api_key: str,
        *,
        default: Coordinates,
        url: str = "https://maps.googleapis.com/maps/api/geocode/json",
        timeout: float = 6.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(default)
        self.api_key = api_key
        self.url = url
        self.timeout = httpx.Timeout(timeout)
        self.transport = transport

    def geocode(self, query: str) -> Optional[Coordinates]:
        params = {"address": query, "key": self.api_key}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.url, params=params)
                _raise_for_status(response, "geocoding")
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Geocoding request failed for %r: %s", query, exc)
            return None

        status = data.get("status")
        if status and status != "OK":
            if status == "ZERO_RESULTS":
                logger.info("Google found no location for %r", query)
            else:
                logger.warning("Google geocoding error for %r: %s (%s)", query, status, data.get("error_message"))
            return None
        return _parse_location(data)


def build_geocoder(app_settings=settings) -> Geocoder:
    default = Coordinates(app_settings.DEFAULT_LATITUDE, app_settings.DEFAULT_LONGITUDE)
    if app_settings.GOOGLE_MAPS_API_KEY:
        return GoogleGeocoder(
            app_settings.GOOGLE_MAPS_API_KEY,
            default=default,
            url=app_settings.GOOGLE_GEOCODING_URL,
            timeout=app_settings.GEOCODING_TIMEOUT_SECONDS,
        )
    return StaticGeocoder(default)


@lru_cache(maxsize=1)
def get_geocoder() -> Geocoder:
    """FastAPI dependency returning the process-wide geocoder."""

    return build_geocoder(settings)
