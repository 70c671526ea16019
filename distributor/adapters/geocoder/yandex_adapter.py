"""Yandex geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from distributor.application.ports.geocoder_port import GeocoderPort
from distributor.config import settings
from distributor.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

YANDEX_GEOCODE_URL = "https://geocode-maps.yandex.ru/1.x/"


class YandexGeocoderAdapter(GeocoderPort):
    """Yandex Geocoder HTTP API implementation of GeocoderPort."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.yandex_geocoder_api_key
        self._timeout = timeout
        self._client = client

    async def locate_city(self, city: str, language: str) -> Coordinate | None:
        if not self._api_key:
            logger.warning("Yandex geocoder API key is not set. Skipping geocoding.")
            return None

        params = {
            "apikey": self._api_key,
            "geocode": city,
            "lang": language,
            "format": "json",
        }
        try:
            if self._client is not None:
                response = await self._client.get(YANDEX_GEOCODE_URL, params=params, timeout=self._timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(YANDEX_GEOCODE_URL, params=params, timeout=self._timeout)
        except httpx.HTTPError as e:
            logger.warning("Yandex geocoder request for '%s' failed: %s", city, e)
            return None

        if response.is_error:
            logger.warning(
                "Fetching geolocation data for '%s' failed: %s %s",
                city, response.status_code, response.text[:200],
            )
            return None

        try:
            point = self.parse_position(response.json())
        except ValueError as e:
            logger.warning("Unexpected Yandex geocoder payload for '%s': %s", city, e)
            return None

        if point is None:
            logger.warning("Yandex geocoder found nothing for '%s'", city)
            return None

        logger.info("Yandex resolved '%s' → (%f, %f)", city, point.latitude, point.longitude)
        return point

    @staticmethod
    def parse_position(payload: dict) -> Coordinate | None:
        """Extract the best match from a geocoder response.

        The position is a single string ``"<longitude> <latitude>"``.
        Returns None when there are no matches; raises ValueError on a
        payload of the wrong shape.
        """
        try:
            members = payload["response"]["GeoObjectCollection"]["featureMember"]
            if not members:
                return None
            pos = members[0]["GeoObject"]["Point"]["pos"]
            lon_str, lat_str = pos.split()
            return Coordinate(latitude=float(lat_str), longitude=float(lon_str))
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            raise ValueError(f"cannot read position: {e!r}") from e
