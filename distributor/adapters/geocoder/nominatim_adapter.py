"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from distributor.application.ports.geocoder_port import GeocoderPort
from distributor.config import settings
from distributor.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """OpenStreetMap Nominatim implementation of GeocoderPort."""

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout
        self._client = client

    async def locate_city(self, city: str, language: str) -> Coordinate | None:
        params = {
            "q": city,
            "format": "json",
            "limit": 1,
            "accept-language": self.accept_language(language),
        }
        headers = {"User-Agent": self._user_agent}
        try:
            if self._client is not None:
                response = await self._client.get(
                    NOMINATIM_URL, params=params, headers=headers, timeout=self._timeout,
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        NOMINATIM_URL, params=params, headers=headers, timeout=self._timeout,
                    )
            response.raise_for_status()
            results = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Nominatim API error for '%s': %s", city, e)
            return None

        if not results:
            logger.info("Nominatim returned no results for '%s'", city)
            return None

        try:
            lat = float(results[0]["lat"])
            lon = float(results[0]["lon"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Unexpected Nominatim payload for '%s': %r", city, e)
            return None

        logger.info("Nominatim resolved '%s' → (%f, %f)", city, lat, lon)
        return Coordinate(latitude=lat, longitude=lon)

    @staticmethod
    def accept_language(language: str) -> str:
        """Turn a ``ru_RU`` style hint into an Accept-Language value (``ru-RU,ru``)."""
        tag = language.strip().replace("_", "-")
        if not tag:
            return "en"
        primary = tag.split("-")[0]
        return tag if primary == tag else f"{tag},{primary}"
