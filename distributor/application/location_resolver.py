"""LocationResolver — one concurrent geocoding lookup per distinct home-country city."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from distributor.application.ports.geocoder_port import GeocoderPort
from distributor.domain.entities.client import Client
from distributor.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

CityLookups = Mapping[str, asyncio.Task]


class LocationResolver:
    """Launches city lookups up front and lets callers await them lazily.

    Lookups are keyed by the city name exactly as it appears on the client,
    so each distinct name costs one geocoder call per run. A failed lookup
    (provider error, timeout, empty result) resolves to None and is never
    retried.
    """

    def __init__(
        self,
        geocoder: GeocoderPort,
        home_countries: Iterable[str],
        language: str = "ru_RU",
        timeout: float | None = 10.0,
        max_concurrency: int = 8,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._geocoder = geocoder
        self._home_countries = {c.strip().casefold() for c in home_countries}
        self._language = language
        self._timeout = timeout
        self._max_concurrency = max_concurrency

    def is_home_country(self, country: str | None) -> bool:
        return bool(country) and country.strip().casefold() in self._home_countries

    def needs_lookup(self, client: Client) -> bool:
        return self.is_home_country(client.country) and client.has_city()

    def fetch_city_locations(self, clients: Iterable[Client]) -> dict[str, asyncio.Task[Coordinate | None]]:
        """Start a lookup task for every distinct eligible city.

        Must be called from inside a running event loop. Foreign clients and
        clients without a city are skipped.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)
        lookups: dict[str, asyncio.Task[Coordinate | None]] = {}
        for client in clients:
            if client.city in lookups or not self.needs_lookup(client):
                continue
            lookups[client.city] = asyncio.create_task(
                self._locate(client.city, semaphore),
                name=f"locate-city:{client.city}",
            )

        logger.info("Started %d city lookups", len(lookups))
        return lookups

    async def _locate(self, city: str, semaphore: asyncio.Semaphore) -> Coordinate | None:
        async with semaphore:
            try:
                point = await asyncio.wait_for(
                    self._geocoder.locate_city(city, self._language),
                    timeout=self._timeout,
                )
            except asyncio.TimeoutError:
                logger.warning("Geocoding '%s' timed out after %s s", city, self._timeout)
                return None
            except Exception as e:
                logger.warning("Geocoding '%s' failed: %s", city, e)
                return None

        if point is None:
            logger.warning("Could not resolve location of '%s'", city)
        else:
            logger.debug("Resolved '%s' → (%f, %f)", city, point.latitude, point.longitude)
        return point


def cancel_pending(lookups: CityLookups) -> None:
    """Cancel lookups that nobody will await any more."""
    for task in lookups.values():
        if not task.done():
            task.cancel()
