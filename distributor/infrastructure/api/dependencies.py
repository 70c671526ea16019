"""Dependency wiring — builds the geocoder and the distribution use case from settings."""

from __future__ import annotations

import logging

from distributor.adapters.geocoder.nominatim_adapter import NominatimAdapter
from distributor.adapters.geocoder.yandex_adapter import YandexGeocoderAdapter
from distributor.application.location_resolver import LocationResolver
from distributor.application.ports.geocoder_port import GeocoderPort
from distributor.application.use_cases.distribute_clients import DistributeClientsUseCase
from distributor.config import Settings, settings

logger = logging.getLogger(__name__)

_geocoder_adapter: GeocoderPort | None = None


def build_geocoder(config: Settings = settings) -> GeocoderPort:
    provider = config.geocoder_provider.strip().lower()
    if provider == "yandex":
        logger.info("Using Yandex for geocoding")
        return YandexGeocoderAdapter(
            api_key=config.yandex_geocoder_api_key,
            timeout=config.geocoder_timeout,
        )
    if provider == "nominatim":
        logger.info("Using Nominatim for geocoding")
        return NominatimAdapter(
            user_agent=config.geocoder_user_agent,
            timeout=config.geocoder_timeout,
        )
    raise ValueError(f"Unknown geocoder provider: {config.geocoder_provider!r}")


def get_geocoder() -> GeocoderPort:
    """Process-wide geocoder adapter, created on first use."""
    global _geocoder_adapter
    if _geocoder_adapter is None:
        _geocoder_adapter = build_geocoder(settings)
    return _geocoder_adapter


def build_distribute_uc(geocoder: GeocoderPort, config: Settings = settings) -> DistributeClientsUseCase:
    resolver = LocationResolver(
        geocoder=geocoder,
        home_countries=config.home_countries,
        language=config.geocoder_language,
        timeout=config.geocoder_timeout,
        max_concurrency=config.geocoder_max_concurrency,
    )
    return DistributeClientsUseCase(
        resolver=resolver,
        foreign_office_ids=config.foreign_office_ids,
    )


def get_distribute_uc() -> DistributeClientsUseCase:
    return build_distribute_uc(get_geocoder(), settings)
