"""Port interface for resolving city names to coordinates."""

from abc import ABC, abstractmethod

from distributor.domain.value_objects.coordinate import Coordinate


class GeocoderPort(ABC):
    @abstractmethod
    async def locate_city(self, city: str, language: str) -> Coordinate | None:
        """Resolve a free-text place name to its best-match coordinate.

        ``language`` is a language/region hint such as ``"ru_RU"``.
        Returns None if the place cannot be resolved.
        """
        ...
