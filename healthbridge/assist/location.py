"""Best-effort device location, fetched once when the screen starts.

The geolocation collaborator exposes the four operations a platform location
service offers: service enabled?, check permission, request permission and
get current position. ``LocationProvider.acquire`` walks them in that order
and never raises.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum

import httpx

from healthbridge.config import Settings, settings
from healthbridge.errors import LocationUnavailableError
from healthbridge.models import Coordinate

logger = logging.getLogger(__name__)


class LocationPermission(str, Enum):
    DENIED = "denied"
    DENIED_FOREVER = "denied_forever"
    WHILE_IN_USE = "while_in_use"
    ALWAYS = "always"


class GeolocationService(ABC):
    """Interface of the platform location service."""

    @abstractmethod
    async def is_service_enabled(self) -> bool: ...

    @abstractmethod
    async def check_permission(self) -> LocationPermission: ...

    @abstractmethod
    async def request_permission(self) -> LocationPermission: ...

    @abstractmethod
    async def get_current_position(self) -> Coordinate: ...


class NullGeolocationService(GeolocationService):
    """Location switched off."""

    async def is_service_enabled(self) -> bool:
        return False

    async def check_permission(self) -> LocationPermission:
        return LocationPermission.DENIED_FOREVER

    async def request_permission(self) -> LocationPermission:
        return LocationPermission.DENIED_FOREVER

    async def get_current_position(self) -> Coordinate:
        raise LocationUnavailableError("Location service is disabled")


class StaticGeolocationService(GeolocationService):
    """Fixed coordinate, e.g. from LOCATION_LATITUDE / LOCATION_LONGITUDE."""

    def __init__(self, coordinate: Coordinate):
        self.coordinate = coordinate

    async def is_service_enabled(self) -> bool:
        return True

    async def check_permission(self) -> LocationPermission:
        return LocationPermission.ALWAYS

    async def request_permission(self) -> LocationPermission:
        return LocationPermission.ALWAYS

    async def get_current_position(self) -> Coordinate:
        return self.coordinate


class IPGeolocationService(GeolocationService):
    """Position of the host, looked up by public IP address.

    Permission maps to the ``location_enabled`` setting; requesting it again
    cannot change a server-side setting.
    """

    def __init__(self, url: str, enabled: bool = True, transport: httpx.AsyncBaseTransport | None = None):
        self.url = url
        self.enabled = enabled
        self._transport = transport

    async def is_service_enabled(self) -> bool:
        return bool(self.url)

    async def check_permission(self) -> LocationPermission:
        return LocationPermission.ALWAYS if self.enabled else LocationPermission.DENIED

    async def request_permission(self) -> LocationPermission:
        return await self.check_permission()

    async def get_current_position(self) -> Coordinate:
        async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
            response = await client.get(self.url)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise LocationUnavailableError(f"Invalid geolocation response: {exc}") from exc
        if not isinstance(data, dict) or data.get("status", "success") != "success":
            raise LocationUnavailableError(f"Geolocation lookup failed: {data}")
        if data.get("lat") is None or data.get("lon") is None:
            raise LocationUnavailableError("Geolocation response has no coordinates")

        return Coordinate(latitude=float(data["lat"]), longitude=float(data["lon"]))


def get_geolocation_service(config: Settings = settings) -> GeolocationService:
    """Pick the service matching the current configuration."""
    if not config.location_enabled:
        return NullGeolocationService()
    if config.has_fixed_location:
        return StaticGeolocationService(
            Coordinate(latitude=config.location_latitude, longitude=config.location_longitude)
        )
    return IPGeolocationService(config.geolocation_url)


class LocationProvider:
    """Holds the single coordinate acquired at startup."""

    def __init__(self, service: GeolocationService | None = None):
        self.service = service or get_geolocation_service()
        self.coordinate: Coordinate | None = None

    async def acquire(self) -> Coordinate | None:
        try:
            if not await self.service.is_service_enabled():
                logger.info("Location service disabled — continuing without location.")
                return None

            permission = await self.service.check_permission()
            if permission == LocationPermission.DENIED:
                permission = await self.service.request_permission()
                if permission == LocationPermission.DENIED:
                    logger.info("Location permission denied.")
                    return None

            self.coordinate = await self.service.get_current_position()
            logger.info(f"Location acquired: {self.coordinate.format()}")
        except Exception as e:
            logger.warning(f"Location error: {e}")
        return self.coordinate
