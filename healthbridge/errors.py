"""Exceptions raised across the service."""


class HealthBridgeError(Exception):
    """Base class for service errors."""


class MissingAPIKeyError(HealthBridgeError):
    def __init__(self, message: str = "GEMINI_API_KEY is not configured"):
        super().__init__(message)


class LocationUnavailableError(HealthBridgeError):
    """The geolocation service could not produce a position."""


class SubmissionInProgressError(HealthBridgeError):
    def __init__(self, message: str = "An analysis is already running"):
        super().__init__(message)


class CoordinateAlreadySetError(HealthBridgeError):
    def __init__(self, message: str = "Location has already been acquired"):
        super().__init__(message)
