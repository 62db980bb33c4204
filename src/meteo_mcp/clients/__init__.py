"""Client implementations for third-party services."""

from .open_meteo import OpenMeteoClient, RemoteAPIError

__all__ = [
    "OpenMeteoClient",
    "RemoteAPIError",
]
