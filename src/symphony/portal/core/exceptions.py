# symphony/portal/core/exceptions.py
from __future__ import annotations


class PortalError(Exception):
    pass


class ConfigurationError(PortalError):
    pass


class AuthenticationError(PortalError):
    pass


class RegistryError(PortalError):
    """Base for failures talking to the federation registry."""

    kind = "registry_error"


class RegistryUnavailable(RegistryError):
    """The registry could not be reached or returned an unreadable body."""

    kind = "registry_unavailable"


class InvalidRegistryResponse(RegistryError):
    """The registry answered, but not with a list of sites."""

    kind = "invalid_registry_response"

    def __init__(self, message: str, *, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
