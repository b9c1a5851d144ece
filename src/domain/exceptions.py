"""
Domain exceptions - Semantic error types for the relay.

This module defines domain-specific exceptions that communicate
configuration and downstream failures without leaking infrastructure details.
"""


class RelayError(Exception):
    """Base class for relay domain errors."""

    pass


class SettingNotFound(RelayError):
    """A required configuration key is absent or empty."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Setting not found: {key}")
        self.key = key


class UpstreamError(RelayError):
    """Base class for failures talking to a downstream provider."""

    pass


class UpstreamUnavailable(UpstreamError):
    """Transport-level failure (connection refused, timeout, DNS)."""

    pass


class UpstreamRejected(UpstreamError):
    """Provider answered with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"{url} answered {status_code}")
        self.status_code = status_code
        self.url = url


class MalformedUpstreamResponse(UpstreamError):
    """Provider answered with a body that could not be interpreted."""

    pass
