"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core logic of the onboarding relay: member
re-registration on the network and failed-registration notifications.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    MalformedUpstreamResponse,
    RelayError,
    SettingNotFound,
    UpstreamError,
    UpstreamRejected,
    UpstreamUnavailable,
)
from .notification import FailureNotifier
from .ports import (
    EmailSender,
    MembershipRecord,
    NetworkMembership,
    SettingsStore,
    TemplatedEmail,
    UpstreamResponse,
)
from .registration import CleanupFailure, CleanupMode, MemberRegistrar, RegistrationResult

__all__ = [
    "CleanupFailure",
    "CleanupMode",
    "EmailSender",
    "FailureNotifier",
    "MalformedUpstreamResponse",
    "MemberRegistrar",
    "MembershipRecord",
    "NetworkMembership",
    "RegistrationResult",
    "RelayError",
    "SettingNotFound",
    "SettingsStore",
    "TemplatedEmail",
    "UpstreamError",
    "UpstreamRejected",
    "UpstreamResponse",
    "UpstreamUnavailable",
]
