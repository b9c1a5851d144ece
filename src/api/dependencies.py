"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.postmark import PostmarkEmailSender
from src.adapters.settings import SettingsBackedStore
from src.adapters.zerotier import ZeroTierCentralClient
from src.config.settings import Settings, get_settings
from src.domain.notification import FailureNotifier
from src.domain.registration import CleanupMode, MemberRegistrar


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared outbound HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_settings_store(settings: Settings) -> SettingsBackedStore:
    """Wrap the application settings in the domain's SettingsStore port."""
    return SettingsBackedStore(settings)


def get_member_registrar(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> MemberRegistrar:
    """
    Create member registrar with injected dependencies.

    Wires the ZeroTier Central adapter to the shared HTTP client and settings store.
    """
    settings = get_settings()
    network = ZeroTierCentralClient(
        http_client,
        get_settings_store(settings),
        base_url=settings.zerotier_api_url,
    )
    return MemberRegistrar(
        network=network,
        cleanup_mode=CleanupMode(settings.zerotier_cleanup_mode),
    )


def get_failure_notifier(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> FailureNotifier:
    """Create failure notifier wired to the Postmark adapter."""
    settings = get_settings()
    email_sender = PostmarkEmailSender(
        http_client,
        get_settings_store(settings),
        base_url=settings.postmark_api_url,
    )
    return FailureNotifier(
        email_sender=email_sender,
        sender=settings.postmark_sender,
        template_alias=settings.postmark_template_alias,
        internal_domain=settings.internal_email_domain,
    )
