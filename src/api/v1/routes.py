"""
API v1 routes.

Defines the onboarding relay endpoints:
- POST /v1/challenge - Authorize a device on the ZeroTier network
- POST /v1/notify - Email a registrant about a failed registration

Both relay the downstream provider's response unmodified.
"""

import logging
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, ValidationError

from src.api.dependencies import get_failure_notifier, get_member_registrar
from src.api.models import ChallengeRequest, ErrorResponse, NotifyRequest
from src.domain.notification import FailureNotifier
from src.domain.ports import UpstreamResponse
from src.domain.registration import MemberRegistrar

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

ModelT = TypeVar("ModelT", bound=BaseModel)


async def _parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Parse and validate the JSON body.

    Any malformed body is answered with 401, matching what devices
    already expect from this service.
    """
    try:
        return model.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("Rejected %s payload: %s", model.__name__, exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        ) from None


def _relay(upstream: UpstreamResponse) -> Response:
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )


@router.post(
    "/challenge",
    responses={
        200: {"description": "ZeroTier Central member response, relayed"},
        401: {"model": ErrorResponse, "description": "Malformed registration payload"},
        502: {"model": ErrorResponse, "description": "ZeroTier Central unreachable"},
    },
    summary="Register a device on the network",
    description="Deauthorize stale network members that carry the device's agent id, "
    "then authorize the device's ZeroTier address.",
)
async def challenge(
    request: Request,
    registrar: MemberRegistrar = Depends(get_member_registrar),
) -> Response:
    """
    Register a device.

    Body: `{"data": {"email", "holochain_agent_id", "zerotier_address", "holoport_url"}}`
    """
    payload = await _parse_body(request, ChallengeRequest)
    data = payload.data
    logger.info(
        "Registration for agent %s (holoport %s)", data.holochain_agent_id, data.holoport_url
    )

    result = await registrar.register(
        address=data.zerotier_address,
        name=data.holochain_agent_id,
        description=data.email,
    )
    for failure in result.failures:
        logger.warning("Stale entry cleanup failed for %s: %s", failure.node_id, failure.error)
    return _relay(result.response)


@router.post(
    "/notify",
    responses={
        200: {"description": "Postmark response, relayed"},
        401: {"model": ErrorResponse, "description": "Malformed notification payload"},
        502: {"model": ErrorResponse, "description": "Postmark unreachable"},
    },
    summary="Notify a failed registration",
    description="Send the failed-registration email template to the given address.",
)
async def notify(
    request: Request,
    notifier: FailureNotifier = Depends(get_failure_notifier),
) -> Response:
    """
    Email a registrant about a failed registration.

    Body: `{"email", "error"}`
    """
    payload = await _parse_body(request, NotifyRequest)
    upstream = await notifier.notify(payload.email, payload.error)
    return _relay(upstream)
