"""
WebFinger Router

Answers RFC 7033 discovery for acct: resources with the OIDC endpoints
of the configured Authentik application.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query

from webfinger_proxy.core.config import IssuerSettings, get_issuer_settings
from webfinger_proxy.core.exceptions import InvalidResourceFormatError, MissingResourceError
from webfinger_proxy.schemas.webfinger import WebFingerResponse
from webfinger_proxy.services.webfinger import build_webfinger_response, validate_resource

logger = structlog.get_logger()

router = APIRouter(tags=["webfinger"])


@router.get("/.well-known/webfinger", response_model=WebFingerResponse)
async def webfinger(
    resource: Optional[str] = Query(default=None),
    issuer: IssuerSettings = Depends(get_issuer_settings),
):
    """
    WebFinger lookup.

    Any `rel` parameter is ignored: all five links are always returned.
    """
    try:
        subject = validate_resource(resource)
    except MissingResourceError:
        logger.warning("webfinger_missing_resource")
        raise
    except InvalidResourceFormatError:
        logger.warning("webfinger_invalid_resource_format", resource=resource)
        raise

    response = build_webfinger_response(subject, issuer.DOMAIN, issuer.APPLICATION_SLUG)
    logger.info("webfinger_request_processed", resource=response.subject)
    return response
