"""
WebFinger document construction.

Every acct: resource resolves to the same Authentik application, so the
response only depends on the configured domain and application slug.
"""

from typing import Optional

from webfinger_proxy.core.exceptions import InvalidResourceFormatError, MissingResourceError
from webfinger_proxy.schemas.webfinger import Link, LinkRelation, WebFingerResponse

ACCT_PREFIX = "acct:"

# Suffixes appended to the issuer URL, keyed by relation
ENDPOINT_SUFFIXES = {
    LinkRelation.ISSUER: "",
    LinkRelation.AUTHORIZATION_ENDPOINT: "oauth2/authorize",
    LinkRelation.TOKEN_ENDPOINT: "oauth2/token",
    LinkRelation.USERINFO_ENDPOINT: "userinfo",
    LinkRelation.JWKS_URI: "jwks",
}


def validate_resource(resource: Optional[str]) -> str:
    """Return the resource if it is an acct: URI, otherwise raise a 400-mapped error."""
    if resource is None:
        raise MissingResourceError()
    if not resource.startswith(ACCT_PREFIX):
        raise InvalidResourceFormatError()
    return resource


def build_issuer_url(domain: str, application_slug: str) -> str:
    return f"https://{domain}/application/o/{application_slug}/"


def build_webfinger_response(resource: str, domain: str, application_slug: str) -> WebFingerResponse:
    """
    Build the JRD for an already validated resource.

    The domain is templated in as-is; no hostname validation happens here.
    """
    issuer_url = build_issuer_url(domain, application_slug)
    links = [
        Link(rel=relation.value, href=issuer_url + suffix)
        for relation, suffix in ENDPOINT_SUFFIXES.items()
    ]
    return WebFingerResponse(subject=resource, links=links)
