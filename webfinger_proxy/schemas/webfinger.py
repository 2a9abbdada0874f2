from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class LinkRelation(str, Enum):
    """Relation types advertised for the identity provider, in response order."""
    ISSUER = "http://openid.net/specs/connect/1.0/issuer"
    AUTHORIZATION_ENDPOINT = "authorization_endpoint"
    TOKEN_ENDPOINT = "token_endpoint"
    USERINFO_ENDPOINT = "userinfo_endpoint"
    JWKS_URI = "jwks_uri"


class Link(BaseModel):
    rel: str
    href: str


class WebFingerResponse(BaseModel):
    """JRD document returned for an acct: resource."""
    subject: str = Field(..., description="The requested resource, echoed unmodified")
    links: List[Link] = Field(..., description="Issuer and OIDC endpoint links")
