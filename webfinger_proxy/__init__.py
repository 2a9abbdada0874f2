"""WebFinger proxy pointing OIDC issuer discovery at a single Authentik application."""

__version__ = "0.1.0"
