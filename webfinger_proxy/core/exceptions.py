from typing import Optional, Dict, Any

from fastapi import Request
from fastapi.responses import JSONResponse


class WebFingerProxyException(Exception):
    """Base exception for all WebFinger proxy errors."""
    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


class MissingResourceError(WebFingerProxyException):
    """Raised when a WebFinger request carries no resource parameter."""
    def __init__(self, message: str = "Missing resource parameter", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="missing_resource", status_code=400, details=details)


class InvalidResourceFormatError(WebFingerProxyException):
    """Raised when the resource parameter is not an acct: URI."""
    def __init__(
        self,
        message: str = "Invalid resource format, must start with 'acct:'",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code="invalid_resource_format", status_code=400, details=details)


async def proxy_exception_handler(request: Request, exc: WebFingerProxyException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )
