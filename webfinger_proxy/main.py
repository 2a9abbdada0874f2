import sys
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webfinger_proxy.api.health import router as health_router
from webfinger_proxy.api.webfinger import router as webfinger_router
from webfinger_proxy.core.config import get_domain, get_port, get_settings
from webfinger_proxy.core.exceptions import WebFingerProxyException, proxy_exception_handler
from webfinger_proxy.core.logging import setup_logging
from webfinger_proxy.core.middleware import RequestIDMiddleware

# Configure logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("proxy_starting", app=settings.APP_NAME, version=settings.VERSION, domain=get_domain())
    yield
    logger.info("proxy_shutting_down", app=settings.APP_NAME)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Discovery clients call from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(WebFingerProxyException, proxy_exception_handler)

    app.include_router(webfinger_router)
    app.include_router(health_router)
    return app


app = create_app()


def run():
    """Serve the proxy with uvicorn; exits non-zero if the listener cannot start."""
    settings = get_settings()
    port = get_port()
    logger.info("server_starting", host=settings.HOST, port=port)
    try:
        uvicorn.run(app, host=settings.HOST, port=port, log_level=settings.LOG_LEVEL.lower())
    except KeyboardInterrupt:
        logger.info("server_stopped_by_user")
    except Exception as e:
        logger.error("server_start_failed", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    run()
