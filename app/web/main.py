from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.infra.config.logging import setup_logging
from app.infra.config.settings import Settings, get_settings
from app.infra.handlers.base import BonusCreditor, TransactionHandler
from app.infra.handlers.logging_handler import LoggingBonusCreditor, LoggingTransactionHandler
from app.web.middleware import SecurityHeadersMiddleware
from app.web.routes import helio_webhook


def create_app(
    settings: Settings | None = None,
    transaction_handler: TransactionHandler | None = None,
    bonus_creditor: BonusCreditor | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger = structlog.get_logger()

    if not settings.WEBHOOK_SECRET:
        if settings.IS_PRODUCTION:
            raise RuntimeError("HELIO_WEBHOOK_SECRET must be set in production")
        logger.warning("webhook_signature_verification_disabled", environment=settings.ENVIRONMENT)

    app = FastAPI(
        title="Sirens Fortune Backend",
        description="Helio payment webhooks",
        version="0.1.0"
    )
    app.state.settings = settings
    app.state.transaction_handler = transaction_handler or LoggingTransactionHandler()
    app.state.bonus_creditor = bonus_creditor or LoggingBonusCreditor()

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(helio_webhook.router, prefix="/api/helio", tags=["helio"])

    @app.get("/health")
    async def health_check():
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(status_code=exc.status_code, content={"error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception("server_error", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    logger.info("app_created", webhook_path="/api/helio/webhook", port=settings.PORT)
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


app = create_app()

if __name__ == "__main__":
    run()
