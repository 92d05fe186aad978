"""FastAPI приложение для вебхуков (роутеры + логирование)."""

from fastapi import FastAPI

from sumsub_bridge import __version__
from sumsub_bridge.api.webhooks import EventHandler, log_event_handler
from sumsub_bridge.api.webhooks import router as webhooks_router
from sumsub_bridge.api.well_known import router as well_known_router
from sumsub_bridge.infrastructure.logging import configure_logging
from sumsub_bridge.settings import Settings, get_settings
from sumsub_bridge.signing.verifier import WebhookVerifier


def create_app(
    settings: Settings | None = None,
    event_handler: EventHandler | None = None,
) -> FastAPI:
    """Собирает FastAPI приложение; без `SECRET_KEY_WEBHOOK` падает с `MissingCredential`."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Sumsub Bridge", version=__version__)
    app.state.webhook_verifier = WebhookVerifier(settings.webhook_credentials())
    app.state.event_handler = event_handler or log_event_handler(
        settings.webhook_payload_logging
    )

    app.include_router(well_known_router)
    app.include_router(webhooks_router)
    return app
