import logging
from typing import (
    Optional,
)
from aiohttp import web
import sentry_sdk
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from network.planq.join.app.config import (
    ResolveOptionsAppKey,
    Settings,
    SettingsAppKey,
)
from network.planq.join.app.handlers.resolve import handle_resolve

logger = logging.getLogger(__name__)


@web.middleware
async def sentry_middleware(request: web.Request, handler):
    try:
        response = await handler(request)
        return response
    except web.HTTPException:
        raise
    except Exception as e:
        sentry_sdk.capture_exception(e)
        raise e


async def start_web_server(settings: Optional[Settings] = None):

    if settings is None:
        settings = Settings()  # type: ignore
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            send_default_pii=False,
            integrations=[AioHttpIntegration()]
        )
    app = web.Application(middlewares=[sentry_middleware])

    app[SettingsAppKey] = settings
    app[ResolveOptionsAppKey] = settings.resolve_options()

    logger.info(
        "Resolving deep links with scheme %s, %d display names",
        settings.native_scheme,
        len(app[ResolveOptionsAppKey].display_names),
    )

    app.add_routes([web.get("/{path:.*}", handle_resolve)])

    return app
