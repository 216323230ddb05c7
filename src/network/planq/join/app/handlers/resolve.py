from aiohttp import web

from network.planq.join.app.config import ResolveOptionsAppKey
from network.planq.join.resolve.engine import ValidationError, resolve
from network.planq.join.resolve.target import RedirectToCanonical

INVALID_INPUT_HEADER = "Invalid input format"
PHISHING_WARNING = "Beware of phishing attacks."


async def handle_resolve(request: web.Request):
    """Resolve the request path and describe the outcome as JSON.

    Validation errors are answered with 400, everything else with 200,
    including canonical-case redirects which are warnings rather than HTTP
    redirects. Non-indexable targets are marked with an X-Robots-Tag header.
    """
    options = request.app[ResolveOptionsAppKey]
    outcome = resolve(request.raw_path, options)

    if isinstance(outcome, ValidationError):
        return web.json_response(
            {"header": INVALID_INPUT_HEADER, **outcome.model_dump(mode="json")},
            status=400,
        )

    if isinstance(outcome, RedirectToCanonical):
        return web.json_response(
            {"warning": PHISHING_WARNING, **outcome.model_dump(mode="json")}
        )

    headers = {}
    if not outcome.target.indexable:
        headers["X-Robots-Tag"] = "noindex"
    return web.json_response(outcome.model_dump(mode="json"), headers=headers)
