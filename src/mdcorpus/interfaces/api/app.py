"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from mdcorpus.interfaces.api.middleware.cors import CORSMiddleware
from mdcorpus.interfaces.api.resources.check import CheckResource
from mdcorpus.interfaces.api.resources.documents import (
    DocumentBodyResource,
    DocumentResource,
    DocumentsResource,
)
from mdcorpus.interfaces.api.resources.health import HealthResource
from mdcorpus.logging import get_component_logger

logger = get_component_logger("api")


async def _log_exception(req, resp, ex, params):
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    document_body_resource: DocumentBodyResource,
    check_resource: CheckResource,
    health_resource: HealthResource,
    cors_origins: list[str] | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=[CORSMiddleware(cors_origins or [])])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id:path}", document_resource)
    app.add_route("/v1/raw/{document_id:path}", document_body_resource)
    app.add_route("/v1/check", check_resource)
    return app
