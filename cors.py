# cors.py
import logging

from flask import request
from flask_cors import CORS
from werkzeug.exceptions import Forbidden

from config import CORS_METHODS

log = logging.getLogger(__name__)


class OriginNotAllowed(Forbidden):
    """Request origin is missing from the allowlist."""

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__(f"CORS policy: This origin is not allowed: {origin}")


def is_origin_allowed(origin, allowed_origins) -> bool:
    """No origin (curl, mobile apps, same-site server calls) is always allowed;
    otherwise the origin must equal one of the allowed entries exactly."""
    if not origin:
        return True
    return origin in allowed_origins


def init_cors(app, allowed_origins) -> None:
    """Reject foreign origins before routing, then let flask-cors add the headers."""
    allowed = tuple(allowed_origins)

    @app.before_request
    def enforce_origin():
        origin = request.headers.get("Origin")
        if not is_origin_allowed(origin, allowed):
            log.warning("Rejected request from origin %s to %s %s", origin, request.method, request.path)
            raise OriginNotAllowed(origin)

    @app.after_request
    def vary_on_origin(response):
        # flask-cors skips Vary when only one origin is configured
        if request.headers.get("Origin"):
            response.vary.add("Origin")
        return response

    CORS(
        app,
        origins=list(allowed),
        supports_credentials=True,
        methods=list(CORS_METHODS),
    )
