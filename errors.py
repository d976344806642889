# errors.py
import logging
import re

from flask import jsonify
from werkzeug.exceptions import HTTPException, InternalServerError

from cors import OriginNotAllowed

log = logging.getLogger(__name__)


def _error_type(e: HTTPException) -> str:
    if isinstance(e, OriginNotAllowed):
        return "origin_not_allowed"
    name = e.name or "error"
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def error_body(code: int, type_: str, message: str, **extra) -> dict:
    err = dict(code=code, type=type_, message=message)
    err.update(extra)
    return dict(error=err)


def register_error_handlers(app) -> None:
    """Translate every failure into {"error": {code, type, message}}."""

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        extra = {}
        if isinstance(e, OriginNotAllowed):
            extra["origin"] = e.origin
        resp = jsonify(error_body(e.code, _error_type(e), e.description, **extra))
        resp.status_code = e.code
        # keep things like Allow on 405
        for k, v in e.get_headers():
            if k.lower() != "content-type":
                resp.headers[k] = v
        return resp

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        log.exception("Unhandled error")
        generic = InternalServerError()
        return jsonify(error_body(generic.code, "internal_server_error", generic.description)), 500
