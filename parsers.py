# parsers.py
from flask import current_app, g, request
from werkzeug.exceptions import RequestEntityTooLarge

from utils import parse_nested_form

FORM_MIMETYPE = "application/x-www-form-urlencoded"


def _too_large(limit: int) -> RequestEntityTooLarge:
    return RequestEntityTooLarge(f"Request body exceeds the {limit} byte limit.")


def _has_body() -> bool:
    if request.content_length:
        return True
    return "chunked" in request.headers.get("Transfer-Encoding", "").lower()


def parse_json_body():
    """Reject oversized bodies up front and decode JSON payloads into g.body."""
    g.body = None
    limit = current_app.config["MAX_CONTENT_LENGTH"]
    if limit is not None and request.content_length is not None and request.content_length > limit:
        raise _too_large(limit)
    if not (request.is_json and _has_body()):
        return
    # chunked bodies carry no length; the limited stream raises 413 while reading
    data = request.get_data(cache=True)
    if limit is not None and len(data) > limit:
        raise _too_large(limit)
    if data:
        # malformed JSON raises BadRequest here, before any route runs
        g.body = request.get_json()


def parse_form_body():
    """Decode urlencoded bodies with bracketed keys (a[b]=1) into g.body."""
    if request.mimetype == FORM_MIMETYPE:
        g.body = parse_nested_form(request.form.items(multi=True))


def init_body_parsers(app, json_limit: int) -> None:
    app.config.update(MAX_CONTENT_LENGTH=json_limit)
    app.before_request(parse_json_body)
    app.before_request(parse_form_body)
