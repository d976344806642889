# routes/core.py
from flask import Response, current_app, jsonify

TEST_COOKIE_MAX_AGE = 24 * 60 * 60  # 1 day


def health():
    return jsonify(status="ok", env=current_app.config["SETTINGS"].env)


def set_test_cookie():
    """Illustrates cross-site cookie options; not an auth mechanism."""
    settings = current_app.config["SETTINGS"]
    resp = Response("cookie set", mimetype="text/plain")
    resp.set_cookie(
        "test",
        "1",
        max_age=TEST_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.is_production,
        samesite="None",
    )
    return resp


def register_core_routes(app, settings):
    """Inline endpoints, each switchable off per deployment."""
    if settings.health_route_enabled:
        app.add_url_rule("/", "health", health, methods=["GET"])
    if settings.test_cookie_route_enabled:
        app.add_url_rule("/set-test-cookie", "set_test_cookie", set_test_cookie, methods=["GET"])
