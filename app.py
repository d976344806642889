# app.py
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix
from werkzeug.serving import make_server

from config import APP_TITLE, Settings, load_settings
from cors import init_cors
from db import DatabaseConnectionError, connect_db
from errors import register_error_handlers
from parsers import init_body_parsers
from routes import register_routes
from utils import configure_logging

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, auth_routes=None, form_routes=None) -> Flask:
    """Assemble the middleware chain and mount every route group."""
    settings = settings or load_settings()

    app = Flask(__name__, static_folder=None)
    app.config.update(
        SETTINGS=settings,
        UPLOAD_DIR=str(settings.upload_dir),
    )

    # before_request hooks run in registration order:
    # JSON body (size limit), urlencoded body, then the origin check.
    # Cookies need no hook; werkzeug parses them into request.cookies.
    init_body_parsers(app, settings.json_limit)
    if settings.is_production:
        # one load balancer hop in front of us
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)
    init_cors(app, settings.allowed_origins)

    register_routes(app, settings, auth_routes=auth_routes, form_routes=form_routes)
    register_error_handlers(app)
    return app


def main() -> None:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)
    log.info(
        "Starting %s (env=%s, port=%d, %d allowed origin(s))",
        APP_TITLE, settings.env, settings.port, len(settings.allowed_origins),
    )

    try:
        connect_db(settings.database_path)
    except DatabaseConnectionError:
        log.exception("Database connection failed, not starting server")
        raise SystemExit(1)

    app = create_app(settings)
    # make_server binds the socket, so readiness is only logged once listening
    server = make_server(settings.host, settings.port, app, threaded=True)
    log.info("Server running on port %d", server.port)
    server.serve_forever()


if __name__ == "__main__":
    main()
