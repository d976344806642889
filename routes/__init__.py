# routes/__init__.py
from .auth import bp as auth_bp
from .core import register_core_routes
from .form import bp as form_bp
from .uploads import bp as uploads_bp

AUTH_PREFIX = "/api/auth"
FORM_PREFIX = "/api/form"


def register_routes(app, settings, auth_routes=None, form_routes=None):
    app.register_blueprint(auth_routes or auth_bp, url_prefix=AUTH_PREFIX)
    app.register_blueprint(form_routes or form_bp, url_prefix=FORM_PREFIX)
    app.register_blueprint(uploads_bp)
    register_core_routes(app, settings)
