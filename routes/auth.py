# routes/auth.py
from flask import Blueprint, jsonify

bp = Blueprint("auth", __name__)


@bp.get("/")
def index():
    """Route-group index; deployments mount their own auth handlers in place of this blueprint."""
    return jsonify(group="auth", status="ok")
