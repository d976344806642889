# routes/form.py
from flask import Blueprint, jsonify

bp = Blueprint("form", __name__)


@bp.get("/")
def index():
    return jsonify(group="form", status="ok")
