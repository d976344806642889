# routes/uploads.py
from flask import Blueprint, current_app, send_from_directory

bp = Blueprint("uploads", __name__)


@bp.get("/uploads/<path:filename>")
def uploads(filename: str):
    """Serve a stored upload. Storage may be ephemeral; files can vanish on restart."""
    # send_from_directory 404s on anything resolving outside UPLOAD_DIR
    return send_from_directory(current_app.config["UPLOAD_DIR"], filename)
