from pathlib import Path

from flask import Blueprint, current_app, send_from_directory
from werkzeug.security import safe_join

bp = Blueprint("pages", __name__)

INDEX_FILE = "index.html"


def _website_dir() -> Path:
    # Resolve against CWD, not the package root Flask would otherwise use
    return Path(current_app.config["WEBSITE_DIR"]).resolve()


@bp.get("/")
def index():
    return send_from_directory(_website_dir(), INDEX_FILE)


@bp.get("/<path:filename>")
def static_file(filename):
    root = _website_dir()
    full = safe_join(str(root), filename)
    if full is not None and Path(full).is_dir():
        filename = f"{filename.rstrip('/')}/{INDEX_FILE}"
    return send_from_directory(root, filename)
