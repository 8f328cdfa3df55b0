import json

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from ..extensions import store
from ..storage.errors import StoreError

bp = Blueprint("data_api", __name__)

SAVED_MESSAGE = "Data successfully stored/updated"
DATA_METHODS = ["GET", "POST", "PUT", "OPTIONS"]


def _error(message: str, status: int):
    return jsonify({"error": message, "status": status}), status


def _reject_constant(name: str):
    # NaN/Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


@bp.get("/data")
def get_data():
    # Flask adds HEAD to every GET rule
    if request.method == "HEAD":
        raise MethodNotAllowed(valid_methods=DATA_METHODS)
    try:
        data = store.read()
    except StoreError:
        current_app.logger.exception("Error in GET /data")
        return _error("Internal Server Error", 500)
    return jsonify(data)


@bp.route("/data", methods=["POST", "PUT"])
def update_data():
    """Overwrite the whole document with the request body."""
    try:
        payload = json.loads(request.get_data(as_text=True), parse_constant=_reject_constant)
    except ValueError:
        current_app.logger.warning("Rejected %s /data: body is not valid JSON", request.method)
        return _error("Invalid JSON format in request body", 400)
    except RecursionError:
        current_app.logger.warning("Rejected %s /data: body is nested too deeply", request.method)
        return _error("Request body is nested too deeply", 400)

    if not isinstance(payload, dict):
        current_app.logger.warning(
            "Rejected %s /data: top-level %s is not an object", request.method, type(payload).__name__
        )
        return _error("Invalid JSON format in request body", 400)

    try:
        store.replace(payload)
    except StoreError:
        current_app.logger.exception("Error in %s /data", request.method)
        return _error("Internal Server Error: Failed to save data", 500)

    status = 201 if request.method == "POST" else 200
    return jsonify({"message": SAVED_MESSAGE, "status": status}), status
