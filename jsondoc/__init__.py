from flask import Flask, jsonify
from werkzeug.exceptions import InternalServerError, MethodNotAllowed, NotFound

from .config import Config
from .extensions import cors, store


def create_app(config_class: type[Config] = Config):
    # Static files come from WEBSITE_DIR through the pages blueprint
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Extensions
    cors.init_app(app)
    store.init_app(app)

    # Blueprints
    from .routes.data_api import bp as data_api
    from .routes.pages import bp as pages_bp

    app.register_blueprint(data_api)
    app.register_blueprint(pages_bp)

    register_error_handlers(app)

    return app


def register_error_handlers(app: Flask):
    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        resp = jsonify({"error": "Method Not Allowed", "status": 405})
        resp.status_code = 405
        resp.headers["Allow"] = ", ".join(e.valid_methods or [])
        return resp

    @app.errorhandler(NotFound)
    def not_found(e):
        return jsonify({"error": "Not Found", "status": 404}), 404

    @app.errorhandler(InternalServerError)
    def internal_error(e):
        return jsonify({"error": "Internal Server Error", "status": 500}), 500
