import logging

from flask import Flask, jsonify

from common.health import health_bp
from common.identity import build_identity
from common.logging_config import configure_logging
from common.settings import SettingsLoadError, load_leaf_settings

logger = logging.getLogger(__name__)

MESSAGE = "Hello from App1!"


def create_app(settings):
    """Build the App1 Flask application from already-loaded settings."""
    app = Flask(__name__)
    app.json.sort_keys = False
    app.register_blueprint(health_bp)

    @app.route("/", methods=["GET"])
    def identity():
        """Returns who answered the request and when."""
        response = build_identity(settings, MESSAGE)
        logger.info("Request received at %s", response["timestamp"])
        return jsonify(response), 200

    return app


def main():
    try:
        settings = load_leaf_settings()
    except SettingsLoadError as error:
        raise SystemExit(str(error)) from error

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("App1 listening on port %s", settings.port)
    app.run(host=settings.bind_host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
