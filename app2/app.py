import logging

from flask import Flask, jsonify

from app2.client import App1Client, DependencyCallError
from common.health import health_bp
from common.identity import build_identity
from common.logging_config import configure_logging
from common.settings import SettingsLoadError, load_caller_settings

logger = logging.getLogger(__name__)

MESSAGE = "Hello from App2!"


def create_app(settings, app1_client=None):
    """Build the App2 Flask application from already-loaded settings.

    `app1_client` defaults to an App1Client aimed at `settings.app1_url`.
    """
    if app1_client is None:
        app1_client = App1Client(settings.app1_url)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.register_blueprint(health_bp)

    @app.route("/", methods=["GET"])
    def identity():
        """Returns App2's identity with App1's answer nested inside.

        A failed call to App1 is reported in `app1Response` and never
        changes the status code.
        """
        response = build_identity(settings, MESSAGE)
        response["app1Response"] = None
        logger.info("Request received at %s", response["timestamp"])

        try:
            logger.info("Calling App1 at %s", app1_client.base_url)
            response["app1Response"] = app1_client.fetch_identity()
            logger.info("Successfully received response from App1")
        except DependencyCallError as error:
            logger.error("Error calling App1: %s", error)
            response["app1Response"] = {"error": f"Failed to call App1: {error}"}

        return jsonify(response), 200

    return app


def main():
    try:
        settings = load_caller_settings()
    except SettingsLoadError as error:
        raise SystemExit(str(error)) from error

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("App2 listening on port %s", settings.port)
    logger.info("Configured to call App1 at: %s", settings.app1_url)
    app.run(host=settings.bind_host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
