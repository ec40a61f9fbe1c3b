from flask import Blueprint

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint for Kubernetes probes."""
    return "Healthy", 200, {"Content-Type": "text/plain; charset=utf-8"}
