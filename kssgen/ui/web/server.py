"""
Preview server — Flask app factory for a built style guide.

Serves the generator's output directory as a static site so the
style guide can be browsed locally after ``kssgen build``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

logger = logging.getLogger(__name__)


def create_app(site_root: Path) -> Flask:
    """Create and configure the preview application.

    Args:
        site_root: Directory holding the built style guide.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__, static_folder=None)
    app.config["SITE_ROOT"] = str(Path(site_root).resolve())

    from kssgen.ui.web.routes_site import site_bp

    app.register_blueprint(site_bp)

    logger.info("Preview app created (root=%s)", app.config["SITE_ROOT"])
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8000,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting style guide preview on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
