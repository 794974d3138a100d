"""
Site routes — serve files from the built style guide.

  GET /               → index.html
  GET /<path>         → the file, or <path>/index.html for directories
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

from flask import Blueprint, abort, current_app, send_file

site_bp = Blueprint("site", __name__)


def _site_root() -> Path:
    return Path(current_app.config["SITE_ROOT"])


@site_bp.route("/")
@site_bp.route("/<path:filepath>")
def serve_site(filepath: str = "index.html"):  # type: ignore[no-untyped-def]
    """Serve a file from the style guide output."""
    root = _site_root().resolve()
    requested = (root / filepath).resolve()

    # Keep requests inside the site root
    if requested != root and root not in requested.parents:
        abort(404)

    if requested.is_file():
        mime = mimetypes.guess_type(str(requested))[0] or "application/octet-stream"
        return send_file(requested, mimetype=mime)

    if requested.is_dir():
        index = requested / "index.html"
        if index.is_file():
            return send_file(index, mimetype="text/html")

    abort(404, description=f"File not found: {filepath}")
