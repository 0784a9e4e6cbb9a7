from __future__ import annotations

from typing import Mapping

from flask import Flask

from stylepress.config import CompressionConfig
from stylepress.functions.registry import FunctionResolver


def create_app(
    config: CompressionConfig | None = None,
    functions: FunctionResolver | None = None,
    variables: Mapping[str, object] | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create a Flask app that serves compressed stylesheets."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    app.extensions["stylepress.config"] = config or CompressionConfig()
    app.extensions["stylepress.functions"] = functions
    app.extensions["stylepress.variables"] = dict(variables or {})

    from stylepress.web.routes.stylesheets import stylesheets_bp

    app.register_blueprint(stylesheets_bp)

    return app
