from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from stylepress.errors import StylepressError, UnsafePathError
from stylepress.pipeline.compression import CompressionPipeline
from stylepress.web.headers import no_cache_headers, stylesheet_headers

stylesheets_bp = Blueprint("stylesheets", __name__)

DEFAULT_STYLESHEET = "style.css"
_TRUTHY = {"1", "true", "yes", "on"}


@stylesheets_bp.route("/")
@stylesheets_bp.route("/css")
def serve_stylesheets():
    """Compress the stylesheets named in ``?load=a.css,b.css``."""
    load = request.args.get("load", DEFAULT_STYLESHEET)
    nocache = request.args.get("nocache", "").lower() in _TRUTHY

    try:
        pipeline = CompressionPipeline(
            load,
            config=current_app.extensions["stylepress.config"],
            functions=current_app.extensions["stylepress.functions"],
            logger=current_app.logger,
        )
    except UnsafePathError as exc:
        return Response(f"/* {exc} */\n", status=400, mimetype="text/css")

    pipeline.bind(current_app.extensions["stylepress.variables"])

    try:
        body = pipeline.parse()
    except StylepressError as exc:
        current_app.logger.error("Stylesheet compression failed: %s", exc)
        return Response(f"/* {exc} */\n", status=500, mimetype="text/css")

    status = 200 if pipeline.last_report.outcomes and body else 404
    response = Response(body, status=status, mimetype="text/css")
    if nocache:
        response.headers.update(no_cache_headers())
    else:
        response.headers.update(stylesheet_headers(pipeline.last_report.last_modified))
    return response
