from stylepress.web.routes.stylesheets import stylesheets_bp

__all__ = ["stylesheets_bp"]
