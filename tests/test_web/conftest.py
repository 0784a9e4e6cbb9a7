from __future__ import annotations

import pytest

from stylepress.config import CompressionConfig
from stylepress.functions.registry import FunctionRegistry
from stylepress.web.app import create_app


@pytest.fixture
def css_dir(tmp_path):
    """A stylesheet directory with a default and a secondary stylesheet."""
    (tmp_path / "style.css").write_text(
        "body {\n    color: @blue;\n    width: @colWidth(3);\n}\n", encoding="utf-8"
    )
    (tmp_path / "print.css").write_text("body { color: #000; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def functions():
    reg = FunctionRegistry()
    reg.register("colWidth", lambda n: f"{int(n) * 100}px")
    return reg


@pytest.fixture
def app(css_dir, functions):
    """Create a Flask app for testing."""
    application = create_app(
        config=CompressionConfig(base_path=str(css_dir)),
        functions=functions,
        variables={"blue": "#0000FF"},
        flask_config={"TESTING": True},
    )
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
