"""Vercel serverless entry point for Stylepress."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from stylepress.config import CompressionConfig
from stylepress.functions.registry import FunctionRegistry
from stylepress.web.app import create_app

# Serverless filesystems are read-only outside /tmp, so serve without caching
STYLESHEET_DIR = os.environ.get(
    "STYLEPRESS_PATH", os.path.join(os.path.dirname(__file__), "..", "css")
)

functions = FunctionRegistry()


@functions.function("colWidth")
def col_width(size, base="100"):
    return f"{int(size) * int(base)}px"


app = create_app(
    config=CompressionConfig(base_path=STYLESHEET_DIR, caching=False),
    functions=functions,
    variables={
        "font_family": '"Verdana", "Arial", sans-serif',
        "blue": "#0000FF",
        "img": "/images",
    },
)
