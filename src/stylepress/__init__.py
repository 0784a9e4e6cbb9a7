"""Stylepress: stylesheet variables, inline functions, minification and caching."""

__version__ = "2.1.0"

from stylepress.cache.store import StylesheetCache  # noqa: E402
from stylepress.config import CompressionConfig, FunctionPolicy  # noqa: E402
from stylepress.errors import (  # noqa: E402
    CacheMissError,
    CacheWriteError,
    FunctionCallError,
    NotConfiguredError,
    SourceMissingError,
    StylepressError,
    UnknownFunctionError,
    UnsafePathError,
)
from stylepress.functions.registry import FunctionRegistry, FunctionResolver  # noqa: E402
from stylepress.pipeline.compression import CompressionPipeline  # noqa: E402
from stylepress.transforms.minify import Minifier, minify  # noqa: E402
from stylepress.transforms.variables import VariableTable  # noqa: E402

__all__ = [
    "CacheMissError",
    "CacheWriteError",
    "CompressionConfig",
    "CompressionPipeline",
    "FunctionCallError",
    "FunctionPolicy",
    "FunctionRegistry",
    "FunctionResolver",
    "Minifier",
    "NotConfiguredError",
    "SourceMissingError",
    "StylepressError",
    "StylesheetCache",
    "UnknownFunctionError",
    "UnsafePathError",
    "VariableTable",
    "__version__",
    "minify",
]
