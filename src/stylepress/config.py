from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FunctionPolicy(Enum):
    """What to do when an inline function cannot be evaluated."""

    FAIL = "fail"    # Default: drop the one stylesheet, keep the batch
    ABORT = "abort"  # Propagate out of parse()
    WARN = "warn"    # Log and leave the token in the output


@dataclass(frozen=True)
class CompressionConfig:
    base_path: str = "."
    cache_dir: str = "_cache"
    caching: bool = True
    var_prefix: str = "@"
    var_suffix: str = ""
    function_sigil: str = "@"
    function_policy: FunctionPolicy = FunctionPolicy.FAIL
    strict: bool = False  # raise on missing sources instead of skipping
