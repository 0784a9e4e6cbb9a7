from stylepress.model.report import ParseReport, SheetOutcome, SheetStatus
from stylepress.model.result import CompressionResult
from stylepress.model.stylesheet import (
    StylesheetRef,
    normalize_name,
    resolve_within,
    split_names,
)

__all__ = [
    "CompressionResult",
    "ParseReport",
    "SheetOutcome",
    "SheetStatus",
    "StylesheetRef",
    "normalize_name",
    "resolve_within",
    "split_names",
]
