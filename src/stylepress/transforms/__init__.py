from stylepress.transforms.base import Transform
from stylepress.transforms.functions import AT_RULES, RESERVED_FUNCTIONS, FunctionCall, FunctionDispatcher
from stylepress.transforms.minify import Minifier, compression_ratio, minify
from stylepress.transforms.variables import VariableSubstitutionTransform, VariableTable


def apply_transforms(text, transforms):
    """Run *text* through each transform in order."""
    for t in transforms:
        text = t.apply(text)
    return text


__all__ = [
    "AT_RULES",
    "FunctionCall",
    "FunctionDispatcher",
    "Minifier",
    "RESERVED_FUNCTIONS",
    "Transform",
    "VariableSubstitutionTransform",
    "VariableTable",
    "apply_transforms",
    "compression_ratio",
    "minify",
]
