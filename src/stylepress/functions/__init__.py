from stylepress.functions.registry import (
    FunctionRegistry,
    FunctionResolver,
    StyleFunction,
    registry_from_module,
)

__all__ = ["FunctionRegistry", "FunctionResolver", "StyleFunction", "registry_from_module"]
