"""Function registry: host-provided callables for inline stylesheet functions."""

from __future__ import annotations

from typing import Any, Callable, Protocol

StyleFunction = Callable[..., Any]


class FunctionResolver(Protocol):
    """Anything that can turn a function name into a callable."""

    def resolve(self, name: str) -> StyleFunction | None: ...


class FunctionRegistry:
    """Registry of functions callable from stylesheets as ``@name(args)``.

    Plain functions are registered by name. Objects registered as a
    namespace expose their public callable attributes as ``Namespace.attr``.
    Latest-wins on name collision. Insertion-order stable.
    """

    def __init__(self) -> None:
        self._functions: dict[str, StyleFunction] = {}
        self._namespaces: dict[str, object] = {}

    def register(self, name: str, function: StyleFunction) -> None:
        """Register a function. Overwrites any existing function with the same name."""
        if not callable(function):
            raise TypeError(f"{name!r} is not callable")
        self._functions[name] = function

    def register_namespace(self, name: str, namespace: object) -> None:
        """Expose the public callables of *namespace* as ``name.attr``."""
        self._namespaces[name] = namespace

    def function(self, name: str | None = None) -> Callable[[StyleFunction], StyleFunction]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: StyleFunction) -> StyleFunction:
            self.register(name or fn.__name__, fn)
            return fn

        return decorator

    def unregister(self, name: str) -> None:
        """Remove a function or namespace by name. No-op if not found."""
        self._functions.pop(name, None)
        self._namespaces.pop(name, None)

    def resolve(self, name: str) -> StyleFunction | None:
        if "." in name:
            owner, _, attr = name.partition(".")
            namespace = self._namespaces.get(owner)
            if namespace is None or not attr or attr.startswith("_") or "." in attr:
                return None
            candidate = getattr(namespace, attr, None)
            return candidate if callable(candidate) else None
        return self._functions.get(name)

    def names(self) -> list[str]:
        """Return registered function and namespace names in registration order."""
        return list(self._functions) + list(self._namespaces)


def registry_from_module(module: object) -> FunctionRegistry:
    """Build a registry from the public top-level functions of a module."""
    registry = FunctionRegistry()
    module_name = getattr(module, "__name__", None)
    for attr, value in vars(module).items():
        if attr.startswith("_") or not callable(value) or isinstance(value, type):
            continue
        if getattr(value, "__module__", module_name) != module_name:
            continue
        registry.register(attr, value)
    return registry
