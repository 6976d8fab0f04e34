from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple

_ATTR_EXPORTS: Dict[str, Tuple[str, str]] = {
    "VERSION": ("windowless.config", "VERSION"),
    "TableSettings": ("windowless.config", "TableSettings"),
    "consume_load_warnings": ("windowless.config", "consume_load_warnings"),
    "Rectangle": ("windowless.geometry", "Rectangle"),
    "overlaps": ("windowless.geometry", "overlaps"),
    "split": ("windowless.geometry", "split"),
    "WindowlessError": ("windowless.errors", "WindowlessError"),
    "OutsideRoot": ("windowless.errors", "OutsideRoot"),
    "InvalidHandle": ("windowless.errors", "InvalidHandle"),
    "WindowKey": ("windowless.window_graph", "WindowKey"),
    "WindowNode": ("windowless.window_graph", "WindowNode"),
    "WindowTable": ("windowless.window_graph", "WindowTable"),
    "CursorState": ("windowless.cursor", "CursorState"),
    "setup_logging": ("windowless.logging_setup", "setup_logging"),
}

__all__ = [
    "VERSION",
    "TableSettings",
    "consume_load_warnings",
    "Rectangle",
    "overlaps",
    "split",
    "WindowlessError",
    "OutsideRoot",
    "InvalidHandle",
    "WindowKey",
    "WindowNode",
    "WindowTable",
    "CursorState",
    "setup_logging",
]


def __getattr__(name: str):
    target = _ATTR_EXPORTS.get(name)
    if target is not None:
        source_module_name, source_attr_name = target
        source_module = import_module(source_module_name)
        value = getattr(source_module, source_attr_name)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(globals().keys()) | set(__all__))
