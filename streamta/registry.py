"""streamta.registry

Indicator and strategy configs by name.

Registry responsibilities:
- @register_indicator / @register_strategy decorators (keyed by ``NAME``)
- lookup/list helpers
- module auto-discovery (import streamta.indicators.* and
  streamta.strategies.* to trigger decorators)
- ``build_config``: default config + string parameters through ``set``
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Mapping
from typing import Any, Literal

logger = logging.getLogger(__name__)

Kind = Literal["indicator", "strategy"]

_PACKAGES: dict[Kind, str] = {
    "indicator": "streamta.indicators",
    "strategy": "streamta.strategies",
}

_REGISTRY: dict[Kind, dict[str, type[Any]]] = {"indicator": {}, "strategy": {}}
_DISCOVERED = False


def _register(kind: Kind, cls: type[Any]) -> type[Any]:
    name = getattr(cls, "NAME", "")
    if not name:
        raise ValueError(f"{kind} config has no NAME: {cls.__qualname__}")
    registry = _REGISTRY[kind]
    if name in registry and registry[name] is not cls:
        raise ValueError(f"{kind} already registered: {name}")
    registry[name] = cls
    return cls


def register_indicator(cls: type[Any]) -> type[Any]:
    return _register("indicator", cls)


def register_strategy(cls: type[Any]) -> type[Any]:
    return _register("strategy", cls)


def discover() -> None:
    global _DISCOVERED
    if _DISCOVERED:
        return

    for pkg_name in _PACKAGES.values():
        pkg = importlib.import_module(pkg_name)
        for m in pkgutil.iter_modules(pkg.__path__, prefix=f"{pkg_name}."):
            importlib.import_module(m.name)

    _DISCOVERED = True
    logger.debug(
        "registry_discovered",
        extra={"indicators": sorted(_REGISTRY["indicator"]), "strategies": sorted(_REGISTRY["strategy"])},
    )


def _maybe_discover(kind: Kind) -> None:
    """Lazy discovery for listings.

    If something has already registered configs of this kind (e.g. tests),
    don't import the whole package as a side effect of listing.
    Applications should call discover() explicitly during startup.
    """

    if _DISCOVERED or _REGISTRY[kind]:
        return
    discover()


def _get(kind: Kind, name: str) -> type[Any]:
    if name in _REGISTRY[kind]:
        return _REGISTRY[kind][name]

    # Importing one config module registers only that module; a miss means
    # the rest of the package has not been imported yet.
    discover()
    if name not in _REGISTRY[kind]:
        raise KeyError(f"unknown {kind}: {name}")
    return _REGISTRY[kind][name]


def get_indicator(name: str) -> type[Any]:
    return _get("indicator", name)


def get_strategy(name: str) -> type[Any]:
    return _get("strategy", name)


def list_indicators() -> list[str]:
    _maybe_discover("indicator")
    return sorted(_REGISTRY["indicator"])


def list_strategies() -> list[str]:
    _maybe_discover("strategy")
    return sorted(_REGISTRY["strategy"])


def build_config(kind: Kind, name: str, params: Mapping[str, Any] | None = None) -> Any:
    """Default config for ``name`` with each parameter applied as text."""

    cfg = _get(kind, name)()
    for key, value in (params or {}).items():
        cfg.set(key, str(value))
    return cfg


def _reset_for_tests() -> None:
    """Clear registries and unload config modules so decorators can re-run."""

    import sys

    global _DISCOVERED
    for registry in _REGISTRY.values():
        registry.clear()
    _DISCOVERED = False

    prefixes = tuple(_PACKAGES.values())
    for key in list(sys.modules.keys()):
        if key.startswith(prefixes):
            sys.modules.pop(key, None)
