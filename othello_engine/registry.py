"""Central registry of move-selection policies, keyed by mode name."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable


PolicyFactory = Callable[..., Any]

_POLICY_REGISTRY: Dict[str, PolicyFactory] = {}


def register_policy(mode: str, factory: PolicyFactory) -> None:
    """Register a policy factory under ``mode``."""
    if mode in _POLICY_REGISTRY:
        raise ValueError(f"Policy mode '{mode}' is already registered.")
    _POLICY_REGISTRY[mode] = factory


def make_policy(mode: str, **kwargs: Any) -> Any:
    """Instantiate the policy registered under ``mode``."""
    if mode not in _POLICY_REGISTRY:
        raise KeyError(f"Policy mode '{mode}' is not registered.")
    return _POLICY_REGISTRY[mode](**kwargs)


def list_policies() -> Iterable[str]:
    """Return iterable of registered mode names."""
    return tuple(_POLICY_REGISTRY.keys())


def get_policy_entry(mode: str) -> PolicyFactory:
    """Retrieve the raw factory for a mode."""
    if mode not in _POLICY_REGISTRY:
        raise KeyError(f"Policy mode '{mode}' is not registered.")
    return _POLICY_REGISTRY[mode]
