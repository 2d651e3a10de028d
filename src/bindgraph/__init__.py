"""Dependency injection by object-graph resolution.

This package builds the minimal object graph needed to construct a root type
from a registry of injectable types, sharing singleton instances and creating
transient instances fresh, with optional per-edge type overrides.

Exports:
- `Registry`: Records injectable types, their singleton flag and dependencies.
- `Injector`: Resolves and caches factories across `bootstrap` calls.
- `bootstrap`: One-shot resolution with a fresh `Injector`.
- `injectable` / `bootstrapped`: Class decorators bound to `default_registry`.
- `ResolutionError` and its subclasses `NotInjectableError`,
  `DependencyNotInjectableError` and `DependencyCycleError`.
"""

from ._errors import DependencyCycleError, DependencyNotInjectableError, NotInjectableError, ResolutionError
from ._injector import Injector, bootstrap
from ._registry import Registration, Registry, bootstrapped, default_registry, injectable


__all__ = [
    "DependencyCycleError",
    "DependencyNotInjectableError",
    "Injector",
    "NotInjectableError",
    "Registration",
    "Registry",
    "ResolutionError",
    "bootstrap",
    "bootstrapped",
    "default_registry",
    "injectable",
]
