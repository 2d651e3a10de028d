from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar, cast

from ._discovery import discover
from ._errors import DependencyNotInjectableError, type_name
from ._overrides import OverrideResolver
from ._registry import Registry, default_registry
from ._resolver import resolve


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

T = TypeVar("T")


class Injector:
    """Builds object graphs from registered types.

    - singletons are constructed once per injector and shared
    - transients are constructed on every resolution path
    - `overrides` substitutes replacement types on dependency edges
    - resolved factories are kept across `bootstrap` calls.

    Not thread-safe: concurrent `bootstrap` calls must be serialized by the caller.
    """

    def __init__(
        self,
        overrides: Mapping[type, type] | None = None,
        *,
        registry: Registry | None = None,
    ) -> None:
        self._overrides = OverrideResolver(overrides)
        self._registry = registry if registry is not None else default_registry
        self._resolved: dict[type, Callable[[], object]] = {}

    @property
    def resolved_types(self) -> frozenset[type]:
        return frozenset(self._resolved)

    def bootstrap(self, root: type[T]) -> T:
        """Construct `root` with all of its dependencies.

        `root` may be registered, or be a composition root whose own
        constructor dependencies are registered.
        """
        if self._registry.is_injectable(root):
            self._resolve([root])
            return cast("T", self._resolved[root]())

        dependencies = self._overrides.resolve_all(self._registry.dependencies_of(root), root)
        for dep in dependencies:
            if not self._registry.is_injectable(dep):
                raise DependencyNotInjectableError(dep, root)

        self._resolve(dependencies)
        logger.debug("constructing composition root %s", type_name(root))
        return root(*(self._resolved[dep]() for dep in dependencies))

    def _resolve(self, roots: list[type]) -> None:
        resolve(discover(roots, self._registry, self._overrides), self._resolved)


def bootstrap(
    root: type[T],
    overrides: Mapping[type, type] | None = None,
    *,
    registry: Registry | None = None,
) -> T:
    """Construct `root` using a fresh, single-use `Injector`."""
    return Injector(overrides, registry=registry).bootstrap(root)
