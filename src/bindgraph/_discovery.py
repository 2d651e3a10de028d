"""Dependency-closure discovery.

Walks the registry from a set of root types and produces a table of every
reachable type with its override-resolved dependency list. No ordering is
attempted here and cycles are tolerated; both are handled by the resolver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._errors import DependencyNotInjectableError, type_name


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._overrides import OverrideResolver
    from ._registry import Registry


@dataclass(frozen=True)
class DiscoveredNode:
    type: type
    is_singleton: bool
    dependencies: tuple[type, ...]


def discover(
    roots: Iterable[type],
    registry: Registry,
    overrides: OverrideResolver,
) -> dict[type, DiscoveredNode]:
    """Discover every type reachable from `roots`.

    Returns the nodes keyed by type, in discovery order.

    Raises:
        NotInjectableError: if a root is not registered.
        DependencyNotInjectableError: if a reachable dependency is not registered.
    """
    discovered: dict[type, DiscoveredNode] = {}
    # dict as an insertion-ordered set
    frontier: dict[type, None] = dict.fromkeys(roots)

    while frontier:
        current = next(iter(frontier))
        del frontier[current]
        if current in discovered:
            continue

        registration = registry.metadata_of(current)
        dependencies = overrides.resolve_all(registration.dependencies, current)

        for dep in dependencies:
            if dep in discovered:
                continue
            if not registry.is_injectable(dep):
                raise DependencyNotInjectableError(dep, current)
            frontier[dep] = None

        discovered[current] = DiscoveredNode(
            type=current,
            is_singleton=registration.is_singleton,
            dependencies=tuple(dependencies),
        )

    logger.debug("discovered %d type(s): %s", len(discovered), ", ".join(map(type_name, discovered)))
    return discovered
