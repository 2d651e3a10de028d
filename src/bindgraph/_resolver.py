from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import DependencyCycleError, type_name


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ._discovery import DiscoveredNode

    Factory = Callable[[], object]


def resolve(discovered: Mapping[type, DiscoveredNode], resolved: dict[type, Factory]) -> None:
    """Install a factory in `resolved` for every discovered type it lacks.

    Nodes are resolved greedily: on each pass the first node, in discovery
    order, whose dependencies all have factories is committed. Singletons
    are constructed immediately; transients get a factory that constructs
    on every call. Nodes committed before a failure stay in `resolved`.

    Raises:
        DependencyCycleError: when no remaining node can be resolved.
    """
    unresolved = {tp: node for tp, node in discovered.items() if tp not in resolved}
    reused = len(discovered) - len(unresolved)
    if reused:
        logger.debug("reusing %d cached factories", reused)

    while unresolved:
        node = next(
            (n for n in unresolved.values() if all(dep in resolved for dep in n.dependencies)),
            None,
        )
        if node is None:
            raise DependencyCycleError(unresolved)

        resolved[node.type] = _make_factory(node, resolved)
        del unresolved[node.type]


def _make_factory(node: DiscoveredNode, resolved: Mapping[type, Factory]) -> Factory:
    cls = node.type
    dependency_factories = [resolved[dep] for dep in node.dependencies]

    def create() -> object:
        return cls(*(factory() for factory in dependency_factories))

    if not node.is_singleton:
        logger.debug("resolved %s as transient", type_name(cls))
        return create

    instance = create()
    logger.debug("resolved %s as singleton", type_name(cls))

    def singleton() -> object:
        return instance

    return singleton
