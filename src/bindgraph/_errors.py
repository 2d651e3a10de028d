from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._discovery import DiscoveredNode


def type_name(tp: object) -> str:
    return getattr(tp, "__name__", repr(tp))


class ResolutionError(RuntimeError):
    pass


class NotInjectableError(ResolutionError, TypeError):
    """Raised when a type with no registration is resolved as injectable."""

    def __init__(self, tp: type) -> None:
        self.type = tp
        super().__init__(f"Type {type_name(tp)} is not injectable")


class DependencyNotInjectableError(ResolutionError, TypeError):
    """Raised when a discovered dependency of `consumer` has no registration."""

    def __init__(self, dependency: type, consumer: type) -> None:
        self.dependency = dependency
        self.consumer = consumer
        super().__init__(f"Dependency {type_name(dependency)} of {type_name(consumer)} is not Injectable")


class DependencyCycleError(ResolutionError):
    """Raised when the remaining unresolved nodes cannot make progress.

    `unresolved` maps each stalled type to its direct (override-resolved)
    dependencies, in discovery order.
    """

    def __init__(self, unresolved: Mapping[type, DiscoveredNode]) -> None:
        self.unresolved = dict(unresolved)
        described = ", ".join(
            f"{type_name(tp)} (-> {','.join(type_name(dep) for dep in node.dependencies)})"
            for tp, node in self.unresolved.items()
        )
        super().__init__(f"Dependency cycle detected: Failed to resolve {described}")
