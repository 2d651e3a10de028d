from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class OverrideResolver:
    """Substitutes replacement types on dependency edges.

    An override never applies to the edges of its own replacement type:
    when `X` replaces `D` and `X` itself depends on `D`, that edge keeps
    pointing at the original `D` so `X` can wrap or delegate to it.
    """

    def __init__(self, overrides: Mapping[type, type] | None = None) -> None:
        self._overrides: dict[type, type] = dict(overrides or {})

    def __contains__(self, tp: object) -> bool:
        return tp in self._overrides

    def __bool__(self) -> bool:
        return bool(self._overrides)

    def resolve(self, dependency: type, consumer: type) -> type:
        replacement = self._overrides.get(dependency)
        if replacement is not None and replacement is not consumer:
            return replacement
        return dependency

    def resolve_all(self, dependencies: Iterable[type], consumer: type) -> list[type]:
        return [self.resolve(dep, consumer) for dep in dependencies]
