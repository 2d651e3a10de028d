from __future__ import annotations

import inspect
import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from ._errors import NotInjectableError, type_name


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

T = TypeVar("T")


@dataclass(frozen=True)
class Registration:
    type: type
    is_singleton: bool = True
    dependencies: tuple[type, ...] = ()


class Registry:
    """Records which types are injectable and what their constructors need.

    - register types with an explicit or introspected dependency list
    - mark types singleton (default) or transient
    - declare composition roots that are bootstrapped but never injected.
    """

    def __init__(self) -> None:
        self._registrations: dict[type, Registration] = {}
        self._roots: dict[type, tuple[type, ...]] = {}
        self._lock = threading.RLock()

    def register(
        self,
        cls: type,
        dependencies: Sequence[type] | None = None,
        *,
        is_singleton: bool = True,
    ) -> Registration:
        """Register `cls` as injectable.

        Example:
          registry.register(Repo, [Database])
          registry.register(Counter, is_singleton=False)

        When `dependencies` is omitted they are read from the annotated
        parameters of `cls.__init__`.
        """
        if not inspect.isclass(cls):
            msg = f"Only classes can be registered, got {cls!r}"
            raise TypeError(msg)

        deps = tuple(dependencies) if dependencies is not None else constructor_dependencies(cls)

        with self._lock:
            if cls in self._registrations:
                msg = f"Type {type_name(cls)} is already registered."
                raise ValueError(msg)
            registration = Registration(type=cls, is_singleton=is_singleton, dependencies=deps)
            self._registrations[cls] = registration

        logger.debug(
            "registered %s (%s) -> [%s]",
            type_name(cls),
            "singleton" if is_singleton else "transient",
            ", ".join(type_name(dep) for dep in deps),
        )
        return registration

    def declare_root(self, cls: type, dependencies: Sequence[type] | None = None) -> None:
        """Record the dependencies of a composition root without making it injectable."""
        deps = tuple(dependencies) if dependencies is not None else constructor_dependencies(cls)
        with self._lock:
            self._roots[cls] = deps

    def is_injectable(self, cls: object) -> bool:
        return cls in self._registrations

    def metadata_of(self, cls: type) -> Registration:
        try:
            return self._registrations[cls]
        except KeyError:
            raise NotInjectableError(cls) from None

    def dependencies_of(self, cls: type) -> tuple[type, ...]:
        """Raw dependency list of `cls`, registered or not."""
        registration = self._registrations.get(cls)
        if registration is not None:
            return registration.dependencies
        if cls in self._roots:
            return self._roots[cls]
        return constructor_dependencies(cls)

    def injectable(
        self,
        *,
        is_singleton: bool = True,
        dependencies: Sequence[type] | None = None,
    ) -> Callable[[type[T]], type[T]]:
        """Class decorator registering the decorated class."""

        def decorator(cls: type[T]) -> type[T]:
            self.register(cls, dependencies, is_singleton=is_singleton)
            return cls

        return decorator

    def bootstrapped(self, *, dependencies: Sequence[type] | None = None) -> Callable[[type[T]], type[T]]:
        """Class decorator declaring the decorated class a composition root."""

        def decorator(cls: type[T]) -> type[T]:
            self.declare_root(cls, dependencies)
            return cls

        return decorator


default_registry = Registry()


def injectable(
    *,
    is_singleton: bool = True,
    dependencies: Sequence[type] | None = None,
) -> Callable[[type[T]], type[T]]:
    return default_registry.injectable(is_singleton=is_singleton, dependencies=dependencies)


def bootstrapped(*, dependencies: Sequence[type] | None = None) -> Callable[[type[T]], type[T]]:
    return default_registry.bootstrapped(dependencies=dependencies)


def constructor_dependencies(cls: type) -> tuple[type, ...]:
    """Dependency types of `cls`, read from its constructor signature.

    Positional parameters are taken in order. The first parameter with a
    default value ends the injected prefix; variadic parameters are ignored.
    """
    try:
        sig = inspect.signature(cls)
    except (TypeError, ValueError):
        return ()

    hints = _get_init_type_hints(cls)
    deps: list[type] = []

    for name, p in sig.parameters.items():
        if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
            continue

        if p.default is not p.empty:
            if p.kind is p.KEYWORD_ONLY:
                continue
            break

        if p.kind is p.KEYWORD_ONLY:
            msg = f"Cannot inject keyword-only parameter '{name}' of {type_name(cls)}"
            raise TypeError(msg)

        ann = hints.get(name, p.annotation)
        if ann is p.empty or not inspect.isclass(ann):
            ann_repr = "no-annotation" if ann is p.empty else repr(ann)
            msg = (
                f"Cannot infer dependency for constructor parameter '{name}' of {type_name(cls)} "
                f"(annotation: {ann_repr})."
            )
            raise TypeError(msg)
        deps.append(ann)

    return tuple(deps)


def _get_init_type_hints(cls: type) -> dict[str, Any]:
    try:
        init = inspect.getattr_static(cls, "__init__")
        hints = get_type_hints(init)
    except TypeError:
        hints = {}
    except NameError as exc:
        logger.warning("'%s' name error retrieving %s (%s) type hints", exc.name, cls.__name__, cls.__qualname__)
        hints = {}

    return hints
