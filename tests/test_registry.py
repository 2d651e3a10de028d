import logging

import pytest

from bindgraph import NotInjectableError, Registration, Registry, ResolutionError


def test_register_reads_dependencies_from_constructor_annotations():
    r = Registry()

    class DB: ...

    class Cache: ...

    class Repo:
        def __init__(self, db: DB, cache: Cache):
            self.db = db
            self.cache = cache

    reg = r.register(Repo)
    assert reg == Registration(type=Repo, is_singleton=True, dependencies=(DB, Cache))


def test_register_explicit_dependencies_take_precedence():
    r = Registry()

    class DB: ...

    class Repo:
        def __init__(self, db):
            self.db = db

    reg = r.register(Repo, [DB], is_singleton=False)
    assert reg.dependencies == (DB,)
    assert reg.is_singleton is False


def test_register_class_without_init_has_no_dependencies():
    r = Registry()

    class A: ...

    assert r.register(A).dependencies == ()


def test_register_inherits_base_class_constructor_dependencies():
    r = Registry()

    class DB: ...

    class Base:
        def __init__(self, db: DB):
            self.db = db

    class Derived(Base): ...

    assert r.register(Derived).dependencies == (DB,)


def test_parameter_with_default_ends_injected_prefix():
    r = Registry()

    class DB: ...

    class Repo:
        def __init__(self, db: DB, port: int = 5555, *args, **kwargs):
            self.db = db
            self.port = port

    assert r.register(Repo).dependencies == (DB,)


def test_unannotated_required_parameter_raises():
    r = Registry()

    class Repo:
        def __init__(self, db):
            self.db = db

    with pytest.raises(TypeError) as ctx:
        r.register(Repo)
    assert "Cannot infer dependency for constructor parameter 'db' of Repo" in str(ctx.value)
    assert not r.is_injectable(Repo)


def test_required_keyword_only_parameter_raises():
    r = Registry()

    class DB: ...

    class Repo:
        def __init__(self, *, db: DB):
            self.db = db

    with pytest.raises(TypeError):
        r.register(Repo)


def test_unresolvable_forward_reference_logs_warning(caplog):
    r = Registry()

    class Repo:
        def __init__(self, db: "MissingDatabase"):  # noqa: F821
            self.db = db

    with caplog.at_level(logging.WARNING, logger="bindgraph._registry"), pytest.raises(TypeError):
        r.register(Repo)
    assert "MissingDatabase" in caplog.text


def test_register_twice_raises():
    r = Registry()

    class A: ...

    r.register(A)
    with pytest.raises(ValueError, match="already registered"):
        r.register(A, is_singleton=False)
    assert r.metadata_of(A).is_singleton is True


def test_register_non_class_raises():
    r = Registry()

    with pytest.raises(TypeError):
        r.register(lambda: None)  # type: ignore[arg-type]


def test_metadata_of_unregistered_type_raises_not_injectable():
    r = Registry()

    class Unknown: ...

    with pytest.raises(NotInjectableError) as ctx:
        r.metadata_of(Unknown)
    assert str(ctx.value) == "Type Unknown is not injectable"
    assert ctx.value.type is Unknown
    assert isinstance(ctx.value, TypeError)
    assert isinstance(ctx.value, ResolutionError)


def test_is_injectable():
    r = Registry()

    class A: ...

    class B: ...

    r.register(A)
    assert r.is_injectable(A)
    assert not r.is_injectable(B)


def test_injectable_decorator_registers_and_returns_class():
    r = Registry()

    @r.injectable(is_singleton=False)
    class Counter: ...

    assert isinstance(Counter, type)
    assert r.metadata_of(Counter).is_singleton is False


def test_bootstrapped_decorator_declares_root_without_registering():
    r = Registry()

    class A: ...

    class B: ...

    @r.bootstrapped(dependencies=[A, B])
    class Main:
        def __init__(self, *parts):
            self.parts = parts

    assert not r.is_injectable(Main)
    assert r.dependencies_of(Main) == (A, B)


def test_dependencies_of_unregistered_type_falls_back_to_constructor():
    r = Registry()

    class A: ...

    class Main:
        def __init__(self, a: A):
            self.a = a

    assert r.dependencies_of(Main) == (A,)
