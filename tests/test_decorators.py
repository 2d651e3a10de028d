import unittest

from bindgraph import Injector, bootstrap, bootstrapped, default_registry, injectable


@injectable(is_singleton=False)
class Counter:
    def __init__(self):
        self.count = 0

    def increment(self):
        self.count += 1


@injectable()
class SharedCounter:
    def __init__(self):
        self.count = 0

    def increment(self):
        self.count += 1


@bootstrapped()
class App:
    def __init__(self, counter1: Counter, counter2: Counter, shared1: SharedCounter, shared2: SharedCounter):
        self.counter1 = counter1
        self.counter2 = counter2
        self.shared1 = shared1
        self.shared2 = shared2


class TestDefaultRegistryDecorators(unittest.TestCase):
    def test_decorators_register_in_default_registry(self):
        assert default_registry.is_injectable(Counter)
        assert default_registry.is_injectable(SharedCounter)
        assert not default_registry.is_injectable(App)

    def test_transient_and_singleton_counters(self):
        app = Injector().bootstrap(App)

        app.counter1.increment()
        app.shared1.increment()

        assert (app.counter1.count, app.counter2.count) == (1, 0)
        assert (app.shared1.count, app.shared2.count) == (1, 1)

    def test_one_shot_bootstrap_uses_default_registry(self):
        app = bootstrap(App)
        assert app.shared1 is app.shared2
