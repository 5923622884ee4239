import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from lzi.singleton import (
    Instance,
    LockedSingleton,
    SharedInstanceAccessor,
    default_accessor,
    get_instance,
    shared,
)


class CountingInstance(Instance):
    constructed = 0
    _lock = threading.Lock()

    def __init__(self):
        with self._lock:
            type(self).constructed += 1


@pytest.fixture
def counting_accessor():
    CountingInstance.constructed = 0
    return SharedInstanceAccessor(CountingInstance, announce = False)


def test_hundred_concurrent_callers_construct_once(counting_accessor):
    callers = 100
    barrier = threading.Barrier(callers)

    def worker(_):
        barrier.wait()
        return counting_accessor.get_instance()

    with ThreadPoolExecutor(max_workers = callers) as pool:
        handles = list(pool.map(worker, range(callers)))

    assert CountingInstance.constructed == 1
    assert len(handles) == callers
    assert all(handle is handles[0] for handle in handles)


def test_sequential_calls_construct_once(counting_accessor):
    first, created = counting_accessor.acquire()
    second, created_again = counting_accessor.acquire()

    assert created is True
    assert created_again is False
    assert first is second
    assert CountingInstance.constructed == 1


def test_accessor_is_lazy(counting_accessor):
    assert not counting_accessor.constructed
    assert CountingInstance.constructed == 0
    counting_accessor()
    assert counting_accessor.constructed


def test_do_something_is_fixed(counting_accessor):
    results = {counting_accessor.get_instance().do_something() for _ in range(5)}
    assert results == {"Doing something."}


def test_fresh_accessors_are_independent():
    a = SharedInstanceAccessor(announce = False)
    b = SharedInstanceAccessor(announce = False)
    assert a.get_instance() is not b.get_instance()
    assert isinstance(a.get_instance(), Instance)


def test_process_wide_get_instance_returns_same_object():
    first = get_instance()
    assert get_instance() is first
    assert default_accessor.get_instance() is first
    assert first.do_something() == "Doing something."


def test_guard_released_after_failing_factory():
    attempts = []

    def factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("not yet")
        return Instance()

    accessor = SharedInstanceAccessor(factory, name = "flaky", announce = False)
    with pytest.raises(RuntimeError):
        accessor.get_instance()
    assert not accessor.constructed
    assert not accessor._cell.locked
    assert isinstance(accessor.get_instance(), Instance)


def test_announces_creation_then_reuse(captured_logs):
    accessor = SharedInstanceAccessor(name = "announced", announce = True)
    accessor.get_instance()
    accessor.get_instance()

    messages = [m.strip() for m in captured_logs]
    assert "created|Creating single instance now." in messages
    assert "reused|Single instance already created." in messages
    assert messages.index("created|Creating single instance now.") < messages.index("reused|Single instance already created.")


def test_silent_accessor_logs_only_cell_event(captured_logs):
    SharedInstanceAccessor(name = "quiet", announce = False).get_instance()
    messages = [m.strip() for m in captured_logs]
    assert "created|Value initialised" in messages
    assert not any("single instance" in m for m in messages)


@pytest.mark.parametrize("env_value, announced", [("true", True), ("false", False)])
def test_default_announce_follows_settings(monkeypatch, captured_logs, env_value, announced):
    import lzi.configs

    monkeypatch.setenv("LZI_ANNOUNCE", env_value)
    monkeypatch.setattr(lzi.configs, "get_settings", lambda: lzi.configs.LziSettings())

    accessor = SharedInstanceAccessor(name = f"from-env-{env_value}")
    accessor.get_instance()
    accessor.get_instance()

    messages = [m.strip() for m in captured_logs]
    assert accessor.announce is announced
    assert ("created|Creating single instance now." in messages) is announced
    assert ("reused|Single instance already created." in messages) is announced


def test_locked_singleton_per_subclass():
    inits = []

    class Registry(LockedSingleton):
        def __init__(self, label: str = "default"):
            inits.append(label)
            self.label = label

    class Other(LockedSingleton):
        pass

    assert not Registry.has_instance()
    first = Registry("first")
    second = Registry("second")

    assert first is second
    assert Registry.get_instance() is first
    assert first.label == "first"
    assert inits == ["first"]
    assert Other() is not first
    assert Other() is Other.get_instance()


def test_locked_singleton_concurrent_construction():
    inits = []

    class Pool(LockedSingleton):
        def __init__(self):
            inits.append(1)

    callers = 32
    barrier = threading.Barrier(callers)

    def worker(_):
        barrier.wait()
        return Pool()

    with ThreadPoolExecutor(max_workers = callers) as pool:
        handles = list(pool.map(worker, range(callers)))

    assert len(inits) == 1
    assert all(handle is handles[0] for handle in handles)


def test_shared_decorator_with_and_without_arguments():

    @shared
    class Clock:
        pass

    @shared(name = "named-clock", announce = False)
    class NamedClock:
        pass

    assert isinstance(Clock, SharedInstanceAccessor)
    assert Clock() is Clock.get_instance()
    assert NamedClock.name == "named-clock"
    assert NamedClock() is NamedClock()
    assert repr(NamedClock) == "<SharedInstanceAccessor 'named-clock' constructed>"
