import random
import threading

from adapters.random_sources import SeededRandomProvider, ThreadLocalRandomProvider
from core.interfaces.random_source import RandomProvider


def test_providers_satisfy_protocol():
    assert isinstance(ThreadLocalRandomProvider(), RandomProvider)
    assert isinstance(SeededRandomProvider(1), RandomProvider)


def test_same_thread_gets_same_generator():
    provider = ThreadLocalRandomProvider()
    assert provider.generator() is provider.generator()


def test_threads_get_distinct_generators():
    provider = ThreadLocalRandomProvider()
    seen = []

    def grab():
        seen.append(provider.generator())

    threads = [threading.Thread(target=grab) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(g) for g in seen}) == 3
    assert provider.generator() not in seen


def test_seeded_provider_matches_random_stream():
    provider = SeededRandomProvider(1234)
    expected = random.Random(1234)
    rng = provider.generator()
    assert [rng.random() for _ in range(5)] == [expected.random() for _ in range(5)]


def test_seeded_provider_gives_each_thread_its_own_stream():
    provider = SeededRandomProvider(7)
    barrier = threading.Barrier(3)
    streams = []
    lock = threading.Lock()

    def grab():
        rng = provider.generator()
        barrier.wait()
        values = tuple(rng.randint(1, 1000) for _ in range(50))
        with lock:
            streams.append(values)

    threads = [threading.Thread(target=grab) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(streams)) == 3
    first = random.Random(7)
    assert tuple(first.randint(1, 1000) for _ in range(50)) in streams
