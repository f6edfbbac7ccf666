from arcast.cache import Cache


def test_single_generator_call():
    cached = Cache()
    calls = []

    def generator():
        calls.append(1)
        return "Foobar"

    a = cached.get(generator)
    b = cached.get(generator)
    c = cached.get(generator)

    assert a == b == c == "Foobar"
    assert len(calls) == 1


def test_returns_same_object():
    cached = Cache()
    first = cached.get(list)
    second = cached.get(list)
    assert first is second


def test_later_generator_ignored():
    cached = Cache()
    assert cached.get(lambda: 1) == 1
    assert cached.get(lambda: 2) == 1


def test_caches_are_independent():
    one = Cache()
    two = Cache()
    assert one.get(lambda: "a") == "a"
    assert two.get(lambda: "b") == "b"