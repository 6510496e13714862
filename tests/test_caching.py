# std
import threading

# third-party
import pytest

# local
from unistr.caching import Cache, CacheRejectionWarning, cached


# ---------------------------------------------------------------------------- #
@pytest.fixture
def counted():
    calls = []

    @cached(name='counted')
    def func(value, suffix='!'):
        calls.append(value)
        return f'{value}{suffix}'

    func.calls = calls
    return func


# ---------------------------------------------------------------------------- #
def test_cache_basics():
    cache = Cache('test')
    assert len(cache) == 0
    assert cache.setdefault('a', 1) == 1
    assert cache.setdefault('a', 2) == 1
    assert 'a' in cache
    assert cache['a'] == 1
    assert cache.get('b') is None
    assert list(cache) == ['a']
    assert cache.items() == (('a', 1), )

    cache.clear()
    assert len(cache) == 0


def test_cache_repr():
    assert repr(Cache('snake')) == "Cache('snake', size=0)"
    assert repr(Cache('snake', enabled=False)) == "Cache('snake', size=0, disabled)"


def test_memoized(counted):
    assert counted('a') == 'a!'
    assert counted('a') == 'a!'
    assert counted.calls == ['a']
    assert len(counted.__cache__) == 1


def test_defaults_bound_in_key(counted):
    counted('a')
    counted('a', '!')
    counted('a', suffix='!')
    assert counted.calls == ['a']
    assert ('a', '!') in counted.__cache__


def test_distinct_keys(counted):
    assert counted('a', '?') == 'a?'
    assert counted('a') == 'a!'
    assert len(counted.__cache__) == 2


def test_disabled(counted):
    counted.__cache__.enabled = False
    counted('a')
    counted('a')
    assert counted.calls == ['a', 'a']
    assert len(counted.__cache__) == 0


def test_unhashable(counted):
    with pytest.warns(CacheRejectionWarning):
        assert counted(('a', ), ['?']) == "('a',)['?']"

    assert len(counted.__cache__) == 0


def test_not_callable():
    with pytest.raises(TypeError):
        cached()(42)


def test_name_defaults_to_qualname():
    @cached()
    def func(x):
        return x

    assert func.__cache__.name.endswith('func')
    assert func.__name__ == 'func'


def test_concurrent_first_value_wins():
    cache = Cache()
    barrier = threading.Barrier(4)
    results = []

    def worker(value):
        barrier.wait()
        results.append(cache.setdefault('key', value))

    threads = [threading.Thread(target=worker, args=(i, )) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 1
    assert cache['key'] == results[0]
