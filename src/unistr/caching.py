"""
Memoization caches for pure string functions.

Each memoized function owns exactly one `Cache`, referenced as the
`__cache__` attribute of the decorated function. Entries are written once
and never evicted, so a cache can only ever return what the function itself
would have computed.
"""


# std
import warnings
import threading
from inspect import signature

# third-party
from decorator import decorate

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #
MISSING = object()


class CacheRejectionWarning(Warning):
    pass


# ---------------------------------------------------------------------------- #
class Cache(LoggingMixin):
    """
    An unbounded, thread safe, insert-if-absent mapping.

    Lookups and insertions are guarded by a lock so a partially written entry
    is never visible. If two threads compute the same entry concurrently, the
    first value stored wins and both callers receive it.

    Parameters
    ----------
    name : str, optional
        Label used in representations and log messages.
    enabled : bool, optional
        When False, the owning decorator bypasses the cache entirely.
    """

    def __init__(self, name='', enabled=True):
        self.name = str(name)
        self.enabled = bool(enabled)
        self._data = {}
        self._lock = threading.Lock()

    def __repr__(self):
        state = '' if self.enabled else ', disabled'
        return f'{type(self).__name__}({self.name!r}, size={len(self)}{state})'

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        with self._lock:
            return iter(tuple(self._data))

    def __contains__(self, key):
        with self._lock:
            return key in self._data

    def __getitem__(self, key):
        with self._lock:
            return self._data[key]

    def get(self, key, default=None):
        with self._lock:
            return self._data.get(key, default)

    def items(self):
        with self._lock:
            return tuple(self._data.items())

    def setdefault(self, key, value):
        """
        Store `value` under `key` unless the key is already present. Return
        the value held by the cache after the call.
        """
        with self._lock:
            return self._data.setdefault(key, value)

    def clear(self):
        """Clear all items from the cache"""
        with self._lock:
            self._data.clear()


# ---------------------------------------------------------------------------- #
class Cached(LoggingMixin):
    """
    Decorator for memoization of pure functions.

    The cache key is the tuple of bound parameter values (defaults applied),
    so `snake('Foo')` and `snake('Foo', '_')` resolve to the same entry.
    Calls with unhashable parameter values are computed but not cached.

    Examples
    --------
    >>> @cached(name='double')
    ... def double(text):
    ...     return text * 2
    >>> double('ab')
    'abab'
    >>> double.__cache__
    Cache('double', size=1)
    """

    def __init__(self, name='', enabled=True, cache=None):
        self.cache = Cache(name, enabled) if cache is None else cache
        self.sig = None

    def __call__(self, func):
        """
        Decorate the function
        """
        if not callable(func):
            raise TypeError(f'Cannot memoize object of type '
                            f'{type(func).__name__!r}: not callable.')

        self.sig = signature(func)
        if not self.cache.name:
            self.cache.name = func.__qualname__

        decorated = decorate(func, self.__wrapper__)
        # make a reference to the cache on the decorated function for
        # convenience and for clearing / disabling in tests
        decorated.__cache__ = self.cache
        return decorated

    def get_key(self, *args, **kws):
        """
        Compute cache key from function parameter values
        """
        bound = self.sig.bind(*args, **kws)
        bound.apply_defaults()
        return tuple(bound.arguments.values())

    def __wrapper__(self, func, *args, **kws):
        """
        Caches the result of the function call
        """
        if not self.cache.enabled:
            return func(*args, **kws)

        key = self.get_key(*args, **kws)
        if not _hashable(key):
            warnings.warn(
                f'Function {func.__qualname__!r} received unhashable argument '
                f'in {key!r}. Return value for call will not be cached.',
                CacheRejectionWarning
            )
            return func(*args, **kws)

        answer = self.cache.get(key, MISSING)
        if answer is not MISSING:
            return answer

        # If we are here, it means there is no cache entry for this call
        # signature. Compute!
        answer = func(*args, **kws)
        self.logger.opt(lazy=True).debug(
            'Caching result of {}{}.', lambda: func.__qualname__, lambda: key
        )
        return self.cache.setdefault(key, answer)


def _hashable(key):
    try:
        hash(key)
    except TypeError:
        return False
    return True


# alias
cached = memoize = Cached
