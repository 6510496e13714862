# Flexibly parametrize functional tests

"""
Tools to help building parametrized unit tests.

Examples
--------
To generate a bunch of tests with various call signatures of the function
`pad_left`, use
>>> from unistr.testing import Expected, mock
>>> test_pad_left = Expected(pad_left)(
...     {mock.pad_left('Alien', 10):          '     Alien',
...      mock.pad_left('Alien', 10, '-='):    '-=-=-Alien',
...      mock.pad_left('Alien', 3):           'Alien'}
... )

This will generate the same tests as the following code block, but is arguably
much neater
>>> @pytest.mark.parametrize(
...     'args, kws, expected',
...     [(('Alien', 10), {}, '     Alien'),
...      (('Alien', 10, '-='), {}, '-=-=-Alien'),
...      (('Alien', 3), {}, 'Alien')]
... )
... def test_pad_left(args, kws, expected):
...     assert pad_left(*args, **kws) == expected
"""

# std
import difflib
from collections import abc
from contextlib import nullcontext

# third-party
import pytest

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #

def echo(obj):
    return obj


def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """

    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


# ---------------------------------------------------------------------------- #

class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = args, tuple(kws.items())

    def __iter__(self):
        return iter((self.args, dict(self.kws)))

    def __str__(self):
        params = (*map(repr, self.args), *(f'{k}={v!r}' for k, v in self.kws))
        return f'({", ".join(params)})'

    __repr__ = __str__


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error

    def __repr__(self):
        return f'Throws({self.error.__name__})'


class ECHO:
    """Echo sentinal: the expected result is the first argument itself."""


# ---------------------------------------------------------------------------- #

class Expected(LoggingMixin):
    """
    Testing helper for checking expected return values for functions.

    For example, to test that the function `snake` returns the expected
    values, do the following:
    >>> from unistr.testing import Expected, mock
    >>> test_snake = Expected(snake)(
    ...     {'fooBar':                    'foo_bar',
    ...      mock.snake('Foo Bar', '-'):  'foo-bar',
    ...      mock.snake(None):            Throws(AttributeError)}
    ... )

    Plain (non-tuple) keys are passed as the single positional argument, tuples
    are unpacked as positional arguments, and `mock` calls carry both
    positional and keyword arguments. Assigning the output to a variable name
    starting with 'test_' is important for pytest test discovery to work
    correctly.
    """

    def __init__(self, func, transform=echo):
        self.func = func
        self.transform = transform

    def __call__(self, cases, *args, transform=None, **kws):
        """
        Create the test function and parametrize it.

        Parameters
        ----------
        cases : dict or iterable of 2-tuples
            Mapping of call specification to expected result.
        transform : callable, optional
            Applied to the function's return value before comparison.

        Returns
        -------
        function
            Parametrized pytest test function.
        """
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        specs, results = [], []
        for spec, expected in cases:
            if not isinstance(spec, WrapArgs):
                spec = WrapArgs(*to_tuple(spec))
            specs.append(spec)
            results.append(expected)

        test = self.make_test(transform or self.transform)
        ids = [f'{self.func.__name__}{spec!s}' for spec in specs]
        return pytest.mark.parametrize(('spec', 'expected'),
                                       list(zip(specs, results)),
                                       *args, ids=ids, **kws)(test)

    def make_test(self, transform):
        # -------------------------------------------------------------------- #
        def test(spec, expected):
            args, kws = spec
            self.logger.debug('passing to {:s}: {!s}; {!s}',
                              self.func.__name__, args, kws)

            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)

            with ctx:
                answer = transform(self.func(*args, **kws))

            if not isinstance(ctx, nullcontext):
                return

            if expected is ECHO:
                expected = args[0]

            if answer == expected:
                return

            message = (f'Result from function {self.func.__name__!r} is not '
                       f'equal to expected answer!'
                       f'\nRESULT:  \n{answer!r}'
                       f'\nEXPECTED:\n{expected!r}')
            if isinstance(answer, str) and isinstance(expected, str):
                message += f'\nDIFF\n{show_diff(repr(answer), repr(expected))}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        return test

