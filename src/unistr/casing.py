"""
Special casing for strings: StudlyCase, camelCase, snake_case and kebab-case.

The conversions are memoized per function. Each decorated function carries
its cache as the `__cache__` attribute, and all of them are collected in
`CACHES`, so tests can clear or bypass them. Caching never changes a result.
"""

# std
import contextlib as ctx

# third-party
import regex

# relative
from .config import CONFIG
from .caching import cached
from .primitives import lcfirst


# ---------------------------------------------------------------------------- #
# word boundaries as understood by PHP-style `ucwords`
REGEX_WORD_START = regex.compile(r'(^|[ \t\r\n\f\v])(\S)')
REGEX_SPACE = regex.compile(r'\s+')
# an uppercase letter preceded by anything that is not uppercase
REGEX_CAPS = regex.compile(r'(?<=\P{Lu})(?=\p{Lu})')
# nothing but lower case letters
REGEX_LOWER = regex.compile(r'\p{Ll}+')


# ---------------------------------------------------------------------------- #

def ucwords(value):
    """
    Upper case the first codepoint of each whitespace delimited word, leaving
    the remaining codepoints untouched.

    Examples
    --------
    >>> ucwords('hello woRLD')
    'Hello WoRLD'
    """
    return REGEX_WORD_START.sub(lambda m: m[1] + m[2].upper(), value)


@cached(name='studly', enabled=CONFIG.cache.enabled)
def studly(value, gap=''):
    """
    Convert a value to StudlyCase.

    Dashes and underscores are treated as word separators. The first letter
    of each word is upper cased, and the words are joined with `gap`.

    Examples
    --------
    >>> studly('hello_world-foo bar')
    'HelloWorldFooBar'
    >>> studly('hello_world', ' ')
    'Hello World'
    """
    value = ucwords(value.replace('-', ' ').replace('_', ' '))
    return value.replace(' ', gap)


@cached(name='camel', enabled=CONFIG.cache.enabled)
def camel(value):
    """
    Convert a value to camelCase.

    Examples
    --------
    >>> camel('foo_bar')
    'fooBar'
    """
    return lcfirst(studly(value))


@cached(name='snake', enabled=CONFIG.cache.enabled)
def snake(value, delimiter='_'):
    """
    Convert a string to snake_case.

    Strings made up of lower case letters only are returned as is. Otherwise
    the first letter of each word is upper cased, whitespace is removed and
    `delimiter` is inserted before every upper case letter that follows a
    character that is not upper case.

    Examples
    --------
    >>> snake('fooBar')
    'foo_bar'
    >>> snake('Foo Bar', '.')
    'foo.bar'
    >>> snake('my blog post')
    'my_blog_post'
    """
    if REGEX_LOWER.fullmatch(value):
        return value

    value = REGEX_SPACE.sub('', ucwords(value))
    return REGEX_CAPS.sub(lambda _: delimiter, value).lower()


def kebab(value):
    """
    Convert a string to kebab-case.

    Examples
    --------
    >>> kebab('fooBar')
    'foo-bar'
    """
    return snake(value, '-')


# ---------------------------------------------------------------------------- #
# Cache control

CACHES = {func.__name__: func.__cache__ for func in (studly, camel, snake)}


def clear_caches():
    """Clear all case conversion caches."""
    for cache in CACHES.values():
        cache.clear()


@ctx.contextmanager
def uncached():
    """
    Temporarily bypass all case conversion caches.

    >>> with uncached():
    ...     snake('FooBar')
    'foo_bar'
    """
    states = {name: cache.enabled for name, cache in CACHES.items()}
    for cache in CACHES.values():
        cache.enabled = False

    try:
        yield

    finally:
        for name, cache in CACHES.items():
            cache.enabled = states[name]


# ---------------------------------------------------------------------------- #
# aliases
pascal_case = studly_case = studly
camel_case = camel
snake_case = snake
kebab_case = kebab
