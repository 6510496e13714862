"""
Wildcard pattern matching and regular expression capture helpers.
"""

# std
import re
import functools as ftl

# third-party
import more_itertools as mit

# relative
from .errors import MalformedPattern


# ---------------------------------------------------------------------------- #
WILDCARD = '*'


# ---------------------------------------------------------------------------- #
# Translate to regex

@ftl.lru_cache()
def wildcard_to_regex(pattern):
    """
    Translate a wildcard pattern into a compiled regular expression that
    matches the entire string. `*` matches any run of codepoints, including
    none and including newlines. Every other character is literal.

    Examples
    --------
    >>> bool(wildcard_to_regex('library/*').match('library/foo'))
    True
    >>> bool(wildcard_to_regex('a.c').match('abc'))
    False
    """
    regex = '.*'.join(map(re.escape, pattern.split(WILDCARD)))
    return re.compile(f'(?s:{regex})\\Z')


def is_match(patterns, value):
    """
    Determine if `value` matches any of the given wildcard `patterns`.

    Parameters
    ----------
    patterns : str or iterable of str
        One or more patterns where `*` is the only special character.
    value : str
        String to test. The whole string has to match.

    Examples
    --------
    >>> is_match('library/*', 'library/foo/bar')
    True
    >>> is_match(['*.txt', '*.md'], 'README.rst')
    False
    >>> is_match([], 'anything')
    False

    Returns
    -------
    bool
    """
    for pattern in mit.always_iterable(patterns, base_type=str):
        # exact matches need no translation
        if pattern == value:
            return True

        if wildcard_to_regex(pattern).match(value):
            return True

    return False


# ---------------------------------------------------------------------------- #
# Regex capture helpers

def _compile(pattern):
    if isinstance(pattern, re.Pattern):
        return pattern

    try:
        return re.compile(pattern)
    except re.error as err:
        raise MalformedPattern(f'Invalid regular expression {pattern!r}: '
                               f'{err}.') from err


def _capture(match):
    # first capture group if the pattern defines one and it participated
    if match.re.groups and match.group(1) is not None:
        return match.group(1)
    return match.group(0)


def match(pattern, subject):
    """
    Get the string matching the given pattern.

    Parameters
    ----------
    pattern : str or re.Pattern
        Regular expression. If it has capture groups, the first one is
        returned.
    subject : str
        String to search.

    Examples
    --------
    >>> match(r'bar', 'foo bar')
    'bar'
    >>> match(r'foo (.*)', 'foo bar')
    'bar'
    >>> match(r'nope', 'foo bar')
    ''

    Returns
    -------
    str
        The first capture group, or the whole match. Empty if there is no
        match.

    Raises
    ------
    MalformedPattern
        If `pattern` is not a valid regular expression.
    """
    if found := _compile(pattern).search(subject):
        return _capture(found)
    return ''


def match_all(pattern, subject):
    """
    Get all the strings matching the given pattern, in order of occurrence.

    When the pattern defines a capture group, the first group of each match
    is collected, with an empty string where the group did not participate.

    Examples
    --------
    >>> match_all(r'\\d+', 'a1b22c333')
    ['1', '22', '333']
    >>> match_all(r'(\\w)=\\d', 'a=1 b=2')
    ['a', 'b']

    Returns
    -------
    list of str
    """
    regex = _compile(pattern)
    if regex.groups:
        return [found.group(1) or '' for found in regex.finditer(subject)]

    return [found.group(0) for found in regex.finditer(subject)]
