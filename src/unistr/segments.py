"""
Extracting, testing and replacing segments of strings.

Absent delimiters are not errors: the extraction functions return the input
unchanged when the delimiter is empty or cannot be found.
"""

# std
import re

# third-party
import more_itertools as mit

# relative
from .errors import InvalidArgument
from .primitives import substr


# ---------------------------------------------------------------------------- #
# markup removed by `strip_tags`
REGEX_MARKUP = re.compile(r'<!--.*?(?:-->|\Z)|<\?.*?(?:\?>|\Z)|<![^>]*>',
                          re.DOTALL)
REGEX_TAG = re.compile(r'</?([a-zA-Z][\w:-]*)[^>]*>')
REGEX_TAG_NAME = re.compile(r'[a-zA-Z][\w:-]*')


def _needles(needles):
    # a single string or any iterable of strings
    return mit.always_iterable(needles, base_type=str)


# ---------------------------------------------------------------------------- #
# Extraction

def before(value, search):
    """
    Get the portion of a string before the first occurrence of `search`.

    Examples
    --------
    >>> before('user@example.com', '@')
    'user'
    >>> before('no marker here', '#')
    'no marker here'
    """
    return value.partition(search)[0] if search else value


def before_last(value, search):
    """
    Get the portion of a string before the last occurrence of `search`.

    Examples
    --------
    >>> before_last('path/to/file.txt', '/')
    'path/to'
    """
    if not search or search not in value:
        return value

    return value.rpartition(search)[0]


def after(value, search):
    """
    Get the remainder of a string after the first occurrence of `search`.

    Examples
    --------
    >>> after('user@example.com', '@')
    'example.com'
    """
    if not search or search not in value:
        return value

    return value.partition(search)[2]


def after_last(value, search):
    """
    Get the remainder of a string after the last occurrence of `search`.

    Examples
    --------
    >>> after_last('path/to/file.txt', '/')
    'file.txt'
    """
    if not search or search not in value:
        return value

    return value.rpartition(search)[2]


def between(value, start, end):
    """
    Get the portion of a string between the first occurrence of `start` and
    the first occurrence of `end` that follows it.

    Parameters
    ----------
    value : str
        Source string.
    start, end : str
        Delimiters. If either is empty, `value` is returned unchanged.

    Examples
    --------
    >>> between('hello [world] foo [bar]', '[', ']')
    'world'

    Returns
    -------
    str
    """
    if not (start and end):
        return value

    return before(after(value, start), end)


def between_last(value, start, end):
    """
    Get the portion of a string between the first occurrence of `start` and
    the last occurrence of `end` in the remainder.

    If `end` does not follow `start`, the remainder is cut at the last `end`
    anywhere in it, or returned whole if there is none.

    Examples
    --------
    >>> between_last('hello [world] foo [bar]', '[', ']')
    'world] foo [bar'
    """
    if not (start and end):
        return value

    return before_last(after(value, start), end)


# ---------------------------------------------------------------------------- #
# Tests

def starts_with(value, needles):
    """
    Determine if `value` starts with any of the given `needles`. Empty
    needles never match.
    """
    return any(needle and value.startswith(needle)
               for needle in _needles(needles))


def ends_with(value, needles):
    """
    Determine if `value` ends with any of the given `needles`. Empty needles
    never match.
    """
    return any(needle and value.endswith(needle)
               for needle in _needles(needles))


def contains(value, needles, ignore_case=False):
    """
    Determine if `value` contains any of the given `needles`.

    Examples
    --------
    >>> contains('This is my name', ['my', 'foo'])
    True
    >>> contains('This is my name', '')
    False
    """
    if ignore_case:
        value = value.casefold()

    for needle in _needles(needles):
        if ignore_case:
            needle = needle.casefold()

        if needle and needle in value:
            return True

    return False


def contains_all(value, needles, ignore_case=False):
    """
    Determine if `value` contains every one of the given `needles`.

    Examples
    --------
    >>> contains_all('This is my name', ['my', 'name'])
    True
    """
    return all(contains(value, needle, ignore_case)
               for needle in _needles(needles))


# ---------------------------------------------------------------------------- #
# Affixes

def start(value, prefix):
    """
    Begin a string with a single instance of `prefix`.

    Examples
    --------
    >>> start('///test/string', '/')
    '/test/string'
    """
    if not prefix:
        return value

    return prefix + re.sub(f'^(?:{re.escape(prefix)})+', '', value)


def finish(value, cap):
    """
    Cap a string with a single instance of `cap`.

    Examples
    --------
    >>> finish('this/string///', '/')
    'this/string/'
    """
    if not cap:
        return value

    return re.sub(f'(?:{re.escape(cap)})+$', '', value) + cap


# ---------------------------------------------------------------------------- #
# Replacement

def replace(search, replacement, value):
    """
    Replace every occurrence of each `search` needle.

    Parameters
    ----------
    search : str or iterable of str
        Needles to replace, processed in order. Empty needles are skipped.
    replacement : str or iterable of str
        A single replacement for all needles, or one replacement per needle.
        Missing replacements default to the empty string.
    value : str
        Subject string.

    Examples
    --------
    >>> replace(['a', 'b'], ['b', 'c'], 'ab')
    'cc'
    """
    searches = list(_needles(search))
    if isinstance(replacement, str):
        replacements = [replacement] * len(searches)
    else:
        replacements = list(mit.padded(replacement, '', len(searches)))

    for old, new in zip(searches, replacements):
        if old:
            value = value.replace(old, new)

    return value


def replace_first(search, replacement, value):
    """
    Replace the first occurrence of `search` in `value`.

    Examples
    --------
    >>> replace_first('the', 'a', 'the quick brown fox jumps over the lazy dog')
    'a quick brown fox jumps over the lazy dog'
    """
    return value.replace(search, replacement, 1) if search else value


def replace_last(search, replacement, value):
    """
    Replace the last occurrence of `search` in `value`.

    Examples
    --------
    >>> replace_last('the', 'a', 'the quick brown fox jumps over the lazy dog')
    'the quick brown fox jumps over a lazy dog'
    """
    if not search or search not in value:
        return value

    head, _, tail = value.rpartition(search)
    return head + replacement + tail


def replace_array(search, replacements, value):
    """
    Replace successive occurrences of `search` with successive
    `replacements`.

    Examples
    --------
    >>> replace_array('?', ['8:30', '9:00'], 'The event runs from ? to ?')
    'The event runs from 8:30 to 9:00'
    """
    for new in replacements:
        value = replace_first(search, str(new), value)

    return value


def remove(search, value, case_sensitive=True):
    """
    Remove every occurrence of each `search` needle from `value`.

    Examples
    --------
    >>> remove('E', 'Peter Piper', case_sensitive=False)
    'Ptr Pipr'
    """
    for needle in _needles(search):
        if not needle:
            continue

        if case_sensitive:
            value = value.replace(needle, '')
        else:
            value = re.sub(re.escape(needle), '', value, flags=re.IGNORECASE)

    return value


def substr_count(value, needle, offset=0, length=None):
    """
    Count the non-overlapping occurrences of `needle` in the window of `value`
    starting at `offset` and spanning `length` codepoints.

    Raises
    ------
    InvalidArgument
        If `needle` is empty.
    """
    if not needle:
        raise InvalidArgument('Cannot count occurrences of an empty string.')

    return substr(value, offset, length).count(needle)


# ---------------------------------------------------------------------------- #
# Markup

def strip_tags(value, allowed=None):
    """
    Strip HTML tags, comments and processing instructions from a string.

    Parameters
    ----------
    value : str
        Text containing markup.
    allowed : str or iterable of str, optional
        Tags to keep, either as a string like '<a><b>' or as a collection of
        tag names. Matching is case insensitive.

    Examples
    --------
    >>> strip_tags('<p>Hello <b>World</b></p>')
    'Hello World'
    >>> strip_tags('<p>Hello <b>World</b></p>', '<b>')
    'Hello <b>World</b>'

    Returns
    -------
    str
    """
    if isinstance(allowed, str):
        allowed = REGEX_TAG_NAME.findall(allowed)

    keep = {name.strip('<>').lower() for name in (allowed or ())}
    value = REGEX_MARKUP.sub('', value)
    return REGEX_TAG.sub(
        lambda match: match[0] if match[1].lower() in keep else '', value
    )
