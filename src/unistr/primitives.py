"""
Codepoint aware string primitives: length, substrings, case, display width,
truncation, padding, masking and random strings.

All lengths and offsets count Unicode codepoints, never bytes.
"""


# std
import base64
import secrets
import unicodedata

# third-party
import regex
from loguru import logger

# relative
from .config import CONFIG
from .errors import InvalidArgument, InvalidLength


# ---------------------------------------------------------------------------- #
# East Asian width classes that occupy two terminal columns
WIDE = {'W', 'F'}

# base64 characters that are not alphanumeric
NON_ALNUM = str.maketrans('', '', '/+=')

# `words` counts runs of non-whitespace (with their trailing whitespace)
REGEX_WORDS = {}


# ---------------------------------------------------------------------------- #
# Length / slicing

def length(value):
    """Number of codepoints in `value`."""
    return len(value)


def substr(value, start, length=None):
    """
    Portion of `value` specified by `start` and `length` (in codepoints).

    Parameters
    ----------
    value : str
        Source string.
    start : int
        Start index. Negative values count from the end of the string.
    length : int, optional
        Number of codepoints to return. None, the default, returns everything
        up to the end of the string. A negative `length` drops that many
        codepoints from the end.

    Examples
    --------
    >>> substr('Ünïcödé', 2, 3)
    'ïcö'
    >>> substr('Ünïcödé', -3)
    'ödé'
    >>> substr('abc', 10)
    ''

    Returns
    -------
    str
    """
    if start < 0:
        start = max(len(value) + start, 0)

    if length is None:
        return value[start:]

    if length < 0:
        return value[start:length]

    return value[start:start + length]


# ---------------------------------------------------------------------------- #
# Casing

def upper(value):
    return value.upper()


def lower(value):
    return value.lower()


def ucfirst(value):
    """Upper case the first codepoint of `value`, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def lcfirst(value):
    """Lower case the first codepoint of `value`, leaving the rest untouched."""
    return value[:1].lower() + value[1:]


def title(value):
    return value.title()


# ---------------------------------------------------------------------------- #
# Display width / truncation

def char_width(char):
    if unicodedata.combining(char):
        return 0

    return 1 + (unicodedata.east_asian_width(char) in WIDE)


def width(value):
    """
    Display width of `value`: wide and fullwidth East Asian characters count
    as 2 columns, combining marks as 0 and everything else as 1.

    Examples
    --------
    >>> width('hello')
    5
    >>> width('日本')
    4
    """
    return sum(map(char_width, value))


def _trim_width(value, size):
    # longest prefix of `value` that fits in `size` columns
    total = 0
    for i, char in enumerate(value):
        total += char_width(char)
        if total > size:
            return value[:i]
    return value


def limit(value, limit=CONFIG.limit.width, end=CONFIG.limit.end):
    """
    Limit the display width of a string.

    Parameters
    ----------
    value : str
        String to truncate.
    limit : int
        Maximal display width (columns) of the retained text.
    end : str
        Marker appended when the string was truncated.

    Examples
    --------
    >>> limit('The quick brown fox', 10)
    'The quick...'
    >>> limit('short', 10)
    'short'

    Returns
    -------
    str
        `value` itself if it fits in `limit` columns, otherwise the truncated
        text, stripped of trailing whitespace, followed by `end`.
    """
    if width(value) <= limit:
        return value

    return _trim_width(value, limit).rstrip() + end


def words(value, words=CONFIG.words.count, end=CONFIG.words.end):
    """
    Limit the number of words in a string.

    Examples
    --------
    >>> words('Perfectly balanced, as all things should be.', 3, ' >>>')
    'Perfectly balanced, as >>>'
    """
    if words < 1:
        raise InvalidArgument(f'Number of words should be positive, not {words}.')

    if words not in REGEX_WORDS:
        REGEX_WORDS[words] = regex.compile(rf'^\s*+(?:\S++\s*+){{1,{words}}}')

    match = REGEX_WORDS[words].match(value)
    if not match or len(match[0]) == len(value):
        return value

    return match[0].rstrip() + end


# ---------------------------------------------------------------------------- #
# Padding

def _pad(value, size, fill):
    # repeat `fill` and truncate to exactly `size` codepoints
    if size <= 0:
        return ''

    if not fill:
        raise InvalidArgument('Padding string must not be empty.')

    quotient, remainder = divmod(size, len(fill))
    return fill * quotient + fill[:remainder]


def pad_left(value, length, pad=CONFIG.pad.fill):
    """
    Pad the left side of `value` with `pad` up to a total of `length`
    codepoints. Multi-character `pad` strings are repeated and truncated as
    needed.

    Examples
    --------
    >>> pad_left('Alien', 10, '-=')
    '-=-=-Alien'
    """
    return _pad(value, length - len(value), pad) + value


def pad_right(value, length, pad=CONFIG.pad.fill):
    """
    Pad the right side of `value` with `pad` up to a total of `length`
    codepoints.

    Examples
    --------
    >>> pad_right('Alien', 10, '-')
    'Alien-----'
    """
    return value + _pad(value, length - len(value), pad)


def pad_both(value, length, pad=CONFIG.pad.fill):
    """
    Pad both sides of `value`. When the padding can not be split evenly, the
    right side receives the extra codepoint.

    Examples
    --------
    >>> pad_both('James', 10, '_')
    '__James___'
    """
    total = length - len(value)
    left = total // 2
    return _pad(value, left, pad) + value + _pad(value, total - left, pad)


def repeat(value, times):
    if times < 0:
        raise InvalidArgument(f'Cannot repeat a string {times} times.')
    return value * times


# ---------------------------------------------------------------------------- #
# Masking

def mask(value, offset=0, length=0, replacement=CONFIG.mask.replacement):
    """
    Mask a portion of a string with a repeated character.

    Parameters
    ----------
    value : str
        String to mask.
    offset : int
        Index of the first masked codepoint. A negative offset counts from the
        end of the string and marks the *last* masked codepoint instead.
    length : int
        Number of codepoints to mask. Zero, the default, masks everything from
        `offset` to the end (or, for negative `offset`, everything from the
        start of the string up to and including the codepoint at `offset`).
    replacement : str
        Masking character. Only the first codepoint is used.

    Examples
    --------
    >>> mask('1234567890', 3, 4)
    '123****890'
    >>> mask('1234567890', -4, 2)
    '12345**890'
    >>> mask('secret')
    '******'

    Returns
    -------
    str
        String of the same length as `value`. Unchanged if `abs(offset)` is
        not inside the string.

    Raises
    ------
    InvalidLength
        If `length` is negative.
    """
    if length < 0:
        raise InvalidLength(f'The length must be equal or greater than zero, '
                            f'received {length}.')

    if not replacement:
        raise InvalidArgument('Mask replacement must not be empty.')

    size = len(value)
    if abs(offset) >= size:
        return value

    if offset >= 0:
        start = offset
        stop = min(offset + length, size) if length else size
    else:
        # the codepoint at `offset` is the last one masked
        stop = size + offset + 1
        start = max(stop - length, 0) if length else 0

    return value[:start] + replacement[0] * (stop - start) + value[stop:]


# ---------------------------------------------------------------------------- #
# Random

def random(length=CONFIG.random.length):
    """
    Generate a random alphanumeric string from a cryptographically secure
    source.

    Examples
    --------
    >>> len(random(40))
    40

    Raises
    ------
    InvalidArgument
        If `length` is negative.
    """
    if length < 0:
        raise InvalidArgument(f'Cannot generate a string of length {length}.')

    string = ''
    while (size := length - len(string)) > 0:
        chunk = base64.b64encode(secrets.token_bytes(size)).decode()
        string += chunk.translate(NON_ALNUM)[:size]

    logger.opt(lazy=True).debug('Generated random string of length {}.',
                                lambda: len(string))
    return string
