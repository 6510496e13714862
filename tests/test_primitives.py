# third-party
import pytest

# local
from unistr.errors import InvalidArgument, InvalidLength
from unistr.testing import ECHO, Expected, Throws, mock
from unistr.primitives import (lcfirst, length, limit, lower, mask, pad_both,
                               pad_left, pad_right, random, repeat, substr,
                               title, ucfirst, upper, width, words)


# ---------------------------------------------------------------------------- #
test_length = Expected(length)({
    '':             0,
    'hello':        5,
    'Ünïcödé':      7,
    '日本語':        3,
    '🐍🐍':          2
})

test_substr = Expected(substr)({
    mock.substr('Ünïcödé', 2, 3):       'ïcö',
    mock.substr('Ünïcödé', -3):         'ödé',
    mock.substr('Ünïcödé', 0, -2):      'Ünïcö',
    mock.substr('Ünïcödé', -10, 2):     'Ün',
    mock.substr('abc', 10):             '',
    mock.substr('abc', 1, 0):           '',
    mock.substr('abc', 0):              'abc'
})

test_upper = Expected(upper)({
    'straße':       'STRASSE',
    'ünïcödé':      'ÜNÏCÖDÉ'
})

test_lower = Expected(lower)({
    'ÜNÏCÖDÉ':      'ünïcödé',
    'HeLLo':        'hello'
})

test_ucfirst = Expected(ucfirst)({
    'élan vital':   'Élan vital',
    'hELLO':        'HELLO',
    '':             ''
})

test_lcfirst = Expected(lcfirst)({
    'Élan Vital':   'élan Vital',
    'HELLO':        'hELLO',
    '':             ''
})

test_title = Expected(title)({
    'hello world':  'Hello World',
    'élan vital':   'Élan Vital'
})


# ---------------------------------------------------------------------------- #
test_width = Expected(width)({
    '':             0,
    'hello':        5,
    '日本':          4,
    'cafe\u0301':  4,
    'ｈｉ':          4
})

test_limit = Expected(limit)({
    mock.limit('The quick brown fox', 10):          'The quick...',
    mock.limit('The quick brown fox', 10, ' >'):    'The quick >',
    mock.limit('short', 10):                        'short',
    mock.limit('exactly 10', 10):                   'exactly 10',
    mock.limit('日本語のテキスト', 6):                 '日本語...',
    mock.limit('日本語のテキスト', 5):                 '日本...',
    mock.limit('', 0):                              ''
})

test_words = Expected(words)({
    mock.words('Perfectly balanced, as all things should be.', 3, ' >>>'):
        'Perfectly balanced, as >>>',
    mock.words('one two three', 3):                     'one two three',
    mock.words('one two three   ', 3):                  'one two three   ',
    mock.words('  one two three four', 2):              '  one two...',
    mock.words('one\ntwo\tthree', 1, '!'):              'one!',
    mock.words('', 3):                                  '',
    mock.words('one two', 0):                           Throws(InvalidArgument)
})


# ---------------------------------------------------------------------------- #
test_pad_left = Expected(pad_left)({
    mock.pad_left('Alien', 10):             '     Alien',
    mock.pad_left('Alien', 10, '-='):       '-=-=-Alien',
    mock.pad_left('Alien', 3):              'Alien',
    mock.pad_left('Ünï', 5, 'ö'):           'ööÜnï',
    mock.pad_left('Alien', 10, ''):         Throws(InvalidArgument)
})

test_pad_right = Expected(pad_right)({
    mock.pad_right('Alien', 10):            'Alien     ',
    mock.pad_right('Alien', 10, '-'):       'Alien-----',
    mock.pad_right('Alien', 10, '-='):      'Alien-=-=-',
    mock.pad_right('Alien', 5, '-'):        'Alien'
})

test_pad_both = Expected(pad_both)({
    mock.pad_both('James', 10, '_'):        '__James___',
    mock.pad_both('James', 10):             '  James   ',
    mock.pad_both('James', 11, '-='):       '-=-James-=-',
    mock.pad_both('James', 2):              'James'
})

test_repeat = Expected(repeat)({
    ('a', 3):       'aaa',
    ('ab', 0):      '',
    ('ö', 2):       'öö',
    ('a', -1):      Throws(InvalidArgument)
})


# ---------------------------------------------------------------------------- #
test_mask = Expected(mask)({
    mock.mask('1234567890', -4, 2):         '12345**890',
    mock.mask('1234567890', 3, 4):          '123****890',
    mock.mask('1234567890', 3):             '123*******',
    mock.mask('1234567890', -4):            '*******890',
    mock.mask('1234567890', -3, 100):       '********90',
    mock.mask('1234567890', 8, 10):         '12345678**',
    mock.mask('taylor@email.com', 3, 3):    'tay***@email.com',
    mock.mask('ünïcödé', 2, 3, '#'):        'ün###dé',
    mock.mask('secret', 0, 0, '-~'):        '------',
    mock.mask('secret', 6):                 ECHO,
    mock.mask('secret', -6):                ECHO,
    mock.mask('secret', -60, 2):            ECHO,
    mock.mask('', 0):                       '',
    mock.mask('secret', 0, -1):             Throws(InvalidLength),
    mock.mask('secret', 0, 0, ''):          Throws(InvalidArgument)
})


@pytest.mark.parametrize('value', ['', 'a', 'secret', 'ünïcödé', '日本語', '🐍'])
def test_mask_whole(value):
    assert mask(value) == '*' * len(value)


@pytest.mark.parametrize('value', ['', 'x', 'secret', 'ünïcödé'])
@pytest.mark.parametrize('offset', [-3, 0, 2])
def test_mask_negative_length(value, offset):
    with pytest.raises(InvalidArgument):
        mask(value, offset, -1, '*')


@pytest.mark.parametrize('offset, length', [(0, 0), (2, 3), (-2, 1), (-3, 0)])
def test_mask_preserves_length(offset, length):
    value = 'ünïcödé-text'
    assert len(mask(value, offset, length)) == len(value)


# ---------------------------------------------------------------------------- #
@pytest.mark.parametrize('size', [0, 1, 16, 40, 100])
def test_random(size):
    string = random(size)
    assert len(string) == size
    assert string.isascii()
    assert not string or string.isalnum()


def test_random_unique():
    assert random() != random()
    assert len(random()) == 16


def test_random_negative():
    with pytest.raises(InvalidArgument):
        random(-1)
