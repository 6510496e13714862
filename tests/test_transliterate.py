# third-party
import pytest

# local
from unistr.testing import ECHO, Expected, mock
from unistr.transliterate import (Transliterator, ascii, get_tables,
                                  languages, slug)


# ---------------------------------------------------------------------------- #
test_ascii = Expected(ascii)({
    'café':                         'cafe',
    'Ünïcödé':                      'Unicode',
    'Привет':                       'Privet',
    'Жук':                          'Zhuk',
    'Straße':                       'Strasse',
    'Grüße':                        'Grusse',
    'I ♥ 🐍':                        'I  ',
    'non\u00a0breaking':          'non breaking',
    'plain ascii text':             ECHO,
    '':                             '',
    mock.ascii('Grüße', 'de'):      'Gruesse',
    mock.ascii('Ärger', 'de'):      'AErger',
    mock.ascii('щ'):                'shch',
    mock.ascii('щ', 'bg'):          'sht',
    mock.ascii('Æble', 'da'):       'Aeble',
    mock.ascii('Æble'):             'AEble',
    mock.ascii('café', 'xx'):       'cafe'
})


@pytest.mark.parametrize('value', ['I ♥ 🐍', '日本語 text', 'ünïcödé ✓', 'tab\there'])
def test_ascii_printable(value):
    assert all(' ' <= char <= '~' for char in ascii(value))


# ---------------------------------------------------------------------------- #
test_slug = Expected(slug)({
    'Laravel 10 Framework!':                'laravel-10-framework',
    'Hello World':                          'hello-world',
    '  spaced   out  ':                     'spaced-out',
    'snake_case_title':                     'snake-case-title',
    'hello@world':                          'hello-at-world',
    'Ünïcödé Ärger':                        'unicode-arger',
    '--already--a-slug--':                  'already-a-slug',
    '':                                     '',
    mock.slug('hello@world', '_'):          'hello_at_world',
    mock.slug('Hello-World Again', '_'):    'hello_world_again',
    mock.slug('Hello World', '.'):          'hello.world',
    mock.slug('a b', '\\'):                  'a\\b',
    mock.slug('Hello World', '\\1'):        'hello\\1world',
    mock.slug('Grüße aus Köln', language='de'):
        'gruesse-aus-koeln',
    mock.slug('Ünïcödé Text', language=''):
        'ünïcödé-text',
    mock.slug('Привет мир', language=None):
        'привет-мир'
})


@pytest.mark.parametrize('title', ['Laravel 10 Framework!', 'hello@world',
                                   'Ünïcödé Ärger', 'already-a-slug',
                                   '  spaced   out  '])
def test_slug_idempotent(title):
    once = slug(title)
    assert slug(once) == once


# ---------------------------------------------------------------------------- #
def test_languages():
    assert languages() == ('bg', 'da', 'de', 'ro')


def test_tables_loaded_once():
    assert get_tables() is get_tables()


def test_longest_source_first():
    translit = Transliterator({'a': '1', 'ab': '2', 'b': '3'})
    assert translit('abba') == '231'


def test_replacements_not_rescanned():
    translit = Transliterator({'a': 'b', 'b': 'c'})
    assert translit('ab') == 'bc'


def test_first_target_wins():
    translit = Transliterator.from_targets({'x': ['ö'], 'oe': ['ö']})
    assert translit('ö') == 'x'


def test_empty_table():
    assert Transliterator({})('anything') == 'anything'
