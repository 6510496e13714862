"""
Transliteration of Unicode text to ASCII, and URL slugs.

The replacement tables are a static data asset (`data/ascii.yaml`), read and
compiled once on first use. Transliteration is a best effort, table driven
mapping: codepoints that are not in the tables are deleted.
"""

# std
import re
import functools as ftl
from pathlib import Path

# third-party
import regex

# relative
from .config import CONFIG, load_yaml
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #
TABLES = Path(__file__).parent / 'data' / 'ascii.yaml'

REGEX_NON_PRINTABLE = re.compile(r'[^\x20-\x7E]')
OPPOSITE_SEPARATOR = {'-': '_'}


# ---------------------------------------------------------------------------- #
class Transliterator(LoggingMixin):
    """
    Single pass replacement of source sequences with target strings.

    At each position the longest matching source sequence is replaced.
    Replacements never overlap and are not re-scanned.

    Parameters
    ----------
    lookup : dict
        Mapping of source sequence to its replacement.
    """

    @classmethod
    def from_targets(cls, table):
        """
        Construct from a mapping of target to a list of source sequences.
        Sources that appear under more than one target keep the first target.
        """
        lookup = {}
        for target, sources in table.items():
            for source in sources:
                lookup.setdefault(source, str(target))
        return cls(lookup)

    @classmethod
    def from_pairs(cls, pairs):
        """Construct from a sequence of (source, target) pairs."""
        lookup = {}
        for source, target in pairs:
            lookup.setdefault(source, str(target))
        return cls(lookup)

    def __init__(self, lookup):
        self.lookup = {source: target for source, target in lookup.items()
                       if source}
        # longest first, so multi-codepoint sequences take precedence
        sources = sorted(self.lookup, key=len, reverse=True)
        self.regex = re.compile('|'.join(map(re.escape, sources)))
        self.logger.debug('Compiled {} replacement sequences.', len(sources))

    def __repr__(self):
        return f'{type(self).__name__}(size={len(self.lookup)})'

    def __call__(self, value):
        if not self.lookup:
            return value

        return self.regex.sub(self._replace, value)

    def _replace(self, match):
        return self.lookup[match[0]]


class Tables:
    """The default table and the language specific override tables."""

    def __init__(self, default, languages):
        self.default = default
        self.languages = languages

    @classmethod
    def load(cls, filename=TABLES):
        data = load_yaml(filename)
        return cls(
            Transliterator.from_targets(data['default']),
            {lang: Transliterator.from_pairs(pairs)
             for lang, pairs in data.get('languages', {}).items()}
        )


@ftl.lru_cache()
def get_tables(filename=TABLES):
    return Tables.load(filename)


def languages():
    """Language codes that have specific transliteration rules."""
    return tuple(sorted(get_tables().languages))


# ---------------------------------------------------------------------------- #

def ascii(value, language=CONFIG.ascii.language):  # pylint: disable=redefined-builtin
    """
    Transliterate a Unicode string to ASCII.

    Language specific replacements (if any exist for `language`) are applied
    first, followed by the default table. Anything that remains outside the
    printable ASCII range is removed.

    Parameters
    ----------
    value : str
        Text to transliterate.
    language : str, optional
        Language code selecting additional replacement rules, eg. 'de' maps
        'ä' to 'ae' instead of 'a'.

    Examples
    --------
    >>> ascii('café')
    'cafe'
    >>> ascii('Straße', 'de')
    'Strasse'
    >>> ascii('Grüße', 'de')
    'Gruesse'
    >>> ascii('I ♥ 🐍')
    'I  '

    Returns
    -------
    str
    """
    tables = get_tables()
    if override := tables.languages.get(language):
        value = override(value)

    return REGEX_NON_PRINTABLE.sub('', tables.default(value))


def slug(title, separator=CONFIG.slug.separator, language=CONFIG.slug.language):
    """
    Generate a URL friendly "slug" from a given string.

    Parameters
    ----------
    title : str
        Text to convert.
    separator : str, optional
        Word separator, by default '-'.
    language : str, optional
        Transliteration language. If empty (or None), the text is not
        transliterated and non-ASCII letters are kept.

    Examples
    --------
    >>> slug('Laravel 10 Framework!')
    'laravel-10-framework'
    >>> slug('hello@world', '_')
    'hello_at_world'

    Returns
    -------
    str
    """
    if language:
        title = ascii(title, language)

    sep = regex.escape(separator)

    # Convert all dashes / underscores into separator
    flip = OPPOSITE_SEPARATOR.get(separator, '-')
    title = regex.sub(f'[{regex.escape(flip)}]+', lambda _: separator, title)

    # Replace @ with the word 'at'
    title = title.replace('@', f'{separator}at{separator}')

    # Remove all characters that are not the separator, letters, numbers, or
    # whitespace
    title = regex.sub(rf'[^{sep}\p{{L}}\p{{N}}\s]+', '', title.lower())

    # Replace all separator characters and whitespace by a single separator
    title = regex.sub(rf'[{sep}\s]+', lambda _: separator, title)

    return title.strip(separator)
