"""
Unicode aware string helpers: case conversion, segment extraction, wildcard
matching, padding, masking, transliteration and slugs.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('unistr')

# relative
from .config import CONFIG
from .errors import InvalidArgument, InvalidLength, MalformedPattern
from .patterns import is_match, match, match_all, wildcard_to_regex
from .transliterate import ascii, languages, slug
from .casing import (camel, camel_case, clear_caches, kebab, kebab_case,
                     pascal_case, snake, snake_case, studly, studly_case,
                     uncached)
from .primitives import (lcfirst, length, limit, lower, mask, pad_both,
                         pad_left, pad_right, random, repeat, substr, title,
                         ucfirst, upper, width, words)
from .segments import (after, after_last, before, before_last, between,
                       between_last, contains, contains_all, ends_with, finish,
                       remove, replace, replace_array, replace_first,
                       replace_last, start, starts_with, strip_tags,
                       substr_count)


# ---------------------------------------------------------------------------- #

# version
__version__ = version('unistr')
