"""
Layered configuration: package defaults, optionally overridden by a user file.
"""

# std
from pathlib import Path
from collections import abc

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
CACHE = {}
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME


# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r', encoding='utf-8') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
}


def load(filename):
    """
    Load (and cache) the content of a config file.

    Parameters
    ----------
    filename : str or Path
        File to read. The format is chosen by file extension.

    Returns
    -------
    dict

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file extension is not a known config format.
    """
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(path):
    if not path.exists():
        raise FileNotFoundError(f"Non-existent file: '{path!s}'")

    fmt = path.suffix.lstrip('.')
    if fmt not in CONFIG_PARSERS:
        raise ValueError(f'Unknown config format {fmt!r} for {path!s}. '
                         f'Supported: {tuple(CONFIG_PARSERS)}.')

    logger.debug('Loading config: {}', path)
    return CONFIG_PARSERS[fmt](path)


def user_config_file(pkg='unistr'):
    return user_config_path(pkg) / FILENAME


def merge(defaults, overrides):
    """Recursively update nested mapping `defaults` with `overrides`."""
    merged = dict(defaults)
    for key, val in overrides.items():
        if isinstance(val, abc.Mapping) and isinstance(merged.get(key), abc.Mapping):
            val = merge(merged[key], val)
        merged[key] = val
    return merged


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Dictionary with item read access through attribute lookup. Nested
    mappings are converted to `ConfigNode` on construction.

    >>> node = ConfigNode({'slug': {'separator': '-'}})
    >>> node.slug.separator
    '-'
    """

    @classmethod
    def load(cls, filename=None, defaults=SOURCE):
        """
        Load the `defaults` file and update it with `filename` if that file
        exists.
        """
        assert filename or defaults
        config = load(defaults) if defaults else {}
        if filename and Path(filename).exists():
            logger.info('Using user config: {!s}.', filename)
            config = merge(config, load(filename))
        return cls(config)

    def __init__(self, *args, **kws):
        super().__init__()
        for key, val in dict(*args, **kws).items():
            if isinstance(val, abc.Mapping):
                val = type(self)(val)
            self[key] = val

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #

def get_config():
    return ConfigNode.load(user_config_file())


# package defaults merged with the user file (if any)
CONFIG = get_config()
