# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import re

from .errors import ConfigError, InputTypeError, InputAttributeError
from . import transforms

# Any file with an extension, top level only.
DEFAULT_PATTERN = '*.*'

class GlobFilter:
    """Scan the source directory with this pattern instead of the default."""
    def __init__(self, pattern):
        self.pattern = pattern

    @property
    def scan_pattern(self):
        return self.pattern

    def accepts(self, filename):
        return True

    def __repr__(self):
        return 'GlobFilter({0!r})'.format(self.pattern)

class RegexFilter:
    """Scan with the default pattern, keep names the expression matches."""
    def __init__(self, regex):
        self.regex = regex

    @property
    def scan_pattern(self):
        return DEFAULT_PATTERN

    def accepts(self, filename):
        return self.regex.search(filename) is not None

    def __repr__(self):
        return 'RegexFilter({0!r})'.format(self.regex.pattern)

def make_filter(obj):
    """Turn a configured filter into a GlobFilter, a RegexFilter or None.

    Strings are glob patterns, compiled expressions are regexes. From JSON a
    regex is spelled {"regex": "..."} and a glob may also be {"glob": "..."}.
    """
    if obj is None or obj == '':
        return None
    if isinstance(obj, (GlobFilter, RegexFilter)):
        return obj
    if isinstance(obj, str):
        return GlobFilter(obj)
    if isinstance(obj, re.Pattern):
        return RegexFilter(obj)
    if isinstance(obj, dict) and len(obj) == 1:
        if isinstance(obj.get('glob'), str):
            return GlobFilter(obj['glob'])
        if isinstance(obj.get('regex'), str):
            try:
                return RegexFilter(re.compile(obj['regex']))
            except re.error as e:
                raise ConfigError("Invalid filter regex '{0}': {1}"
                                  .format(obj['regex'], e), obj) from e
    raise ConfigError("Invalid filter provided: {0!r}".format(obj), obj)

class AssetRule:
    """One copy/transform job.

    source is a file or directory that must exist, to is the destination
    directory (falls back to the build's output directory when None). name
    replaces the output file name, filter only applies to directory
    sources, minify runs before transform.
    """
    __slots__ = ('source', 'to', 'name', 'filter', 'transform', 'minify')

    def __init__(self, source, to=None, name=None, filter=None,
                 transform=None, minify=False):
        if transform is not None and not callable(transform):
            raise InputTypeError(transform, 'callable')
        values = {'source': source, 'to': to, 'name': name or None,
                  'filter': make_filter(filter), 'transform': transform,
                  'minify': bool(minify)}
        for attr, value in values.items():
            object.__setattr__(self, attr, value)

    def __setattr__(self, attr, value):
        raise AttributeError("AssetRule is read-only")

    def __repr__(self):
        return 'AssetRule(source={0!r}, to={1!r}, name={2!r})'.format(
            self.source, self.to, self.name)

    @classmethod
    def from_dict(cls, obj):
        """Build a rule from one entry of the "assets" list in assets.json."""
        if not isinstance(obj, dict):
            raise InputTypeError(obj, dict)
        source = obj.get('from')
        if source is None:
            raise InputAttributeError(obj, 'from')
        if not isinstance(source, str):
            raise InputTypeError(source, str)

        transform = obj.get('transform')
        if transform is not None:
            transform = transforms.from_config(transform)

        return cls(source, to=obj.get('to'), name=obj.get('name'),
                   filter=obj.get('filter'), transform=transform,
                   minify=obj.get('minify', False))

def rules_from_config(assets):
    """Validate every entry, prefixing errors with the entry's index."""
    if not isinstance(assets, list):
        raise InputTypeError(assets, list)
    rules = []
    for i in range(len(assets)):
        try:
            rules.append(AssetRule.from_dict(assets[i]))
        except ConfigError as e:
            # Rethrow with a modified message.
            e.args = ('assets[{0}]: '.format(i) + e.args[0],) + e.args[1:]
            raise
    return rules
