# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

from .errors import (AssetError, ConfigError, AssetIOError, MinifyError,
                     TransformError)
from .rules import AssetRule, GlobFilter, RegexFilter
from .plugin import AssetLoader, Environment, run

__all__ = ['AssetError', 'ConfigError', 'AssetIOError', 'MinifyError',
           'TransformError', 'AssetRule', 'GlobFilter', 'RegexFilter',
           'AssetLoader', 'Environment', 'run']
