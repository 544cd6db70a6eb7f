# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import os

from .content import SourceFile, process
from .discovery import discover
from .errors import ConfigError
from .output import Output
from .paths import resolve
from .rules import AssetRule
from .writer import Writer

class Environment:
    def __init__(self, root, dist_root=None):
        """Initialize the root and the dist root with given values.

        A relative dist_root is taken relative to root.
        """
        self.root = os.path.abspath(root)
        self.dist_root = dist_root and os.path.join(self.root, dist_root)

class AssetLoader:
    """Build plugin copying assets the bundler doesn't pick up by itself.

    The host calls setup() once per build with its environment; the
    environment's dist_root is the output directory for rules without a
    'to', and relative 'from' and 'to' paths are taken relative to its root.
    """
    name = 'assetLoader'

    def __init__(self, assets, out=None):
        self.assets = assets
        self.out = out or Output()

    def setup(self, env):
        run(self.assets, env.dist_root, self.out, root=env.root)

def run(rules, default_outdir=None, out=None, root=None):
    """Process every rule in order, stopping at the first error.

    Files written before an error are left in place.
    """
    if not rules:
        raise ConfigError("'assets' option not provided", rules)
    out = out or Output()
    writer = Writer(out)

    for rule in rules:
        if not isinstance(rule, AssetRule):
            raise ConfigError("Asset {0!r} is not an AssetRule"
                              .format(rule), rule)
        out.on_rule(rule)
        source, to = rule.source, rule.to
        if root is not None:
            source = source and os.path.join(root, source)
            to = to and os.path.join(root, to)
        to = resolve(source, to, default_outdir, out)
        for file_path in discover(source, rule.filter):
            out_path = os.path.join(to, rule.name or
                                    os.path.basename(file_path))
            result = process(SourceFile(file_path), rule)
            writer.write(file_path, out_path, result)
