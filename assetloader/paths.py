# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import os

from .errors import ConfigError, AssetIOError
from .output import Output

def resolve(source, to, default_outdir=None, out=None):
    """Validate the source and make sure the output directory exists.

    Returns the output directory: to, or default_outdir when to is unset.
    Safe to call repeatedly with the same arguments.
    """
    out = out or Output()
    if not source or not os.path.exists(source):
        raise ConfigError("Invalid 'from' path: {0}".format(source), source)

    to = to or default_outdir
    if not to:
        raise ConfigError("Invalid 'to' path: {0}".format(to), to)

    if os.path.exists(to):
        if not os.path.isdir(to):
            raise AssetIOError("'to' path is not a directory: {0}".format(to),
                               to)
        return to

    out.on_mkdir(to)
    try:
        os.makedirs(to, exist_ok=True)
    except OSError as e:
        raise AssetIOError("Error creating 'to' path: {0} - {1}"
                           .format(to, e.strerror or e), to) from e
    return to
