# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import os
import glob

from .errors import AssetIOError
from .rules import DEFAULT_PATTERN, make_filter

def discover(source, file_filter=None):
    """Return the files to process for a source path.

    A regular file is returned as is and the filter is ignored. For a
    directory the filter picks the scan pattern (a glob) or tests each
    scanned name (a regex). Order is whatever the directory scan yields.
    """
    if os.path.isfile(source):
        return [source]
    if os.path.isdir(source):
        return list(_scan(source, make_filter(file_filter)))
    if os.path.exists(source):
        raise AssetIOError("Unsupported file type at 'from' path: {0}"
                           .format(source), source)
    raise AssetIOError("'from' path doesn't exist: {0}".format(source),
                       source)

def _scan(directory, file_filter):
    pattern = file_filter.scan_pattern if file_filter else DEFAULT_PATTERN
    # Only "**" in a glob filter descends into subdirectories.
    for name in glob.iglob(pattern, root_dir=directory, recursive=True):
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            continue
        if file_filter is None or file_filter.accepts(name):
            yield path
