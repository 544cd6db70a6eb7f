# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import mimetypes

from .errors import AssetIOError, TransformError
from . import minify as minifier

# Lets undecodable bytes survive a read/write round trip untouched.
ENCODING = 'utf-8'
ERRORS = 'surrogateescape'

DEFAULT_TYPE = 'application/octet-stream'

class Image:
    """Raw file, copied byte for byte."""
    def __init__(self, path):
        self.path = path

class Text:
    def __init__(self, content):
        self.content = content

class SourceFile:
    """A discovered file; the text is only read when asked for."""
    def __init__(self, path):
        self.path = path
        self.type = mimetypes.guess_type(path)[0] or DEFAULT_TYPE

    @property
    def is_image(self):
        return 'image' in self.type

    def text(self):
        try:
            with open(self.path, encoding=ENCODING, errors=ERRORS,
                      newline='') as f:
                return f.read()
        except OSError as e:
            raise AssetIOError("Error reading '{0}': {1}"
                               .format(self.path, e.strerror or e),
                               self.path) from e

def process(source_file, rule):
    """Classify a file and run the text pipeline on anything but images.

    Minify always runs before transform.
    """
    if source_file.is_image:
        return Image(source_file.path)

    content = source_file.text()
    if rule.minify:
        content = minifier.minify(source_file.type, content)
    if rule.transform is not None:
        try:
            content = rule.transform(content)
        except Exception as e:
            raise TransformError("Transform failed for '{0}': {1}"
                                 .format(source_file.path, e),
                                 source_file.path) from e
        if not isinstance(content, str):
            raise TransformError("Transform for '{0}' returned {1}, not text"
                                 .format(source_file.path,
                                         type(content).__name__),
                                 source_file.path)
    return Text(content)
