# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import shutil

from .content import Image, Text, ENCODING, ERRORS
from .errors import AssetIOError
from .output import Output

class Writer:
    """Persist processed content. The parent directory must already exist."""
    def __init__(self, out=None):
        self.out = out or Output()

    def copy(self, input_file, output_file):
        shutil.copyfile(input_file, output_file)
        shutil.copystat(input_file, output_file)

    def file_from_content(self, content, output_file):
        with open(output_file, 'w', encoding=ENCODING, errors=ERRORS,
                  newline='') as f:
            f.write(content)

    def write(self, input_file, output_file, result):
        try:
            if isinstance(result, Image):
                self.out.on_image(result.path)
                self.copy(result.path, output_file)
            elif isinstance(result, Text):
                self.file_from_content(result.content, output_file)
            else:
                raise TypeError("Cannot write {0!r}".format(result))
        except OSError as e:
            raise AssetIOError("Error writing '{0}': {1}"
                               .format(output_file, e.strerror or e),
                               output_file) from e
        self.out.on_transform(input_file, output_file)
