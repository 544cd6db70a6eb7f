# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import os
import logging

class Output:
    def __init__(self, logger=None, stream=None):
        self.log = logger or logging.getLogger('assetloader')
        self.handler = None
        # Only the command line attaches a handler; library users keep theirs.
        if stream is not None:
            self.handler = logging.StreamHandler(stream)
            self.log.addHandler(self.handler)
            self.log.setLevel(logging.WARNING)

    def close(self):
        if self.handler is not None:
            self.log.removeHandler(self.handler)
            self.handler = None

    def on_transform(self, in_file, out_file):
        self.log.info(os.path.relpath(in_file) + ' => ' +
                      os.path.relpath(out_file))

    def on_mkdir(self, directory):
        self.log.debug('Creating directory ' + os.path.relpath(directory))

    def on_image(self, in_file):
        self.log.debug('Copying image as-is: ' + os.path.relpath(in_file))

    def on_rule(self, rule):
        self.log.debug('Processing ' + repr(rule))

    def on_error(self, msg):
        self.log.error(msg)
