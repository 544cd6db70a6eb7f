# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

class AssetError(Exception):
    pass

class ConfigError(AssetError):
    def __init__(self, msg, obj=None):
        super().__init__(msg)
        self.obj = obj

class InputTypeError(ConfigError):
    def __init__(self, obj, expected_type):
        super().__init__("Input object '{0}' must be type: '{1}'"
                         .format(repr(obj), str(expected_type)), obj)
        self.expected_type = expected_type
class InputAttributeError(ConfigError):
    def __init__(self, obj, attr):
        super().__init__("Input object '{0}' must have attribute: '{1}'"
                         .format(repr(obj), str(attr)), obj)
        self.attr = attr

class AssetIOError(AssetError):
    def __init__(self, msg, path):
        super().__init__(msg)
        self.path = path

class MinifyError(AssetError):
    def __init__(self, msg, content_type):
        super().__init__(msg)
        self.content_type = content_type

class TransformError(AssetError):
    def __init__(self, msg, path):
        super().__init__(msg)
        self.path = path
