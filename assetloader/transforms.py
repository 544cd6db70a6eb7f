# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

"""Transforms that can be named from assets.json.

A JSON file can't hold a function, so a rule's "transform" key names one of
the factories below, either as a bare string or as {"name": parameters}.
"""

import jinja2

from .errors import ConfigError

def jinja2_transform(parameters=None):
    """Render the content as a Jinja2 template."""
    parameters = parameters or {}
    if not isinstance(parameters, dict):
        raise ConfigError("jinja2 parameters must be an object", parameters)
    env = jinja2.Environment(undefined=jinja2.StrictUndefined)

    def render(content):
        return env.from_string(content).render(parameters)
    return render

FACTORIES = {'jinja2': jinja2_transform}

def from_config(obj):
    if isinstance(obj, str):
        name, parameters = obj, None
    elif isinstance(obj, dict) and len(obj) == 1:
        name, parameters = next(iter(obj.items()))
    else:
        raise ConfigError("Invalid transform provided: {0!r}".format(obj), obj)

    factory = FACTORIES.get(name)
    if factory is None:
        raise ConfigError("No transform available named '{0}'".format(name),
                          obj)
    return factory(parameters)
