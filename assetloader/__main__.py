# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import os
import sys
import json
import argparse
import logging

from .errors import AssetError
from .output import Output
from .plugin import AssetLoader, Environment
from .rules import rules_from_config

def main(argv=None, stream=None):
    parser = argparse.ArgumentParser(prog='assetloader')
    parser.add_argument('-f', '--assets-file', default=None,
                        help="Specify the assets json file " +
                             "(default ./assets.json).")
    parser.add_argument('-v', '--verbose', action="count", default=0,
                        help="Log files copied to stdout.")
    arguments = parser.parse_args(argv)

    out = Output(stream=stream or sys.stdout)
    if arguments.verbose == 1:
        out.log.setLevel(logging.INFO)
    elif arguments.verbose > 1:
        out.log.setLevel(logging.DEBUG)
    try:
        return build(arguments.assets_file or 'assets.json', out)
    finally:
        out.close()

def build(assets_json_filename, out):
    # Parse the assets.json file.
    try:
        with open(assets_json_filename) as f:
            assets_json = json.load(f)
    except OSError:
        out.on_error("Failed to open '" + assets_json_filename + "'!")
        return 1
    except ValueError as e:
        out.on_error("Invalid JSON in '{0}': {1}"
                     .format(assets_json_filename, e))
        return 1
    if not isinstance(assets_json, dict):
        out.on_error("'" + assets_json_filename + "' must hold an object!")
        return 1

    env = Environment(os.getcwd(), assets_json.get('dist', 'dist/'))
    try:
        rules = rules_from_config(assets_json.get('assets', []))
        AssetLoader(rules, out).setup(env)
    except AssetError as e:
        out.on_error(e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
