# assetloader v0.1
# Copies, minifies and transforms static assets that the bundler never sees.
#
# This is free and unencumbered software released into the public domain.
# For more information, please refer to <http://unlicense.org/>

import re
import json

import rcssmin
import rjsmin
import minify_html

from .errors import MinifyError

def minify_json(content):
    return json.dumps(json.loads(content), separators=(',', ':'),
                      ensure_ascii=False)

def minify_xml(content):
    return re.sub(r'>\s+<', '><', content).strip()

MINIFIERS = {
    'text/css': rcssmin.cssmin,
    'text/html': minify_html.minify,
    'text/javascript': rjsmin.jsmin,
    'application/javascript': rjsmin.jsmin,
    'application/json': minify_json,
    'text/xml': minify_xml,
    'application/xml': minify_xml,
}

def register(content_type, func):
    MINIFIERS[content_type] = func

def _lookup(content_type):
    content_type = content_type.split(';')[0].strip().lower()
    func = MINIFIERS.get(content_type)
    if func is None and content_type.endswith('+json'):
        func = MINIFIERS.get('application/json')
    return func

def minify(content_type, content):
    func = _lookup(content_type)
    if func is None:
        raise MinifyError("No minifier for content type '{0}'"
                          .format(content_type), content_type)
    try:
        return func(content)
    except Exception as e:
        raise MinifyError("Failed to minify '{0}' content: {1}"
                          .format(content_type, e), content_type) from e
