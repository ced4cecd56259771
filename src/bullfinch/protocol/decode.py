""" Interpretation of raw response payloads. Workers may gzip an oversized
    response before putting it on the response queue; there is no flag
    saying so, the only tell is that the raw bytes are not valid JSON.
"""

import collections.abc
import gzip
import zlib

from .. import json
from . import fields


class DecodeError(ValueError):
    """ A response payload could not be interpreted, either as JSON or as
        gzip-compressed JSON.
    """


def decode(raw):
    """ Return the structured value represented by the *raw* bytes. If the
        bytes do not parse as JSON they are gunzipped and parsed again; if
        that also fails, :class:`DecodeError` is raised.

        A payload that is simply malformed JSON is indistinguishable from a
        compressed one, and will fail in the decompression step.
    """

    try:
        return json.loads(raw)
    except json.errors:
        pass

    try:
        decompressed = gzip.decompress(raw)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError('response is neither JSON nor gzip: ' + str(e)) from e

    try:
        return json.loads(decompressed)
    except json.errors as e:
        raise DecodeError('gzip response does not contain JSON: ' + str(e)) from e


def is_eof(value):
    """ Return True if the decoded *value* is the end-of-stream sentinel.
        Only the presence of the key matters, its value is never inspected.
    """

    if isinstance(value, collections.abc.Mapping):
        return fields.EOF in value

    return False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
