""" JSON encoding for request envelopes and decoding for response payloads.
    The fastest installed library wins: msgspec, then orjson, then the
    standard library. Whichever is chosen, :func:`dumps` returns bytes and
    :func:`loads` accepts bytes.
"""

# Only one of these ends up imported; the others stay None.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


# Queue transports move bytes, so the standard library's str output is
# encoded to match msgspec and orjson.

def json_dumps(*args, **kwargs):
    return json.dumps(*args, **kwargs).encode()

# A failed parse is how a gzip-compressed response is recognized, so the
# decoder needs to catch parse failures from whichever library is active.
# ValueError covers the standard library, orjson, and raw bytes that are
# not valid text at all.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    errors = (msgspec.DecodeError, ValueError)
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    errors = (ValueError,)
else:
    dumps = json_dumps
    loads = json.loads
    errors = (ValueError,)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
