""" Default settings for talking to a Bullfinch worker pool. Every value
    here can be overridden by an environment variable, which is read once
    at import time; every value can also be overridden per-instance when
    constructing a :class:`bullfinch.Client`.
"""

import os


def _integer(name, default):

    value = os.environ.get(name)

    if value is None or value == '':
        return default

    try:
        return int(value)
    except ValueError:
        raise ValueError("%s must be an integer, not %s" % (name, repr(value)))


# The host and port describe the queue service, not the workers; the workers
# are never contacted directly.

host = os.environ.get('BULLFINCH_HOST', 'localhost')
port = _integer('BULLFINCH_PORT', 5672)

# Response queues are named by concatenating this prefix with an optional
# caller-supplied suffix. Concurrent requests must use distinct suffixes.

prefix = os.environ.get('BULLFINCH_PREFIX', 'response-net-kestrel-')

# How long, in milliseconds, a single poll of the response queue will block
# before giving up.

timeout = _integer('BULLFINCH_TIMEOUT', 30000)

# Maximum number of decoded messages returned by one Iterator.get_more().

batch_size = _integer('BULLFINCH_BATCH_SIZE', 25)

transport = os.environ.get('BULLFINCH_TRANSPORT', 'rabbitmq')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
