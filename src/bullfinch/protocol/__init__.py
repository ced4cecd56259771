from . import fields
from . import decode
from . import request

from .decode import DecodeError
from .request import RequestBuilder


"""
Bullfinch Protocol Layer
========================

This package defines the transport-agnostic half of the Bullfinch
request/response exchange. It knows what goes into a request and how to
read what comes back; it does not know how bytes move between the client
and the worker pool.

The protocol layer MUST NOT depend on any transport implementation
(e.g. RabbitMQ, the in-process queues, etc).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Client / Iterator (client.py, iterator.py)
    - send()      push a request, aggregate every response
    - iterate()   push a request, consume responses in batches
    Own the response queue for the duration of the exchange

    │
    ▼
Request Builder (request.py)
    - Response queue naming (prefix + suffix)
    - Envelope construction: response_queue, tracer, process-by
    - Never mutates the caller's request

    │
    ▼
Result Decoder (decode.py)
    - JSON first, gzip-compressed JSON second
    - EOF sentinel detection

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for envelope keys and the sentinel
    Prevents string drift across system

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer
    put / get / confirm / delete, keyed by queue name
    - RabbitMQ
    - in-process memory queues

---------------------------------------------------------------------

Design Principles
-----------------

1. Transport Agnostic
   Protocol must operate identically regardless of backend.

2. No Hidden State
   The transport is always handed in explicitly; nothing here opens a
   connection on its own.

3. Layer Isolation
   Dependencies only flow downward:
       Client -> Protocol
       Client -> Transport
   Never upward.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
