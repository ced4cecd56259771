"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope fields added to the caller's request
RESPONSE_QUEUE = "response_queue"
TRACER = "tracer"
PROCESS_BY = "process-by"

# Termination sentinel; only the key's presence matters
EOF = "EOF"
