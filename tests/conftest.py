import json
import pytest
import threading

import bullfinch


def encode(value):
    return json.dumps(value).encode()


class StubTransport(bullfinch.transport.Transport):
    """ A scripted transport: responses are queued up ahead of time with
        :func:`respond`, and every call is recorded for later inspection.
        A :func:`get` against a queue with nothing left returns None
        immediately rather than waiting out the timeout.

        Setting *put_result* or *delete_result* to an exception instance
        causes the corresponding call to raise it.
    """

    def __init__(self):
        self.responses = dict()
        self.put_result = True
        self.delete_result = True
        self.puts = list()
        self.gets = list()
        self.confirms = list()
        self.deletes = list()


    def respond(self, queue, *messages):
        pending = self.responses.setdefault(queue, list())
        for message in messages:
            if not isinstance(message, bytes):
                message = encode(message)
            pending.append(message)


    def put(self, queue, payload, expiration=None):
        self.puts.append((queue, payload, expiration))
        if isinstance(self.put_result, Exception):
            raise self.put_result
        return self.put_result


    def get(self, queue, timeout):
        self.gets.append((queue, timeout))
        pending = self.responses.get(queue)
        if pending:
            return pending.pop(0)
        return None


    def confirm(self, queue):
        self.confirms.append(queue)
        return True


    def delete(self, queue):
        self.deletes.append(queue)
        if isinstance(self.delete_result, Exception):
            raise self.delete_result
        return self.delete_result



@pytest.fixture
def stub():
    return StubTransport()


@pytest.fixture
def client(stub):
    return bullfinch.Client(stub, timeout=10)


@pytest.fixture
def memory():
    return bullfinch.transport.connect(backend='memory')


@pytest.fixture
def worker(memory):
    """ A minimal Bullfinch worker running in a background thread. It takes
        one request off the 'work' queue and answers with one row per entry
        in the request's 'rows' list, followed by the EOF sentinel.
    """

    def run():
        raw = memory.get('work', 2000)
        if raw is None:
            return

        request = json.loads(raw)
        response_queue = request['response_queue']

        for row in request.get('rows', ()):
            memory.put(response_queue, encode({'row': row}))

        memory.put(response_queue, encode({'EOF': True}))

    thread = threading.Thread(target=run)
    thread.daemon = True
    thread.start()

    yield thread

    thread.join(3)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
