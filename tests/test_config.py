import importlib
import pytest

import bullfinch


@pytest.fixture
def reload_config(monkeypatch):

    yield importlib.reload

    # Put the module back the way the rest of the tests expect it.

    monkeypatch.undo()
    importlib.reload(bullfinch.config)


def test_defaults(monkeypatch, reload_config):

    for name in ('HOST', 'PORT', 'PREFIX', 'TIMEOUT', 'BATCH_SIZE', 'TRANSPORT'):
        monkeypatch.delenv('BULLFINCH_' + name, raising=False)

    config = reload_config(bullfinch.config)

    assert config.host == 'localhost'
    assert config.port == 5672
    assert config.prefix == 'response-net-kestrel-'
    assert config.timeout == 30000
    assert config.batch_size == 25
    assert config.transport == 'rabbitmq'


def test_environment(monkeypatch, reload_config):

    monkeypatch.setenv('BULLFINCH_HOST', '172.16.49.130')
    monkeypatch.setenv('BULLFINCH_PORT', '22133')
    monkeypatch.setenv('BULLFINCH_PREFIX', 'replies-')
    monkeypatch.setenv('BULLFINCH_TIMEOUT', '500')
    monkeypatch.setenv('BULLFINCH_BATCH_SIZE', '200')
    monkeypatch.setenv('BULLFINCH_TRANSPORT', 'memory')

    config = reload_config(bullfinch.config)

    assert config.host == '172.16.49.130'
    assert config.port == 22133
    assert config.prefix == 'replies-'
    assert config.timeout == 500
    assert config.batch_size == 200
    assert config.transport == 'memory'

    client = bullfinch.connect()
    assert isinstance(client.transport, bullfinch.transport.memory.Transport)
    assert client.prefix == 'replies-'
    assert client.timeout == 500
    assert client.batch_size == 200


def test_bad_integer(monkeypatch, reload_config):

    monkeypatch.setenv('BULLFINCH_TIMEOUT', 'soon')

    with pytest.raises(ValueError):
        reload_config(bullfinch.config)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
