import pytest

from minidrone import ARDiscoveryError, InvalidCommandError
from minidrone.ar_discovery_error import lookup, to_string


def test_catalog_values():
    assert ARDiscoveryError.OK == 0
    assert ARDiscoveryError.ERROR_TIMEOUT == -18
    assert ARDiscoveryError.keys()[0] == 'OK'
    assert len(ARDiscoveryError.keys()) == len(ARDiscoveryError.values())


def test_to_string():
    assert to_string(-13) == 'ERROR_SOCKET_ALREADY_CONNECTED'
    assert to_string(-999) == 'Unknown'


def test_lookup_raises_for_unknown_code():
    assert lookup(0) == 'OK'
    with pytest.raises(InvalidCommandError, match="Can't find discovery error with the value 7b"):
        lookup(123)


def test_lookup_of_negative_unknown_code_quotes_the_code():
    with pytest.raises(InvalidCommandError) as excinfo:
        lookup(-999, ['handshake'])
    assert str(excinfo.value) == 'Can\'t find discovery error called "-999" (handshake)'
