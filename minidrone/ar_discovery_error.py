"""ARDiscovery status codes reported during the connection handshake."""

from __future__ import annotations

from typing import Iterable

from .enumeration import Enum
from .errors import InvalidCommandError

ARDiscoveryError = Enum({
    'OK': 0,
    'ERROR': -1,
    'ERROR_SIMPLE_POLL': -2,
    'ERROR_BUILD_NAME': -3,
    'ERROR_ENTRY_GROUP': -4,
    'ERROR_ADD_SERVICE': -5,
    'ERROR_GROUP_COMMIT': -6,
    'ERROR_BROWSER_ALLOC': -7,
    'ERROR_BROWSER_NEW': -8,
    'ERROR_ALLOC': -9,
    'ERROR_INIT': -10,
    'ERROR_SOCKET_CREATION': -11,
    'ERROR_SOCKET_PERMISSION_DENIED': -12,
    'ERROR_SOCKET_ALREADY_CONNECTED': -13,
    'ERROR_ACCEPT': -14,
    'ERROR_SEND': -15,
    'ERROR_READ': -16,
    'ERROR_SELECT': -17,
    'ERROR_TIMEOUT': -18,
    'ERROR_ABORT': -19,
    'ERROR_PIPE_INIT': -20,
    'ERROR_BAD_PARAMETER': -21,
    'ERROR_BUSY': -22,
    'ERROR_SOCKET_UNREACHABLE': -23,
    'ERROR_OUTPUT_LENGTH': -24,
})


def to_string(code: int) -> str:
    """Return the status name for ``code``, or ``'Unknown'``."""

    return ARDiscoveryError.find_for_value(code) or 'Unknown'


def lookup(code: int, context: Iterable[str] = ()) -> str:
    """Return the status name for ``code`` or raise :class:`InvalidCommandError`."""

    name = ARDiscoveryError.find_for_value(code)
    if name is None:
        raise InvalidCommandError(code, 'discovery error', code, context)
    return name
