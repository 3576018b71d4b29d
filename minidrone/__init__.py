"""Shared building blocks for the minidrone control stack."""

from .ar_discovery_error import ARDiscoveryError
from .case import constant_case
from .enumeration import Computed, Enum, Fixed, IotaCounter, global_iota
from .errors import InvalidCommandError

__all__ = [
    'ARDiscoveryError',
    'Computed',
    'Enum',
    'Fixed',
    'InvalidCommandError',
    'IotaCounter',
    'constant_case',
    'global_iota',
]
