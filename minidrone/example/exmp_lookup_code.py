"""Resolve an ARDiscovery status code or name."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from minidrone import ARDiscoveryError, InvalidCommandError
from minidrone.ar_discovery_error import lookup


def _parse_code(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as exc:  # pragma: no cover - CLI error handling
        raise argparse.ArgumentTypeError(f'invalid integer literal: {text}') from exc


def resolve(code: Optional[int], name: Optional[str], context: list[str]) -> tuple[str, int]:
    """Return ``(name, code)`` or raise :class:`InvalidCommandError`."""

    if code is not None:
        return lookup(code, context), code

    if not ARDiscoveryError.has_key(name):
        raise InvalidCommandError(name, 'discovery error', name, context)
    return name, ARDiscoveryError[name]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('-c', '--code', type=_parse_code, help='Status code (e.g. -18 or 0x0)')
    group.add_argument('-n', '--name', help='Status name (e.g. ERROR_TIMEOUT)')
    parser.add_argument(
        '-C', '--context', action='append', default=[], help='Extra context for the error message'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    logging.getLogger(__name__).debug('catalog: %s', ARDiscoveryError)

    try:
        name, code = resolve(args.code, args.name, args.context)
    except InvalidCommandError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f'{name} = {code}')
    return 0


if __name__ == '__main__':  # pragma: no cover - CLI entry point
    sys.exit(main())
