"""Diagnostics raised when a protocol symbol cannot be resolved."""

from __future__ import annotations

from typing import Any, Iterable, Tuple


def d2h(number: int) -> str:
    """Render ``number`` as lowercase hex padded to a full byte."""

    return f'{int(number):02x}'


class InvalidCommandError(Exception):
    """Thrown when an invalid command is requested or received.

    ``target`` is the identity that failed to resolve: non-negative integers
    are shown as a hex byte (``with the value 0f``), anything else verbatim
    (``called "Foo"``). ``context`` entries are appended in parentheses; a
    single string counts as one entry.
    """

    def __init__(self, value: Any, type: str, target: Any, context: Iterable[str] = ()) -> None:
        self.value = value
        self.type = type
        self.target = target
        if isinstance(context, str):
            context = (context,)
        self.context: Tuple[str, ...] = tuple(context)

        if isinstance(target, int) and not isinstance(target, bool) and target >= 0:
            message = 'with the value ' + d2h(target)
        else:
            message = f'called "{target}"'

        message = f"Can't find {type} {message}"

        if self.context:
            message += ' (' + ', '.join(self.context) + ')'

        super().__init__(message)
