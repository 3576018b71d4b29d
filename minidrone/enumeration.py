"""Immutable named-constant container shared by the drone protocol modules.

Three construction modes are supported::

    Colors = Enum(['RED', 'BLACK', 'GREEN'])          # iota: 0, 1, 2, ...
    FontStyles = Enum(['italic', 'bold'], True)      # FontStyles.ITALIC == 'italic'
    Answers = Enum({
        'YES': True,
        'NO': False,
        # callables become computed members, re-evaluated on every read
        'MAYBE': lambda: random.random() >= 0.5,
    })

The named builders :meth:`Enum.from_ordered_keys`, :meth:`Enum.from_auto_strings`
and :meth:`Enum.from_value_map` return the same container type.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Collection, Dict, Iterable, Iterator, List, Optional, Union

from .case import constant_case, get_type_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Fixed:
    """Member holding a literal value."""

    value: Any

    def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Computed:
    """Member whose value is produced by calling ``func`` on every read."""

    func: Callable[[], Any]

    def resolve(self) -> Any:
        return self.func()


Member = Union[Fixed, Computed]


class IotaCounter:
    """Monotonically increasing integer source.

    ``next`` and ``take`` are serialised with a lock so concurrent enum
    construction never observes the same value twice.
    """

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._next = start

    def next(self) -> int:
        return self.take(1)[0]

    def take(self, count: int) -> range:
        """Reserve ``count`` consecutive values and return them."""

        if count < 0:
            raise ValueError('count must be >= 0')
        with self._lock:
            first = self._next
            self._next += count
        return range(first, first + count)

    def peek(self) -> int:
        with self._lock:
            return self._next

    def reset(self, start: int = 0) -> None:
        with self._lock:
            self._next = start
        logger.debug('iota counter reset to %d', start)


_GLOBAL_IOTA = IotaCounter()


def global_iota() -> IotaCounter:
    """Return the process-wide counter used by ordered-key enums."""

    return _GLOBAL_IOTA


def _is_sealed(obj: 'Enum') -> bool:
    try:
        object.__getattribute__(obj, '_members')
    except AttributeError:
        return False
    return True


def _seal(obj: 'Enum', members: Dict[str, Member], mode: str) -> None:
    if _is_sealed(obj):
        raise AttributeError('enum is already built')
    object.__setattr__(obj, '_members', MappingProxyType(dict(members)))
    logger.debug('built %s enum with %d keys', mode, len(members))


def _strict_equal(a: Any, b: Any) -> bool:
    """Equality without cross-type coercion.

    Values must share their exact type, so ``1``, ``1.0`` and ``True`` never
    match each other. Containers compare by content: ``[1]`` equals ``[1]``.
    """

    return type(a) is type(b) and a == b


def _is_ordered_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def _check_key(key: Any, seen: Collection[str]) -> None:
    if not isinstance(key, str):
        raise TypeError(f'Expected enum key to be of type "str" got "{get_type_name(key)}"')
    if key in seen:
        raise ValueError(f'duplicate enum key {key!r}')
    if hasattr(Enum, key):
        raise ValueError(f'enum key {key!r} shadows an Enum attribute')


def _ordered_key_members(keys: Iterable[str], counter: Optional[IotaCounter]) -> Dict[str, Member]:
    names: List[str] = []
    for key in keys:
        _check_key(key, names)
        names.append(key)
    # no counter values are reserved until every key is accepted
    codes = (counter if counter is not None else _GLOBAL_IOTA).take(len(names))
    return {key: Fixed(code) for key, code in zip(names, codes)}


def _auto_string_members(strings: Iterable[str]) -> Dict[str, Member]:
    members: Dict[str, Member] = {}
    for row in strings:
        if not isinstance(row, str):
            raise TypeError(f'Expected auto enum entry to be of type "str" got "{get_type_name(row)}"')
        key = constant_case(row)
        if not key:
            raise ValueError(f'cannot derive an enum key from {row!r}')
        _check_key(key, members)
        members[key] = Fixed(row)
    return members


def _value_map_members(mapping: Mapping) -> Dict[str, Member]:
    members: Dict[str, Member] = {}
    for key, value in mapping.items():
        _check_key(key, members)
        if isinstance(value, (Fixed, Computed)):
            members[key] = value
        elif callable(value):
            members[key] = Computed(value)
        else:
            members[key] = Fixed(value)
    return members


class Enum:
    """Sealed, ordered set of named values.

    Members are read as attributes (``instance.KEY``) or items
    (``instance['KEY']``); computed members are re-evaluated on each read.
    Instances cannot be modified once built.
    """

    __slots__ = ('_members',)

    def __init__(
        self,
        enums: Union[Mapping, List[str]],
        auto: bool = False,
        *,
        counter: Optional[IotaCounter] = None,
    ) -> None:
        if _is_sealed(self):
            raise AttributeError('enum is already built')

        is_sequence = _is_ordered_sequence(enums)

        if auto and not is_sequence:
            raise TypeError(f'Expected enums to be of type "list" got "{get_type_name(enums)}"')
        if counter is not None and (auto or not is_sequence):
            raise TypeError('counter only applies to ordered-key enums')

        if is_sequence and auto:
            members = _auto_string_members(enums)
            mode = 'auto'
        elif is_sequence:
            members = _ordered_key_members(enums, counter)
            mode = 'iota'
        elif isinstance(enums, Mapping):
            members = _value_map_members(enums)
            mode = 'value map'
        else:
            raise TypeError(
                f'Expected enums to be of type "list" or "dict" got "{get_type_name(enums)}"'
            )

        _seal(self, members, mode)

    @classmethod
    def from_ordered_keys(cls, keys: Iterable[str], counter: Optional[IotaCounter] = None) -> 'Enum':
        """Number ``keys`` in order from ``counter`` (the global counter by default)."""

        return cls._from_members(_ordered_key_members(keys, counter), 'iota')

    @classmethod
    def from_auto_strings(cls, strings: Iterable[str]) -> 'Enum':
        """Key each string by its UPPER_SNAKE form, keeping the original as value."""

        return cls._from_members(_auto_string_members(strings), 'auto')

    @classmethod
    def from_value_map(cls, mapping: Mapping) -> 'Enum':
        return cls._from_members(_value_map_members(mapping), 'value map')

    @classmethod
    def _from_members(cls, members: Dict[str, Member], mode: str) -> 'Enum':
        obj = cls.__new__(cls)
        _seal(obj, members, mode)
        return obj

    # ========== member access ==========
    def __getattr__(self, name: str) -> Any:
        members = object.__getattribute__(self, '_members')
        try:
            member = members[name]
        except KeyError:
            raise AttributeError(f'enum has no key {name!r}') from None
        return member.resolve()

    def __getitem__(self, name: str) -> Any:
        return self._members[name].resolve()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'cannot set {name!r}: enum is read-only')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'cannot delete {name!r}: enum is read-only')

    def __copy__(self) -> 'Enum':
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Enum':
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, name: object) -> bool:
        return self.has_key(name)

    def member(self, name: str) -> Member:
        """Return the raw member definition for ``name``."""

        return self._members[name]

    # ========== queries ==========
    def keys(self) -> List[str]:
        return list(self._members)

    def values(self) -> List[Any]:
        """Distinct current values in declaration order."""

        out: List[Any] = []
        for member in self._members.values():
            value = member.resolve()
            if not any(_strict_equal(value, seen) for seen in out):
                out.append(value)
        return out

    def has_key(self, name: object) -> bool:
        return isinstance(name, str) and name in self._members

    def has_value(self, value: Any) -> bool:
        return any(_strict_equal(value, v) for v in self.values())

    def find_for_value(self, value: Any) -> Optional[str]:
        """Return the first key whose current value equals ``value``, or ``None``."""

        for key, member in self._members.items():
            if _strict_equal(member.resolve(), value):
                return key
        return None

    def __str__(self) -> str:
        return ', '.join(f'{key}={member.resolve()}' for key, member in self._members.items())

    def __repr__(self) -> str:
        return f'Enum({self})'
