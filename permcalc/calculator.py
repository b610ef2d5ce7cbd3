from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

from .utils import (
    InvalidPermissionType,
    InvalidPermissionValue,
    RawPayload,
    dump_payload,
    flag_items,
    get_flag,
    load_payload,
    overwrite_spec,
    role_spec,
    PermissionFlags,
)

__all__ = ("PermissionCalculator", "SingleFlag", "PermissionResolvable", "RawValue")

logger: logging.Logger = logging.getLogger(__name__)

SingleFlag = Union[int, str]
PermissionResolvable = Union[SingleFlag, list[SingleFlag], tuple[SingleFlag, ...], set[SingleFlag], frozenset[SingleFlag]]
RawValue = Union[int, float, str, bytes, None]

_sequence_types = (list, tuple, set, frozenset)

_numeric_string = re.compile(
    r"\s*(?:(?P<dec>[+-]?[0-9]+)|0[xX](?P<hex>[0-9a-fA-F]+)|0[oO](?P<oct>[0-7]+)|0[bB](?P<bin>[01]+))?\s*"
)
_bases: tuple[tuple[str, int], ...] = (("dec", 10), ("hex", 16), ("oct", 8), ("bin", 2))


def _int_from_string(value: str) -> int:
    match = _numeric_string.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid permission value literal: {value!r}")

    for group, base in _bases:
        digits = match[group]
        if digits is not None:
            return int(digits, base)

    return 0  # blank


def _names_in(value: int) -> list[str]:
    return [name for name, flag in flag_items if value & flag == flag]


class PermissionCalculator:
    """A mutable set of permission flags packed into one integer.

    Anything accepted as a *resolvable* may be a flag value (``int``), a
    flag name (``str``) or a list/tuple/set of either. Resolving is strict:
    unknown names and unsupported types raise. :meth:`parse` is the lenient
    counterpart for values arriving from the outside world.
    """

    __hash__ = None  # type: ignore

    def __init__(self, initial: PermissionResolvable = 0):
        self._permissions: int = self.parse_permissions(initial)

    def add(self, permission: PermissionResolvable) -> PermissionCalculator:
        self._permissions |= self.parse_permissions(permission)
        return self

    def remove(self, permission: PermissionResolvable) -> PermissionCalculator:
        self._permissions &= ~self.parse_permissions(permission)
        return self

    def has(self, permission: PermissionResolvable) -> bool:
        """Whether *every* bit of ``permission`` is set."""
        value = self.parse_permissions(permission)
        return self._permissions & value == value

    @property
    def value(self) -> int:
        return self._permissions

    def get_permissions_list(self) -> list[str]:
        return _names_in(self._permissions)

    def apply_overwrite(self, allow: PermissionResolvable = 0, deny: PermissionResolvable = 0) -> PermissionCalculator:
        # deny is applied first so a flag in both ends up allowed
        self._permissions &= ~self.parse_permissions(deny)
        self._permissions |= self.parse_permissions(allow)
        return self

    def apply_overwrite_payload(self, raw: RawPayload) -> PermissionCalculator:
        body = load_payload(raw, overwrite_spec)
        return self.apply_overwrite(self.parse(body["allow"]), self.parse(body["deny"]))

    def copy(self) -> PermissionCalculator:
        return type(self)(self._permissions)

    def to_payload(self, key: str = "permissions") -> dict[str, str]:
        return {key: str(self._permissions)}

    def dumps(self, key: str = "permissions") -> str:
        return dump_payload(self.to_payload(key))

    @classmethod
    def from_payload(cls, raw: RawPayload, key: str = "permissions") -> PermissionCalculator:
        spec = role_spec if key == "permissions" else {key: role_spec["permissions"]}
        body = load_payload(raw, spec)
        return cls(cls.parse(body[key]))

    @classmethod
    def all(cls) -> PermissionCalculator:
        return cls(PermissionFlags.all())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, PermissionCalculator):
            return self._permissions == other._permissions
        if isinstance(other, int) and not isinstance(other, bool):
            return self._permissions == other
        return NotImplemented

    def __int__(self) -> int:
        return self._permissions

    def __repr__(self) -> str:
        return f"<{type(self).__name__} value={self._permissions} permissions={self.get_permissions_list()}>"

    @staticmethod
    def get_permissions_from_value(value: RawValue) -> list[str]:
        return _names_in(PermissionCalculator.parse(value))

    @staticmethod
    def parse(value: RawValue) -> int:
        """Convert a loosely typed value to a permission value.

        Never raises, anything that is not an exact non-negative integer
        becomes ``0``.
        """
        if value is None:
            return 0

        try:
            if isinstance(value, bytes):
                value = value.decode()
            if isinstance(value, str):
                parsed = _int_from_string(value)
            else:
                parsed = int(value)  # type: ignore
                if parsed != value:
                    raise ValueError(f"{value!r} is not integral")
        except (TypeError, ValueError, OverflowError) as e:
            logger.debug("Could not parse permission value %r, using 0: %s", value, e)
            return 0

        if parsed < 0:
            logger.debug("Negative permission value %r, using 0", value)
            return 0

        return parsed

    @staticmethod
    def parse_permissions(value: PermissionResolvable) -> int:
        if isinstance(value, _sequence_types):
            result = 0
            for perm in value:
                result |= PermissionCalculator.parse_permission(perm)
            return result

        return PermissionCalculator.parse_permission(value)

    @staticmethod
    def parse_permission(perm: Optional[SingleFlag]) -> int:
        if isinstance(perm, bool):
            raise InvalidPermissionType(perm)

        if isinstance(perm, int):
            if perm < 0:
                raise InvalidPermissionValue(perm)
            return perm

        if isinstance(perm, str):
            return get_flag(perm)

        raise InvalidPermissionType(perm)
