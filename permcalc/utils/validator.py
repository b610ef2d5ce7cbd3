from __future__ import annotations

import cerberus
from typing import TypedDict, Any, Callable, Union, Literal


class _OptionalSpec(TypedDict, total=False):
    allow_unknown: bool
    allowed: list[Any]
    anyof: list[_OptionalSpec]
    empty: bool
    nullable: bool
    oneof: list[_OptionalSpec]
    regex: str
    required: bool
    rename: str
    default: Any
    coerce: Callable[[Any], Any]


class Dict(_OptionalSpec, total=False):
    schema: Spec
    type: Literal["dict"]


class Generic(_OptionalSpec, total=False):
    schema: _Spec
    type: Union[str, list[str]]

# a dict field nests a whole Spec, any other field nests a single rule set

_Spec = Union[Dict, Generic]
Spec = dict[str, _Spec]

# cerberus is untyped, so keep the calls behind a small wrapper

class Validator:
    def __init__(self, spec: Spec, **kwargs):
        self._validator = cerberus.Validator(spec, **kwargs)

    def validate(self, body: dict[str, Any]) -> bool:
        return self._validator.validate(body)  # type: ignore

    def normalized(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._validator.normalized(body)  # type: ignore

    @property
    def errors(self) -> dict[str, Any]:
        return self._validator.errors  # type: ignore


def make_validator(spec: Spec, ignore_none_values: bool = False, allow_unknown: bool = True, require_all: bool = False, purge_unknown: bool = False) -> Validator:
    return Validator(spec, ignore_none_values=ignore_none_values, allow_unknown=allow_unknown, require_all=require_all, purge_unknown=purge_unknown)
