from __future__ import annotations

import logging
import ujson
from typing import Any, Union

from .errors import InvalidPayload
from .validator import Spec, make_validator

__all__ = ("load_payload", "dump_payload")

logger: logging.Logger = logging.getLogger(__name__)

RawPayload = Union[str, bytes, dict[str, Any]]


def load_payload(raw: RawPayload, payload_spec: Spec) -> dict[str, Any]:
    """Decode a JSON object and normalize it against ``payload_spec``.

    Raises :class:`InvalidPayload` when the body is not a JSON object or
    does not match the schema.
    """
    if isinstance(raw, (str, bytes)):
        try:
            if isinstance(raw, bytes):
                raw = raw.decode()
            body = ujson.loads(raw)
        except ValueError as e:
            logger.debug("Rejecting undecodable payload: %s", e)
            raise InvalidPayload(f"Payload is not valid JSON: {e}") from e
    else:
        body = raw

    if not isinstance(body, dict):
        raise InvalidPayload(f"Payload must be a JSON object, not {type(body).__name__}")

    validator = make_validator(payload_spec)
    if not validator.validate(body):
        logger.debug("Rejecting payload: %s", validator.errors)
        raise InvalidPayload("Payload failed validation", validator.errors)

    normalized = validator.normalized(body)
    if normalized is None:
        raise InvalidPayload("Payload failed validation", validator.errors)

    return normalized


def dump_payload(body: dict[str, Any]) -> str:
    return ujson.dumps(body)
