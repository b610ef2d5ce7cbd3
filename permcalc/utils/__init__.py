from .errors import (
    PermissionCalculatorError,
    InvalidPermissionKey,
    InvalidPermissionType,
    InvalidPermissionValue,
    InvalidPayload,
    ConfigError,
)
from .permissions import PermissionFlags, flag_items, flag_lookup, get_flag
from .validator import Spec, Validator, make_validator
from .specs import role_spec, overwrite_spec
from .payloads import RawPayload, load_payload, dump_payload
