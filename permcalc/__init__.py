from .calculator import PermissionCalculator, SingleFlag, PermissionResolvable, RawValue
from .utils import (
    PermissionFlags,
    flag_items,
    flag_lookup,
    get_flag,
    load_payload,
    PermissionCalculatorError,
    InvalidPermissionKey,
    InvalidPermissionType,
    InvalidPermissionValue,
    InvalidPayload,
    ConfigError,
)

__version__ = "0.1.0"
