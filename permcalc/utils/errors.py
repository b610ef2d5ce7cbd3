from typing import Any


class PermissionCalculatorError(Exception):
    pass


class InvalidPermissionKey(PermissionCalculatorError, KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid permission key: {key}")

    # KeyError.__str__ reprs the argument, we want the plain message
    def __str__(self) -> str:
        return self.args[0]


class InvalidPermissionType(PermissionCalculatorError, TypeError):
    def __init__(self, item: Any):
        self.type_name: str = type(item).__name__
        super().__init__(f"Invalid permission type: {self.type_name}")


class InvalidPermissionValue(PermissionCalculatorError, ValueError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid permission value: {value}")


class InvalidPayload(PermissionCalculatorError):
    def __init__(self, message: str, errors: dict[str, Any] = None):
        self.errors: dict[str, Any] = errors or {}
        super().__init__(message)


class ConfigError(PermissionCalculatorError):
    pass
