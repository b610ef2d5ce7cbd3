from .validator import Spec

# permission values travel as decimal strings, some senders use plain numbers
permission_field: dict = {"type": ["string", "integer"], "nullable": True, "default": "0"}

role_spec: Spec = {
    "id": {"type": "string", "required": False},
    "name": {"type": "string", "required": False, "maxlength": 100},
    "permissions": permission_field,
}

overwrite_spec: Spec = {
    "id": {"type": "string", "required": False},
    "type": {"type": "integer", "allowed": [0, 1], "required": False},
    "allow": permission_field,
    "deny": permission_field,
}
