from types import MappingProxyType

from .errors import InvalidPermissionKey

__all__ = ("PermissionFlags", "flag_items", "flag_lookup", "get_flag")


class PermissionFlags:
    CREATE_INSTANT_INVITE: int = 1 << 0
    KICK_MEMBERS: int = 1 << 1
    BAN_MEMBERS: int = 1 << 2
    ADMINISTRATOR: int = 1 << 3
    MANAGE_CHANNELS: int = 1 << 4
    MANAGE_GUILD: int = 1 << 5
    ADD_REACTIONS: int = 1 << 6
    VIEW_AUDIT_LOG: int = 1 << 7
    PRIORITY_SPEAKER: int = 1 << 8
    STREAM: int = 1 << 9
    VIEW_CHANNEL: int = 1 << 10
    SEND_MESSAGES: int = 1 << 11
    SEND_TTS_MESSAGES: int = 1 << 12
    MANAGE_MESSAGES: int = 1 << 13
    EMBED_LINKS: int = 1 << 14
    ATTACH_FILES: int = 1 << 15
    READ_MESSAGE_HISTORY: int = 1 << 16
    MENTION_EVERYONE: int = 1 << 17
    USE_EXTERNAL_EMOJIS: int = 1 << 18
    VIEW_GUILD_INSIGHTS: int = 1 << 19
    CONNECT: int = 1 << 20
    SPEAK: int = 1 << 21
    MUTE_MEMBERS: int = 1 << 22
    DEAFEN_MEMBERS: int = 1 << 23
    MOVE_MEMBERS: int = 1 << 24
    USE_VAD: int = 1 << 25
    CHANGE_NICKNAME: int = 1 << 26
    MANAGE_NICKNAMES: int = 1 << 27
    MANAGE_ROLES: int = 1 << 28
    MANAGE_WEBHOOKS: int = 1 << 29
    MANAGE_GUILD_EXPRESSIONS: int = 1 << 30
    USE_APPLICATION_COMMANDS: int = 1 << 31
    REQUEST_TO_SPEAK: int = 1 << 32
    MANAGE_EVENTS: int = 1 << 33
    MANAGE_THREADS: int = 1 << 34
    CREATE_PUBLIC_THREADS: int = 1 << 35
    CREATE_PRIVATE_THREADS: int = 1 << 36
    USE_EXTERNAL_STICKERS: int = 1 << 37
    SEND_MESSAGES_IN_THREADS: int = 1 << 38
    USE_EMBEDDED_ACTIVITIES: int = 1 << 39
    MODERATE_MEMBERS: int = 1 << 40
    VIEW_CREATOR_MONETIZATION_ANALYTICS: int = 1 << 41
    USE_SOUNDBOARD: int = 1 << 42
    CREATE_GUILD_EXPRESSIONS: int = 1 << 43
    CREATE_EVENTS: int = 1 << 44
    USE_EXTERNAL_SOUNDS: int = 1 << 45
    SEND_VOICE_MESSAGES: int = 1 << 46
    # 47 and 48 are unused
    SEND_POLLS: int = 1 << 49
    USE_EXTERNAL_APPS: int = 1 << 50

    @staticmethod
    def all() -> int:
        return _all


# class bodies keep declaration order, so this is the registry order
flag_items: tuple[tuple[str, int], ...] = tuple(
    (name, value) for name, value in vars(PermissionFlags).items() if name.isupper()
)
flag_lookup: MappingProxyType[str, int] = MappingProxyType(dict(flag_items))

_all: int = 0
for _, _value in flag_items:
    _all |= _value


def get_flag(name: str) -> int:
    try:
        return flag_lookup[name]
    except KeyError:
        raise InvalidPermissionKey(name) from None
