"""Well-known annotation keys and their interpretation."""

from enum import StrEnum


class Annotation(StrEnum):
    """Annotation keys with a defined meaning on the bus.

    Any other key is a vendor annotation and is kept as a plain string.
    """

    DEPRECATED = "org.freedesktop.DBus.Deprecated"
    SESSIONLESS = "org.alljoyn.Bus.Signal.Sessionless"
    SESSIONCAST = "org.alljoyn.Bus.Signal.Sessioncast"
    UNICAST = "org.alljoyn.Bus.Signal.Unicast"
    GLOBAL_BROADCAST = "org.alljoyn.Bus.Signal.GlobalBroadcast"
    NO_REPLY = "org.freedesktop.DBus.Method.NoReply"
    EMITS_CHANGED_SIGNAL = "org.freedesktop.DBus.Property.EmitsChangedSignal"
    SECURE = "org.alljoyn.Bus.Secure"
    DOC_STRING = "org.alljoyn.Bus.DocString"


# Short names accepted by the definition file syntax
ANNOTATION_ALIASES: dict[str, Annotation] = {
    "deprecated": Annotation.DEPRECATED,
    "sessionless": Annotation.SESSIONLESS,
    "sessioncast": Annotation.SESSIONCAST,
    "unicast": Annotation.UNICAST,
    "global_broadcast": Annotation.GLOBAL_BROADCAST,
    "no_reply": Annotation.NO_REPLY,
    "emits_changed": Annotation.EMITS_CHANGED_SIGNAL,
    "secure": Annotation.SECURE,
    "doc": Annotation.DOC_STRING,
}


def parse_bool(value: str | None) -> bool:
    """Interpret an annotation value as a flag.

    Only "true" (any case) is true. Missing or malformed values are false.
    """
    return value is not None and value.lower() == "true"


def resolve_key(name: str) -> str:
    """Map a short annotation name to its full key, leaving other names alone."""
    alias = ANNOTATION_ALIASES.get(name)
    return str(alias) if alias is not None else name
