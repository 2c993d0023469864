"""Signal definitions."""

from dataclasses import dataclass

from .annotations import Annotation
from .member import MemberDef


@dataclass(eq=False)
class SignalDef(MemberDef):
    """Describes one signal of one bus interface.

    A signal is emitted without a reply, so only the input signature is
    stored. Behavior flags come from the well-known annotations.

    Two signals are equal when interface name, name and signature match.
    Arguments and annotations are not part of the identity, so a signal
    re-annotated by another introspection source still compares equal.
    """

    @property
    def reply_signature(self) -> str:
        """Always empty: a signal returns nothing."""
        return ""

    @property
    def is_sessionless(self) -> bool:
        return self.flag(Annotation.SESSIONLESS)

    @property
    def is_sessioncast(self) -> bool:
        return self.flag(Annotation.SESSIONCAST)

    @property
    def is_unicast(self) -> bool:
        return self.flag(Annotation.UNICAST)

    @property
    def is_global_broadcast(self) -> bool:
        return self.flag(Annotation.GLOBAL_BROADCAST)

    def __str__(self) -> str:
        return (
            f"SignalDef {{name={self.name}, signature={self.signature}, "
            f"interface_name={self.interface_name}}}"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.interface_name == other.interface_name
            and self.name == other.name
            and self.signature == other.signature
        )

    def __hash__(self) -> int:
        return hash((self.interface_name, self.name, self.signature))
