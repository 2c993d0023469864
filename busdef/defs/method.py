"""Method definitions."""

from dataclasses import dataclass
from typing import ClassVar

from .annotations import Annotation
from .arg import ArgDef, Direction
from .base import InvalidArgumentError
from .member import MemberDef


@dataclass(eq=False)
class MethodDef(MemberDef):
    """Describes one method of one bus interface.

    signature covers the input arguments, reply_signature the output ones.
    """

    _identity: ClassVar[tuple[str, ...]] = (
        "name",
        "signature",
        "interface_name",
        "reply_signature",
    )

    reply_signature: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.reply_signature is None:
            raise InvalidArgumentError("Null reply_signature")

    @property
    def in_args(self) -> tuple[ArgDef, ...]:
        return tuple(arg for arg in self.args if arg.direction != Direction.OUT)

    @property
    def out_args(self) -> tuple[ArgDef, ...]:
        return tuple(arg for arg in self.args if arg.direction == Direction.OUT)

    @property
    def is_no_reply(self) -> bool:
        return self.flag(Annotation.NO_REPLY)

    def __str__(self) -> str:
        return (
            f"MethodDef {{name={self.name}, signature={self.signature}, "
            f"reply_signature={self.reply_signature}, interface_name={self.interface_name}}}"
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
            and self.reply_signature == other.reply_signature
        )

    def __hash__(self) -> int:
        return hash((self.interface_name, self.name, self.signature, self.reply_signature))
