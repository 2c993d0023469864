"""Property definitions."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from .annotations import Annotation
from .base import BaseDef, InvalidArgumentError


class Access(StrEnum):
    """Access mode of a property."""

    READ = "read"
    WRITE = "write"
    READWRITE = "readwrite"


@dataclass(eq=False)
class PropertyDef(BaseDef):
    """Describes one property of one bus interface."""

    _identity: ClassVar[tuple[str, ...]] = ("name", "type_signature", "interface_name")

    type_signature: str
    interface_name: str
    access: Access = Access.READ

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.type_signature is None:
            raise InvalidArgumentError("Null type")
        if self.interface_name is None:
            raise InvalidArgumentError("Null interface_name")

    @property
    def is_readable(self) -> bool:
        return self.access in (Access.READ, Access.READWRITE)

    @property
    def is_writable(self) -> bool:
        return self.access in (Access.WRITE, Access.READWRITE)

    @property
    def is_deprecated(self) -> bool:
        return self.flag(Annotation.DEPRECATED)

    @property
    def emits_changed_signal(self) -> str | None:
        """Raw EmitsChangedSignal value ("true", "invalidates", "const", "false")."""
        return self.get_annotation(Annotation.EMITS_CHANGED_SIGNAL)

    def __str__(self) -> str:
        return (
            f"PropertyDef {{name={self.name}, type={self.type_signature}, "
            f"access={self.access}, interface_name={self.interface_name}}}"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.interface_name == other.interface_name
            and self.name == other.name
            and self.type_signature == other.type_signature
        )

    def __hash__(self) -> int:
        return hash((self.interface_name, self.name, self.type_signature))
