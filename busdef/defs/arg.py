"""Argument definitions for bus members."""

from dataclasses import dataclass, field
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin


class Direction(StrEnum):
    """Direction of a method argument."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class ArgDef(DataClassJsonMixin):
    """One positional parameter of a member.

    The type signature is an opaque type token such as "s", "i" or "a{sv}".
    Direction only applies to methods; signal arguments leave it unset.
    """

    name: str
    type_signature: str
    direction: Direction | None = None
    annotations: dict[str, str] = field(default_factory=dict, compare=False, kw_only=True)

    def get_annotation(self, key: str) -> str | None:
        return self.annotations.get(str(key))
