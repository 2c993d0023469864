"""Shared base for members that carry an argument list."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from .annotations import Annotation
from .arg import ArgDef
from .base import BaseDef, InvalidArgumentError


@dataclass(eq=False)
class MemberDef(BaseDef):
    """A member of a bus interface with an ordered argument list.

    The argument list is in wire order. It is not checked against the
    signature; see busdef.generator.signature.check_member for that.
    """

    _identity: ClassVar[tuple[str, ...]] = ("name", "signature", "interface_name")

    signature: str
    interface_name: str
    args: list[ArgDef] = field(default_factory=list, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.signature is None:
            raise InvalidArgumentError("Null signature")
        if self.interface_name is None:
            raise InvalidArgumentError("Null interface_name")
        self.args = list(self.args)

    @property
    def arg_list(self) -> list[ArgDef]:
        """A copy of the arguments in declaration order."""
        return list(self.args)

    def set_arg_list(self, args: Iterable[ArgDef]) -> None:
        """Replace the whole argument list, keeping the given order."""
        self._check_mutable()
        self.args[:] = list(args)

    def add_arg(self, arg: ArgDef) -> None:
        """Append an argument to the end of the list."""
        self._check_mutable()
        self.args.append(arg)

    def get_arg(self, name: str) -> ArgDef | None:
        """Return the first argument with the given name, or None."""
        for arg in self.args:
            if arg.name == name:
                return arg
        return None

    @property
    def is_deprecated(self) -> bool:
        return self.flag(Annotation.DEPRECATED)

    def freeze(self) -> None:
        if self.frozen:
            return
        object.__setattr__(self, "args", tuple(self.args))
        super().freeze()
