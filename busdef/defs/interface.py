"""Interface definitions."""

from dataclasses import dataclass, field

from .annotations import Annotation
from .base import BaseDef, InvalidArgumentError
from .member import MemberDef
from .method import MethodDef
from .property import PropertyDef
from .signal import SignalDef


@dataclass(eq=False)
class InterfaceDef(BaseDef):
    """A named collection of signals, methods and properties."""

    signals: list[SignalDef] = field(default_factory=list, kw_only=True)
    methods: list[MethodDef] = field(default_factory=list, kw_only=True)
    properties: list[PropertyDef] = field(default_factory=list, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.signals = list(self.signals)
        self.methods = list(self.methods)
        self.properties = list(self.properties)

    def _check_owner(self, member: MemberDef | PropertyDef) -> None:
        if member.interface_name != self.name:
            raise InvalidArgumentError(
                f"{member.name} belongs to {member.interface_name}, not {self.name}"
            )

    def add_signal(self, signal: SignalDef) -> None:
        self._check_mutable()
        self._check_owner(signal)
        self.signals.append(signal)

    def add_method(self, method: MethodDef) -> None:
        self._check_mutable()
        self._check_owner(method)
        self.methods.append(method)

    def add_property(self, prop: PropertyDef) -> None:
        self._check_mutable()
        self._check_owner(prop)
        self.properties.append(prop)

    def get_signal(self, name: str) -> SignalDef | None:
        return next((s for s in self.signals if s.name == name), None)

    def get_method(self, name: str) -> MethodDef | None:
        return next((m for m in self.methods if m.name == name), None)

    def get_property(self, name: str) -> PropertyDef | None:
        return next((p for p in self.properties if p.name == name), None)

    @property
    def members(self) -> list[MemberDef]:
        """Signals and methods together, sorted by name."""
        members: list[MemberDef] = [*self.signals, *self.methods]
        return sorted(members, key=lambda m: m.name)

    @property
    def is_secure(self) -> bool:
        return self.flag(Annotation.SECURE)

    @property
    def is_deprecated(self) -> bool:
        return self.flag(Annotation.DEPRECATED)

    def freeze(self) -> None:
        if self.frozen:
            return
        for definition in (*self.signals, *self.methods, *self.properties):
            definition.freeze()
        object.__setattr__(self, "signals", tuple(self.signals))
        object.__setattr__(self, "methods", tuple(self.methods))
        object.__setattr__(self, "properties", tuple(self.properties))
        super().freeze()

    def __str__(self) -> str:
        return (
            f"InterfaceDef {{name={self.name}, signals={len(self.signals)}, "
            f"methods={len(self.methods)}, properties={len(self.properties)}}}"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
