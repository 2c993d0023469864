"""Common identity and annotation storage for every definition kind."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar

from dataclasses_json import DataClassJsonMixin

from .annotations import Annotation, parse_bool


class InvalidArgumentError(ValueError):
    """Raised when a definition is constructed with a missing required field."""


class FrozenDefinitionError(RuntimeError):
    """Raised when a published definition is modified."""


@dataclass(eq=False)
class BaseDef(DataClassJsonMixin):
    """A named definition carrying string annotations.

    Definitions are mutable while they are being built. Once handed to
    consumers they are frozen with freeze(); after that every mutator
    raises FrozenDefinitionError.
    """

    # Fields that cannot be reassigned once set
    _identity: ClassVar[tuple[str, ...]] = ("name",)

    name: str
    annotations: dict[str, str] = field(default_factory=dict, kw_only=True)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidArgumentError("Null name")
        self._frozen = False

    def __setattr__(self, key: str, value: Any) -> None:
        if self.__dict__.get("_frozen"):
            raise FrozenDefinitionError(f"{type(self).__name__} {self.name} is frozen")
        if key in self._identity and key in self.__dict__:
            raise AttributeError(f"{key} is immutable")
        super().__setattr__(key, value)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenDefinitionError(f"{type(self).__name__} {self.name} is frozen")

    def get_annotation(self, key: str) -> str | None:
        """Return the annotation value for key, or None if it is not set."""
        return self.annotations.get(str(key))

    def set_annotation(self, key: str, value: str) -> None:
        """Add or overwrite an annotation."""
        self._check_mutable()
        self.annotations[str(key)] = value

    def update_annotations(self, annotations: Mapping[str, str]) -> None:
        """Merge annotations, overwriting existing keys."""
        self._check_mutable()
        for key, value in annotations.items():
            self.annotations[str(key)] = value

    def flag(self, key: str) -> bool:
        """Read an annotation as a boolean flag."""
        return parse_bool(self.get_annotation(key))

    @property
    def doc(self) -> str | None:
        return self.get_annotation(Annotation.DOC_STRING)

    def freeze(self) -> None:
        """End the build phase. Calling it again has no effect."""
        if self._frozen:
            return
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))
        object.__setattr__(self, "_frozen", True)
