"""Interface definition file parser using Lark."""

import logging
import os
from collections import Counter
from dataclasses import dataclass
from typing import Any, TypeVar

from lark import Lark, Token
from lark.visitors import Transformer

from busdef.defs import (
    Access,
    ArgDef,
    Direction,
    InterfaceDef,
    MethodDef,
    PropertyDef,
    SignalDef,
)
from busdef.defs.annotations import resolve_key

from .signature import SignatureError, check_member, split_signature

logger = logging.getLogger(__name__)

_g_parser: Lark | None = None


class ValidationError(RuntimeError):
    """Raised when interface validation fails."""


@dataclass
class _Annotation:
    key: str
    value: str


@dataclass
class _Args:
    args: list[ArgDef]


@dataclass
class _Reply:
    args: list[ArgDef]


@dataclass
class _Member:
    """A member before it knows the interface it belongs to."""

    kind: str
    name: str
    annotations: dict[str, str]
    args: list[ArgDef]
    reply: list[ArgDef] | None = None
    type_signature: str = ""
    access: Access = Access.READ


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _find_one(args: list[Any], class_type: type[TFilter]) -> TFilter | None:
    filtered = _filter(args, class_type)
    if len(filtered) > 1:
        raise RuntimeError(f"Found more than one {class_type}")
    return filtered[0] if filtered else None


def _token(args: list[Any], token_type: str) -> str:
    for arg in args:
        if isinstance(arg, Token) and arg.type == token_type:
            return str(arg)
    raise RuntimeError(f"Missing {token_type}")


def _annotations(args: list[Any]) -> dict[str, str]:
    return {a.key: a.value for a in _filter(args, _Annotation)}


def _unquote(value: str) -> str:
    return value[1:-1].replace('\\"', '"').replace("\\\\", "\\")


class TreeTransformer(Transformer):
    """Transform parse tree into definitions."""

    def start(self, args: list[Any]) -> list[InterfaceDef]:
        return _filter(args, InterfaceDef)

    def annotation(self, args: list[Any]) -> _Annotation:
        value = args[1] if len(args) > 1 else None
        return _Annotation(
            key=resolve_key(str(args[0])),
            value=_unquote(str(value)) if value is not None else "true",
        )

    def arg(self, args: list[Any]) -> ArgDef:
        return ArgDef(
            name=_token(args, "NAME"),
            type_signature=_token(args, "SIGNATURE"),
            annotations=_annotations(args),
        )

    def arg_list(self, args: list[Any]) -> _Args:
        return _Args(args=_filter(args, ArgDef))

    def reply(self, args: list[Any]) -> _Reply:
        found = _find_one(args, _Args)
        return _Reply(args=found.args if found else [])

    def signal(self, args: list[Any]) -> _Member:
        found = _find_one(args, _Args)
        return _Member(
            kind="signal",
            name=_token(args, "NAME"),
            annotations=_annotations(args),
            args=found.args if found else [],
        )

    def method(self, args: list[Any]) -> _Member:
        found = _find_one(args, _Args)
        reply = _find_one(args, _Reply)
        return _Member(
            kind="method",
            name=_token(args, "NAME"),
            annotations=_annotations(args),
            args=found.args if found else [],
            reply=reply.args if reply else [],
        )

    def prop(self, args: list[Any]) -> _Member:
        return _Member(
            kind="property",
            name=_token(args, "NAME"),
            annotations=_annotations(args),
            args=[],
            type_signature=_token(args, "SIGNATURE"),
            access=Access(_token(args, "ACCESS")),
        )

    def interface(self, args: list[Any]) -> InterfaceDef:
        interface = InterfaceDef(_token(args, "DOTTED_NAME"), annotations=_annotations(args))
        for member in _filter(args, _Member):
            _add_member(interface, member)
        return interface


def _with_direction(args: list[ArgDef], direction: Direction) -> list[ArgDef]:
    return [
        ArgDef(a.name, a.type_signature, direction, annotations=a.annotations) for a in args
    ]


def _add_member(interface: InterfaceDef, member: _Member) -> None:
    if member.kind == "signal":
        signal = SignalDef(
            member.name,
            "".join(a.type_signature for a in member.args),
            interface.name,
            annotations=member.annotations,
        )
        signal.set_arg_list(member.args)
        interface.add_signal(signal)
    elif member.kind == "method":
        in_args = _with_direction(member.args, Direction.IN)
        out_args = _with_direction(member.reply or [], Direction.OUT)
        method = MethodDef(
            member.name,
            "".join(a.type_signature for a in in_args),
            interface.name,
            "".join(a.type_signature for a in out_args),
            annotations=member.annotations,
        )
        method.set_arg_list(in_args + out_args)
        interface.add_method(method)
    else:
        interface.add_property(
            PropertyDef(
                member.name,
                member.type_signature,
                interface.name,
                member.access,
                annotations=member.annotations,
            )
        )


def validate(interfaces: list[InterfaceDef]) -> None:
    """Validate parsed interface definitions."""
    for name, count in Counter(i.name for i in interfaces).items():
        if count > 1:
            raise ValidationError(f"Interface {name} declared {count} times")

    for interface in interfaces:
        names = [m.name for m in interface.members] + [p.name for p in interface.properties]
        for name, count in Counter(names).items():
            if count > 1:
                raise ValidationError(f"{interface.name}.{name} declared {count} times")

        for member in interface.members:
            problems = check_member(member)
            if problems:
                raise ValidationError(problems[0])

        for prop in interface.properties:
            try:
                types = split_signature(prop.type_signature)
            except SignatureError as e:
                raise ValidationError(f"{interface.name}.{prop.name}: {e}") from e
            if len(types) != 1:
                raise ValidationError(
                    f"{interface.name}.{prop.name}: property type {prop.type_signature!r} "
                    "must be exactly one complete type"
                )


def parse(text: str) -> list[InterfaceDef]:
    """Parse an interface definition file."""
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/busdef.lark", encoding="utf-8") as f:
            grammar = f.read()

        # Signatures may end in ")" so every prefix match has to be tried
        _g_parser = Lark(grammar, lexer="dynamic_complete")

    tree = _g_parser.parse(text)
    interfaces: list[InterfaceDef] = TreeTransformer().transform(tree)
    logger.debug("Parsed %d interfaces", len(interfaces))

    validate(interfaces)

    return interfaces
