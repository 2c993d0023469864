"""Build definitions from introspection XML received from a peer."""

import logging
import xml.etree.ElementTree as ET
from enum import Enum
from typing import TypeVar

from busdef.defs import (
    Access,
    ArgDef,
    Direction,
    InterfaceDef,
    MethodDef,
    PropertyDef,
    SignalDef,
)

from .parser import ValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _annotations(element: ET.Element) -> dict[str, str]:
    return {
        a.attrib["name"]: a.attrib.get("value", "")
        for a in element.findall("annotation")
        if "name" in a.attrib
    }


def _enum(kind: type[E], element: ET.Element, attribute: str, value: str) -> E:
    try:
        return kind(value)
    except ValueError as e:
        raise ValidationError(f"<{element.tag}> has invalid {attribute} {value!r}") from e


def _args(element: ET.Element, default: Direction | None) -> list[ArgDef]:
    args: list[ArgDef] = []
    for a in element.findall("arg"):
        direction = a.attrib.get("direction")
        args.append(
            ArgDef(
                a.attrib.get("name", ""),
                a.attrib.get("type", ""),
                _enum(Direction, a, "direction", direction) if direction and default else default,
                annotations=_annotations(a),
            )
        )
    return args


def _required(element: ET.Element, attribute: str) -> str:
    value = element.attrib.get(attribute)
    if value is None:
        raise ValidationError(f"<{element.tag}> without {attribute} attribute")
    return value


def _interface(element: ET.Element) -> InterfaceDef:
    interface = InterfaceDef(_required(element, "name"), annotations=_annotations(element))

    for child in element:
        if child.tag == "signal":
            # Signal args are outputs on the wire but carry no direction here
            args = _args(child, None)
            signal = SignalDef(
                _required(child, "name"),
                "".join(a.type_signature for a in args),
                interface.name,
                annotations=_annotations(child),
            )
            signal.set_arg_list(args)
            interface.add_signal(signal)
        elif child.tag == "method":
            args = _args(child, Direction.IN)
            method = MethodDef(
                _required(child, "name"),
                "".join(a.type_signature for a in args if a.direction == Direction.IN),
                interface.name,
                "".join(a.type_signature for a in args if a.direction == Direction.OUT),
                annotations=_annotations(child),
            )
            method.set_arg_list(args)
            interface.add_method(method)
        elif child.tag == "property":
            interface.add_property(
                PropertyDef(
                    _required(child, "name"),
                    _required(child, "type"),
                    interface.name,
                    _enum(Access, child, "access", child.attrib.get("access", Access.READ)),
                    annotations=_annotations(child),
                )
            )

    return interface


def read(text: str) -> list[InterfaceDef]:
    """Read the interfaces of an introspection document.

    Accepts a <node> document or a bare <interface>. Child nodes are not
    followed.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ValidationError(f"Malformed introspection XML: {e}") from e

    if root.tag == "interface":
        elements = [root]
    elif root.tag == "node":
        elements = root.findall("interface")
    else:
        raise ValidationError(f"Unexpected root element <{root.tag}>")

    interfaces = [_interface(e) for e in elements]
    logger.debug("Read %d interfaces from introspection", len(interfaces))
    return interfaces
