"""Shared, read-only table of published interfaces."""

import logging
import threading
from collections.abc import Iterable, Iterator

from .interface import InterfaceDef
from .signal import SignalDef

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    """Raised when two different interfaces are published under one name."""


class InterfaceRegistry:
    """Interfaces built on one thread and shared read-only afterwards.

    publish() freezes the interface before it becomes visible, so readers
    on other threads only ever see finished definitions.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._interfaces: dict[str, InterfaceDef] = {}

    def publish(self, interface: InterfaceDef) -> InterfaceDef:
        """Freeze and register an interface.

        Publishing an interface equal to an already-registered one with the
        same members returns the registered instance. An interface rejected
        with RegistryError is left unfrozen.
        """
        with self._lock:
            existing = self._interfaces.get(interface.name)
            if existing is None:
                interface.freeze()
                self._interfaces[interface.name] = interface
                logger.debug("Published %s", interface)
                return interface

            if _same_members(existing, interface):
                interface.freeze()
                logger.debug("%s already published", interface.name)
                return existing

        raise RegistryError(f"Interface {interface.name} already published with other members")

    def get(self, name: str) -> InterfaceDef | None:
        with self._lock:
            return self._interfaces.get(name)

    def find_signal(self, interface_name: str, name: str) -> SignalDef | None:
        interface = self.get(interface_name)
        if interface is None:
            return None
        return interface.get_signal(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._interfaces

    def __len__(self) -> int:
        with self._lock:
            return len(self._interfaces)

    def __iter__(self) -> Iterator[InterfaceDef]:
        with self._lock:
            interfaces = sorted(self._interfaces.values(), key=lambda i: i.name)
        return iter(interfaces)


def _same_members(a: InterfaceDef, b: InterfaceDef) -> bool:
    return (
        set(a.signals) == set(b.signals)
        and set(a.methods) == set(b.methods)
        and set(a.properties) == set(b.properties)
    )


def dedupe_signals(signals: Iterable[SignalDef]) -> list[SignalDef]:
    """Drop signals equal to an earlier one, keeping the first occurrence."""
    seen: set[SignalDef] = set()
    result: list[SignalDef] = []
    for signal in signals:
        if signal in seen:
            continue
        seen.add(signal)
        result.append(signal)
    return result
