"""Domain Port(s) for Coefficient Access.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete table here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from .value_objects import BandwidthClass, CoefficientEntry, ControlMode


class CoefficientRepository(Protocol):
    """Read-only port over the E-model coefficient table.

    Implementations live in infrastructure (e.g., the static Opus table).
    """

    def configurations(self) -> Iterable[tuple[BandwidthClass, ControlMode]]:
        """Return the (bandwidth, mode) pairs present, in table order."""
        ...

    def get_configuration(
        self, bandwidth: BandwidthClass, mode: ControlMode
    ) -> Mapping[int, CoefficientEntry] | None:
        """Return a read-only bitrate -> entry mapping, or None if absent."""
        ...

    def get_entry(
        self, bandwidth: BandwidthClass, mode: ControlMode, bitrate: int
    ) -> CoefficientEntry | None:
        """Return the entry at ``bitrate`` kbps, or None if absent."""
        ...
