"""Pytest configuration for codec quality domain tests.

Provides an in-memory CoefficientRepository fake so domain tests can exercise
tables the published store would reject or never contain (e.g. a missing
bandwidth/mode pair) without depending on infrastructure adapters.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import pytest

from domain.codec_quality.value_objects import (
    BandwidthClass,
    CoefficientEntry,
    ControlMode,
)


class InMemoryCoefficientRepository:
    """Dict-backed repository; pairs may map to empty dicts on purpose."""

    def __init__(
        self,
        table: dict[tuple[BandwidthClass, ControlMode], dict[int, CoefficientEntry]],
    ) -> None:
        self._table = table
        self.calls: list[str] = []

    def configurations(self) -> Iterator[tuple[BandwidthClass, ControlMode]]:
        self.calls.append("configurations")
        return iter(list(self._table))

    def get_configuration(
        self, bandwidth: BandwidthClass, mode: ControlMode
    ) -> Mapping[int, CoefficientEntry] | None:
        self.calls.append("get_configuration")
        return self._table.get((bandwidth, mode))

    def get_entry(
        self, bandwidth: BandwidthClass, mode: ControlMode, bitrate: int
    ) -> CoefficientEntry | None:
        self.calls.append("get_entry")
        configuration = self._table.get((bandwidth, mode))
        return None if configuration is None else configuration.get(bitrate)


def _entry(ie: float, random: float = 10.0, bursty: float = 8.0) -> CoefficientEntry:
    return CoefficientEntry(impairment=ie, loss_random=random, loss_bursty=bursty)


@pytest.fixture
def partial_repository() -> InMemoryCoefficientRepository:
    """Only swb/vbr populated (inserted out of bitrate order); wb/cbr empty."""
    return InMemoryCoefficientRepository(
        {
            (BandwidthClass.SWB, ControlMode.VBR): {
                25: _entry(20.0, 11.0, 9.0),
                14: _entry(38.0, 16.5, 9.1),
                40: _entry(10.5, 9.8, 8.0),
            },
            (BandwidthClass.WB, ControlMode.CBR): {},
        }
    )


@pytest.fixture
def repository_factory() -> type[InMemoryCoefficientRepository]:
    """Build custom in-memory repositories inside a test."""
    return InMemoryCoefficientRepository
